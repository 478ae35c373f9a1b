from typing import Literal
from urllib.parse import urlparse

from pydantic import field_validator
from pydantic_settings import BaseSettings

from .constants import DEFAULT_PHOTO_SERVICE_URL


def normalize_base_url(url: str) -> str:
    """Strip whitespace and make sure the base URL ends with a single '/'."""
    text = (url or "").strip()
    if not text:
        raise ValueError("Photo service base URL must not be empty")
    return text.rstrip("/") + "/"


class Settings(BaseSettings):
    PROJECT_NAME: str = "PhotoService"
    # Env
    ENVIRONMENT: Literal["development", "production"] = "development"
    LOG_LEVEL: str = "INFO"

    # Photo hosting service
    PHOTO_SERVICE_URL: str = DEFAULT_PHOTO_SERVICE_URL
    # Only used for the client built by open_photo_service()
    PHOTO_SERVICE_TIMEOUT_SECONDS: float = 30.0

    @field_validator("PHOTO_SERVICE_URL")
    @classmethod
    def validate_photo_service_url(cls, v: str) -> str:
        text = normalize_base_url(v)
        parsed = urlparse(text)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ValueError("PHOTO_SERVICE_URL must be an absolute http(s) URL")
        return text

    @field_validator("PHOTO_SERVICE_TIMEOUT_SECONDS")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("PHOTO_SERVICE_TIMEOUT_SECONDS must be positive")
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown LOG_LEVEL: {v}")
        return level

    class Config:
        case_sensitive = True
        env_file = ".env"
