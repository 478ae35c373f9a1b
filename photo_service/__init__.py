from .api_client import PhotoServiceApiClient
from .config import Settings
from .errors import PhotoServiceConnectionError, PhotoServiceError
from .filesystem import FileSystem, LocalFileSystem
from .http_client import open_photo_service
from .logging import configure_logging

__all__ = [
    "PhotoServiceApiClient",
    "PhotoServiceConnectionError",
    "PhotoServiceError",
    "FileSystem",
    "LocalFileSystem",
    "Settings",
    "open_photo_service",
    "configure_logging",
]
