from contextlib import contextmanager
from typing import Optional, Any, Dict, Iterator

import httpx
from loguru import logger


class PhotoServiceError(Exception):
    """Base exception class for the photo service client."""
    def __init__(self, message: str, code: str = "internal_error", details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}


class PhotoServiceConnectionError(PhotoServiceError):
    """
    Raised for every network-related failure: the service could not be reached,
    answered with an error status, or sent a payload we could not decode.
    The original exception is kept as __cause__.
    """
    def __init__(self, message: str, **details: Any):
        super().__init__(message, code="connection_error", details=details)


@contextmanager
def translate_errors(url: str) -> Iterator[None]:
    """
    Wrap transport, HTTP status and decoding failures raised inside the block
    into PhotoServiceConnectionError.
    """
    try:
        yield
    except PhotoServiceConnectionError:
        raise
    except httpx.HTTPStatusError as e:
        status_code = e.response.status_code
        logger.error(f"Photo service returned HTTP {status_code} for {url}")
        raise PhotoServiceConnectionError(
            f"HTTP {status_code} from {url}", url=url, status_code=status_code
        ) from e
    except (httpx.HTTPError, OSError) as e:
        logger.error(f"Connection to photo service failed ({url}): {e!r}")
        raise PhotoServiceConnectionError(f"Could not reach {url}", url=url) from e
    except ValueError as e:
        # json.JSONDecodeError and pydantic.ValidationError both land here
        logger.error(f"Malformed response from {url}: {e}")
        raise PhotoServiceConnectionError(f"Malformed response from {url}", url=url) from e
