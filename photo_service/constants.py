import os
from typing import Union

from loguru import logger

# API Route Constants
UPLOAD_ENDPOINT = "upload.php"
ACTIVATE_ENDPOINT = "activate.php"

DEFAULT_PHOTO_SERVICE_URL = "https://streetcomplete.app/photo-upload/"

# Headers
CONTENT_TRANSFER_ENCODING_HEADER = "Content-Transfer-Encoding"
JSON_CONTENT_TYPE = "application/json"

# Status codes with special meaning for activation
HTTP_410_GONE = 410

DEFAULT_IMAGE_CONTENT_TYPE = "image/jpeg"

IMAGE_CONTENT_TYPES = {
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".png": "image/png",
    ".webp": "image/webp",
    ".gif": "image/gif",
    ".heic": "image/heic",
}


def content_type_for(path: Union[str, os.PathLike]) -> str:
    """Guess the image MIME type from the file extension, defaulting to JPEG."""
    extension = os.path.splitext(os.fspath(path))[1].lower()
    content_type = IMAGE_CONTENT_TYPES.get(extension)
    if content_type is None:
        logger.warning(f"Unknown photo extension '{extension}' for {path}, sending as {DEFAULT_IMAGE_CONTENT_TYPE}")
        return DEFAULT_IMAGE_CONTENT_TYPE
    return content_type
