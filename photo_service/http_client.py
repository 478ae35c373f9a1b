from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

import httpx
from loguru import logger

from .api_client import PhotoServiceApiClient
from .config import Settings
from .filesystem import FileSystem, LocalFileSystem


@asynccontextmanager
async def open_photo_service(
    settings: Optional[Settings] = None,
    file_system: Optional[FileSystem] = None,
) -> AsyncIterator[PhotoServiceApiClient]:
    """
    Build a PhotoServiceApiClient on a dedicated httpx.AsyncClient and close
    that client on exit. Callers with their own AsyncClient should construct
    PhotoServiceApiClient directly instead.
    """
    settings = settings or Settings()
    logger.info("Initializing photo service HTTP client")
    client = httpx.AsyncClient(timeout=settings.PHOTO_SERVICE_TIMEOUT_SECONDS)
    try:
        yield PhotoServiceApiClient(
            file_system or LocalFileSystem(), client, settings.PHOTO_SERVICE_URL
        )
    finally:
        logger.info("Closing photo service HTTP client")
        await client.aclose()
