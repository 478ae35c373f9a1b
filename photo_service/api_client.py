import httpx
from loguru import logger
from typing import Iterable, List

from .activator import PhotoActivator
from .config import normalize_base_url
from .filesystem import FileSystem, PathType
from .uploader import PhotoUploader


class PhotoServiceApiClient:
    """
    Client for the photo hosting service used by OSM notes.

    Photos are uploaded before the note exists; once the note has been created
    they are activated with its id. All network failures surface as
    PhotoServiceConnectionError. The client holds no state besides its
    configuration and can be shared between concurrent tasks.
    """
    def __init__(self, file_system: FileSystem, http_client: httpx.AsyncClient, base_url: str):
        self._base_url = normalize_base_url(base_url)
        self._uploader = PhotoUploader(file_system, http_client, self._base_url)
        self._activator = PhotoActivator(http_client, self._base_url)
        logger.debug(f"Initialized PhotoServiceApiClient with base_url: {self._base_url}")

    @property
    def base_url(self) -> str:
        return self._base_url

    async def upload(self, paths: Iterable[PathType]) -> List[str]:
        """Upload the given photos and return their remote references."""
        return await self._uploader.upload(paths)

    async def activate(self, note_id: int) -> None:
        """Activate the photos previously uploaded for the given note id."""
        await self._activator.activate(note_id)
