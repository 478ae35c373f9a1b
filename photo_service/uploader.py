from typing import Iterable, List

import httpx
from loguru import logger

from .constants import CONTENT_TRANSFER_ENCODING_HEADER, UPLOAD_ENDPOINT, content_type_for
from .errors import translate_errors
from .filesystem import FileSystem, PathType
from .models import UploadResponse


class PhotoUploader:
    def __init__(self, file_system: FileSystem, http_client: httpx.AsyncClient, base_url: str) -> None:
        self.logger = logger.bind(component=self.__class__.__name__)
        self._file_system = file_system
        self._http_client = http_client
        self._url = f"{base_url}{UPLOAD_ENDPOINT}"

    async def upload(self, paths: Iterable[PathType]) -> List[str]:
        """
        Upload each existing file in order and return the remote references.
        Missing files are skipped. The first failure aborts the whole call;
        references of photos uploaded before it are not returned.
        """
        urls: List[str] = []
        for path in paths:
            if not await self._file_system.is_readable_file(path):
                self.logger.warning(f"Skipping photo {path}: file no longer exists")
                continue
            try:
                content = await self._file_system.read_bytes(path)
            except FileNotFoundError:
                self.logger.warning(f"Skipping photo {path}: file vanished before it could be read")
                continue

            urls.append(await self._upload_one(path, content))
        return urls

    async def _upload_one(self, path: PathType, content: bytes) -> str:
        headers = {
            "Content-Type": content_type_for(path),
            CONTENT_TRANSFER_ENCODING_HEADER: "binary",
        }
        with translate_errors(self._url):
            self.logger.debug(f"POST {self._url} ({len(content)} bytes from {path})")
            response = await self._http_client.post(self._url, content=content, headers=headers)
            response.raise_for_status()
            future_url = UploadResponse.model_validate(response.json()).future_url
        self.logger.info(f"Uploaded photo {path} as {future_url}")
        return future_url
