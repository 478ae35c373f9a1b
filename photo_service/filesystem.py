import os
from typing import Protocol, Union

import aiofiles
import aiofiles.os

PathType = Union[str, os.PathLike]


class FileSystem(Protocol):
    async def is_readable_file(self, path: PathType) -> bool:
        """Return True if a regular, readable file exists at path."""

    async def read_bytes(self, path: PathType) -> bytes:
        """Return the full binary content of the file at path."""


class LocalFileSystem:
    """FileSystem backed by the local disk, without blocking the event loop."""

    async def is_readable_file(self, path: PathType) -> bool:
        if not await aiofiles.os.path.isfile(path):
            return False
        return await aiofiles.os.access(path, os.R_OK)

    async def read_bytes(self, path: PathType) -> bytes:
        async with aiofiles.open(path, "rb") as f:
            return await f.read()
