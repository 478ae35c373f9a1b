import pytest

from photo_service.constants import content_type_for
from photo_service.filesystem import LocalFileSystem


@pytest.mark.asyncio
async def test_is_readable_file(tmp_path, picture):
    fs = LocalFileSystem()
    assert await fs.is_readable_file(picture)
    assert not await fs.is_readable_file(tmp_path / "missing.jpg")
    assert not await fs.is_readable_file(tmp_path)


@pytest.mark.asyncio
async def test_read_bytes(tmp_path):
    path = tmp_path / "photo.jpg"
    path.write_bytes(b"\xff\xd8data")
    assert await LocalFileSystem().read_bytes(path) == b"\xff\xd8data"


@pytest.mark.parametrize("path, expected", [
    ("photo.jpg", "image/jpeg"),
    ("PHOTO.JPEG", "image/jpeg"),
    ("dir.with.dots/photo.png", "image/png"),
    ("photo.webp", "image/webp"),
    ("photo.heic", "image/heic"),
    ("photo.bmp", "image/jpeg"),
    ("photo", "image/jpeg"),
])
def test_content_type_for(path, expected):
    assert content_type_for(path) == expected
