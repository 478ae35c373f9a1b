import httpx
import pytest
from typing import Callable, List

from photo_service import LocalFileSystem, PhotoServiceApiClient

BASE_URL = "http://example.com/"

# Start of a JFIF header followed by filler, enough to stand in for a photo
JPEG_BYTES = b"\xff\xd8\xff\xe0\x00\x10JFIF\x00\x01\x01\x00\x00\x01\x00\x01\x00\x00" + b"\x00" * 64 + b"\xff\xd9"


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it was asked to send."""
    def __init__(self, handler: Callable):
        self.requests: List[httpx.Request] = []

        def record(request: httpx.Request):
            self.requests.append(request)
            return handler(request)

        super().__init__(record)


@pytest.fixture
def picture(tmp_path):
    path = tmp_path / "hai_phong_street.jpg"
    path.write_bytes(JPEG_BYTES)
    return str(path)


@pytest.fixture
def make_client():
    """Factory building a client on top of a recording mock transport."""

    def _make(handler: Callable, file_system=None):
        transport = RecordingTransport(handler)
        http_client = httpx.AsyncClient(transport=transport)
        client = PhotoServiceApiClient(file_system or LocalFileSystem(), http_client, BASE_URL)
        return client, transport

    return _make


def respond_ok(body=None):
    def handler(request: httpx.Request) -> httpx.Response:
        if body is None:
            return httpx.Response(200)
        return httpx.Response(200, json=body)
    return handler


def respond_error(status_code: int):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, text="error")
    return handler


def raise_connect_error(request: httpx.Request) -> httpx.Response:
    raise httpx.ConnectError("Connection refused", request=request)


def raise_os_error(request: httpx.Request) -> httpx.Response:
    raise OSError("Broken pipe")
