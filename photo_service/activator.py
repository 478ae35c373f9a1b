import httpx
from loguru import logger

from .constants import ACTIVATE_ENDPOINT, HTTP_410_GONE, JSON_CONTENT_TYPE
from .errors import translate_errors
from .models import ActivateRequest


class PhotoActivator:
    def __init__(self, http_client: httpx.AsyncClient, base_url: str) -> None:
        self.logger = logger.bind(component=self.__class__.__name__)
        self._http_client = http_client
        self._url = f"{base_url}{ACTIVATE_ENDPOINT}"

    async def activate(self, note_id: int) -> None:
        """
        Link the photos uploaded for a note to its OSM note id.
        A 410 Gone answer means the photos were already activated or have
        expired on the server, and is not reported as an error.
        """
        body = ActivateRequest(osm_note_id=note_id).to_body()
        with translate_errors(self._url):
            self.logger.debug(f"POST {self._url} for note {note_id}")
            response = await self._http_client.post(
                self._url, content=body, headers={"Content-Type": JSON_CONTENT_TYPE}
            )
            if response.status_code == HTTP_410_GONE:
                self.logger.warning(f"Photos for note {note_id} are gone (already activated or expired)")
                return
            response.raise_for_status()
        self.logger.info(f"Activated photos for note {note_id}")
