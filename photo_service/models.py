import json

from pydantic import BaseModel, ConfigDict, Field

# --- Wire Format Note ---
# The photo service is a pair of plain PHP endpoints. Upload answers with the
# reference the photo will have once activated; activation takes the OSM note id.


class UploadResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    future_url: str = Field(min_length=1)


class ActivateRequest(BaseModel):
    osm_note_id: int

    def to_body(self) -> bytes:
        # json.dumps keeps the ": " separator the service has always received
        return json.dumps(self.model_dump()).encode("utf-8")
