"""
Ping response model.
Fixed plain-text payload returned by the ping endpoint.
"""
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel, ConfigDict

PING_BODY = "Hi there!\n"


class PingResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    status_code: int = 200
    body: str = PING_BODY
    media_type: str = "text/plain"

    def render(self) -> PlainTextResponse:
        """Build the HTTP response for this payload"""
        return PlainTextResponse(
            content=self.body,
            status_code=self.status_code,
            media_type=self.media_type,
        )
