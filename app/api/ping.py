"""
Ping endpoint.
Answers with a fixed greeting so callers can check the server is reachable.
"""
from fastapi.responses import PlainTextResponse

from app.models import PingResponse


async def ping() -> PlainTextResponse:
    return PingResponse().render()
