from app.models.ping import PING_BODY, PingResponse

__all__ = ["PING_BODY", "PingResponse"]
