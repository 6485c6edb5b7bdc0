import os

from .logging_config import get_logger, get_logging_config

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8123
DEFAULT_LOGS_DIR = "logs"


def _read_port(raw: str) -> int:
    try:
        port = int(raw)
    except ValueError:
        raise ValueError(f"PING_SERVER_PORT must be an integer, got {raw!r}") from None
    if not 0 < port < 65536:
        raise ValueError(f"PING_SERVER_PORT must be between 1 and 65535, got {port}")
    return port


class AppConfig:
    def __init__(self):
        self.host = os.getenv("PING_SERVER_HOST", DEFAULT_HOST)
        self.port = _read_port(os.getenv("PING_SERVER_PORT", str(DEFAULT_PORT)))
        self.logs_dir = os.getenv("PING_SERVER_LOGS_DIR", DEFAULT_LOGS_DIR)

        self.logging_config = get_logging_config(self.logs_dir)
        self.logging_config.setup_logging()
        self.logger = get_logger(__name__)

_app_config = None

def get_app_config() -> AppConfig:
    global _app_config
    if _app_config is None:
        _app_config = AppConfig()
    return _app_config
