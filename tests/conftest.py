import os
import tempfile

import httpx
import pytest

# Must be set before app.main is imported, it configures logging at import time.
os.environ.setdefault("PING_SERVER_LOGS_DIR", tempfile.mkdtemp(prefix="ping-server-logs-"))

from app.logging_config import LoggingConfig  # noqa: E402


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def make_client():
    def _make(app, **transport_kwargs):
        transport = httpx.ASGITransport(app=app, **transport_kwargs)
        return httpx.AsyncClient(transport=transport, base_url="http://test")
    return _make


@pytest.fixture
def client(make_client):
    from app.main import app
    return make_client(app)


@pytest.fixture
def logging_config(tmp_path):
    config = LoggingConfig(str(tmp_path / "logs"))
    config.setup_logging()
    return config
