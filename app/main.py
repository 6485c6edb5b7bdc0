import time
from datetime import datetime
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request

from .api.routes import PING_ROUTES, RouteTable, build_router
from .config import get_app_config
from .logging_config import log_api_access

_app_config = get_app_config()


def create_app(route_table: Optional[RouteTable] = None) -> FastAPI:
    app = FastAPI(title="Ping Server", version="1.0.0")
    app.include_router(build_router(PING_ROUTES if route_table is None else route_table))

    @app.on_event("startup")
    async def startup_event():
        _app_config.logger.info(f"Server started at {datetime.now().isoformat()}")

    @app.on_event("shutdown")
    async def shutdown_event():
        _app_config.logger.info(f"Server stopped at {datetime.now().isoformat()}")

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start_time = time.time()
        client = request.client.host if request.client else None

        try:
            response = await call_next(request)
            process_time = time.time() - start_time
            log_api_access(request.method, request.url.path, client, response.status_code, process_time)
            return response
        except Exception as e:
            process_time = time.time() - start_time
            log_api_access(request.method, request.url.path, client, 500, process_time, error=str(e))
            _app_config.logger.error(f"{request.method} {request.url.path} failed: {e} ({process_time:.3f}s)")
            raise

    return app


app = create_app()


def run() -> None:
    uvicorn.run(app, host=_app_config.host, port=_app_config.port, log_config=None)


if __name__ == "__main__":
    run()
