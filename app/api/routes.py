"""
Route table.
Explicit (method, path) -> handler mapping, turned into a router at startup.
"""
from collections import defaultdict
from typing import Awaitable, Callable, Dict, List, Mapping, Set, Tuple

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from app.api.ping import ping

Handler = Callable[..., Awaitable]
RouteTable = Mapping[Tuple[str, str], Handler]

HTTP_METHODS = {"GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"}
PING_PATH = "/ping"
PING_METHODS = ("GET", "HEAD", "POST", "PUT", "PATCH", "DELETE")

PING_ROUTES: Dict[Tuple[str, str], Handler] = {
    (method, PING_PATH): ping for method in PING_METHODS
}


def build_router(route_table: RouteTable) -> APIRouter:
    router = APIRouter()
    grouped: Dict[Tuple[str, Handler], List[str]] = defaultdict(list)
    seen: Set[Tuple[str, str]] = set()

    for (method, path), handler in route_table.items():
        method = method.upper()
        if method not in HTTP_METHODS:
            raise ValueError(f"Unsupported HTTP method {method!r} for route {path!r}")
        if not path.startswith("/"):
            raise ValueError(f"Route path must start with '/', got {path!r}")
        if (method, path) in seen:
            raise ValueError(f"Duplicate route {method} {path!r} in route table")
        seen.add((method, path))
        grouped[(path, handler)].append(method)

    for (path, handler), methods in grouped.items():
        router.add_api_route(
            path,
            handler,
            methods=methods,
            response_class=PlainTextResponse,
        )
    return router
