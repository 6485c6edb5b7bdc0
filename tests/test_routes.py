import pytest
from fastapi.routing import APIRoute

from app.api.ping import ping
from app.api.routes import PING_METHODS, PING_PATH, PING_ROUTES, build_router


def _api_routes(router):
    return [route for route in router.routes if isinstance(route, APIRoute)]


def test_default_table_maps_every_ping_method():
    assert set(PING_ROUTES) == {(method, PING_PATH) for method in PING_METHODS}
    assert all(handler is ping for handler in PING_ROUTES.values())


def test_entries_sharing_path_and_handler_become_one_route():
    routes = _api_routes(build_router(PING_ROUTES))
    assert len(routes) == 1
    assert routes[0].path == "/ping"
    assert routes[0].methods == set(PING_METHODS)


def test_method_names_are_normalised():
    routes = _api_routes(build_router({("get", "/ping"): ping}))
    assert routes[0].methods == {"GET"}


def test_distinct_paths_register_separate_routes():
    routes = _api_routes(build_router({("GET", "/ping"): ping, ("GET", "/status"): ping}))
    assert sorted(route.path for route in routes) == ["/ping", "/status"]


def test_empty_table_builds_empty_router():
    assert _api_routes(build_router({})) == []


def test_unknown_method_is_rejected():
    with pytest.raises(ValueError, match="Unsupported HTTP method"):
        build_router({("FETCH", "/ping"): ping})


def test_relative_path_is_rejected():
    with pytest.raises(ValueError, match="must start with '/'"):
        build_router({("GET", "ping"): ping})


def test_duplicate_route_after_normalising_is_rejected():
    async def other():
        return None

    with pytest.raises(ValueError, match="Duplicate route GET '/ping'"):
        build_router({("GET", "/ping"): ping, ("get", "/ping"): other})
