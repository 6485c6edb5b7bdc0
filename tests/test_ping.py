"""Endpoint tests for GET /ping."""
from __future__ import annotations

import asyncio

import pytest
from fastapi.responses import PlainTextResponse

from app.api.ping import ping
from app.main import create_app
from app.models import PING_BODY, PingResponse

pytestmark = pytest.mark.anyio


async def test_ping_returns_greeting(client):
    async with client:
        response = await client.get("/ping")
    assert response.status_code == 200
    assert response.content == b"Hi there!\n"
    assert response.headers["content-type"].startswith("text/plain")


async def test_ping_is_idempotent(client):
    async with client:
        responses = [await client.get("/ping") for _ in range(5)]
    assert {r.status_code for r in responses} == {200}
    assert len({r.content for r in responses}) == 1


async def test_ping_concurrent_requests_are_identical(client):
    async with client:
        responses = await asyncio.gather(*(client.get("/ping") for _ in range(100)))
    assert len(responses) == 100
    assert all(r.status_code == 200 for r in responses)
    assert all(r.content == PING_BODY.encode("utf-8") for r in responses)


async def test_ping_ignores_query_parameters(client):
    async with client:
        response = await client.get("/ping", params={"name": "ignored"})
    assert response.status_code == 200
    assert response.text == PING_BODY


@pytest.mark.parametrize("method", ["POST", "PUT", "PATCH", "DELETE"])
async def test_ping_answers_other_methods(client, method):
    async with client:
        response = await client.request(method, "/ping", content=b"ignored body")
    assert response.status_code == 200
    assert response.text == PING_BODY


async def test_ping_answers_head(client):
    async with client:
        response = await client.head("/ping")
    assert response.status_code == 200


async def test_unknown_path_never_reaches_handler(make_client):
    calls = []

    async def spy() -> PlainTextResponse:
        calls.append(1)
        return PingResponse().render()

    app = create_app({("GET", "/ping"): spy})
    async with make_client(app) as client:
        missing = await client.get("/pong")
        found = await client.get("/ping")

    assert missing.status_code == 404
    assert found.status_code == 200
    assert calls == [1]


async def test_unmapped_method_is_rejected_by_framework(make_client):
    app = create_app({("GET", "/ping"): ping})
    async with make_client(app) as client:
        response = await client.post("/ping")
    assert response.status_code == 405
