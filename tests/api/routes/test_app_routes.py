"""Testes de rotas estaticas e handlers de erro globais."""

from __future__ import annotations

from datetime import datetime

import httpx
import pytest

from app.app import create_app
from tests.fakes.fake_post_provider import FakePostProvider


class BrokenProvider:
    """Provedor que nunca deveria ser chamado."""

    async def fetch_post(self, post_id: str, params: object) -> dict:
        raise AssertionError("unexpected call")


def _async_client(app) -> httpx.AsyncClient:
    transport = httpx.ASGITransport(app=app, raise_app_exceptions=False)
    return httpx.AsyncClient(transport=transport, base_url="http://testserver")


@pytest.mark.asyncio
async def test_health_returns_liveness_payload() -> None:
    async with _async_client(create_app(post_provider=BrokenProvider())) as client:
        response = await client.get("/health")

    payload = response.json()
    assert response.status_code == 200
    assert payload["success"] is True
    assert payload["message"] == "Twitter Scraper API is running"
    assert datetime.fromisoformat(payload["timestamp"])


@pytest.mark.asyncio
async def test_root_returns_documentation() -> None:
    async with _async_client(create_app(post_provider=BrokenProvider())) as client:
        response = await client.get("/")

    payload = response.json()
    assert response.status_code == 200
    assert payload["message"] == "Twitter Scraper API"
    assert "POST /tweet" in payload["endpoints"]


@pytest.mark.asyncio
@pytest.mark.parametrize(("method", "path"), [("GET", "/nope"), ("DELETE", "/tweet")])
async def test_unmatched_route_returns_endpoint_not_found(method: str, path: str) -> None:
    async with _async_client(create_app(post_provider=BrokenProvider())) as client:
        response = await client.request(method, path)

    assert response.status_code == 404
    assert response.json() == {"success": False, "error": "Endpoint not found"}


@pytest.mark.asyncio
async def test_uncaught_exception_returns_generic_500() -> None:
    app = create_app(post_provider=FakePostProvider())

    @app.get("/boom")
    async def boom() -> None:
        raise RuntimeError("detalhe interno")

    async with _async_client(app) as client:
        response = await client.get("/boom")

    assert response.status_code == 500
    assert response.json() == {"success": False, "error": "Internal server error"}
