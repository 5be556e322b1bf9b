"""Testes do XHttpClient com httpx.MockTransport (sem rede)."""

from __future__ import annotations

import httpx
import pytest

from api.connectors.x import XHttpClient
from app.constants.x import build_field_selection
from config.settings import XSettings
from utils.errors import ProviderError

NOT_FOUND_BODY = {
    "errors": [
        {
            "value": "1",
            "detail": "Could not find tweet with id: [1].",
            "title": "Not Found Error",
            "resource_type": "tweet",
            "parameter": "id",
            "resource_id": "1",
            "type": "https://api.twitter.com/2/problems/resource-not-found",
        }
    ]
}


def _client(handler, **settings_kwargs) -> XHttpClient:
    settings = XSettings(**({"bearer_token": "token-abc"} | settings_kwargs))
    return XHttpClient(settings, transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_fetch_post_sends_bearer_and_field_selection() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"data": {"id": "42", "text": "oi"}})

    client = _client(handler)
    body = await client.fetch_post("42", build_field_selection())
    await client.aclose()

    assert body == {"data": {"id": "42", "text": "oi"}}
    request = seen[0]
    assert request.method == "GET"
    assert request.url.path == "/2/tweets/42"
    assert request.headers["Authorization"] == "Bearer token-abc"
    assert request.url.params["expansions"] == "author_id,attachments.media_keys"


@pytest.mark.asyncio
@pytest.mark.parametrize("status_code", [403, 429, 503])
async def test_http_error_status_becomes_provider_error(status_code: int) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            status_code,
            json={"title": "Erro", "detail": "detalhe do provedor", "status": status_code},
        )

    client = _client(handler)
    with pytest.raises(ProviderError) as exc_info:
        await client.fetch_post("42", {})
    await client.aclose()

    assert exc_info.value.code == status_code
    assert exc_info.value.message == "detalhe do provedor"


@pytest.mark.asyncio
async def test_ok_status_with_not_found_problem_maps_to_404() -> None:
    client = _client(lambda request: httpx.Response(200, json=NOT_FOUND_BODY))

    with pytest.raises(ProviderError) as exc_info:
        await client.fetch_post("1", {})
    await client.aclose()

    assert exc_info.value.code == 404


@pytest.mark.asyncio
async def test_transport_failure_has_no_code() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    client = _client(handler)
    with pytest.raises(ProviderError) as exc_info:
        await client.fetch_post("1", {})
    await client.aclose()

    assert exc_info.value.code is None


@pytest.mark.asyncio
async def test_api_key_secret_exchanged_for_bearer_token_once() -> None:
    token_calls: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/oauth2/token":
            token_calls.append(request)
            return httpx.Response(200, json={"token_type": "bearer", "access_token": "app-token"})
        assert request.headers["Authorization"] == "Bearer app-token"
        return httpx.Response(200, json={"data": {"id": "9", "text": "ok"}})

    client = _client(handler, bearer_token="", api_key="key", api_secret="secret")
    await client.fetch_post("9", {})
    await client.fetch_post("9", {})
    await client.aclose()

    assert len(token_calls) == 1
    assert token_calls[0].method == "POST"
    assert token_calls[0].headers["Authorization"].startswith("Basic ")
    assert b"grant_type=client_credentials" in token_calls[0].content


@pytest.mark.asyncio
async def test_missing_credentials_fail_without_request() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise AssertionError("nenhuma requisicao esperada")

    client = _client(handler, bearer_token="")
    with pytest.raises(ProviderError) as exc_info:
        await client.fetch_post("1", {})
    await client.aclose()

    assert exc_info.value.code == 401
