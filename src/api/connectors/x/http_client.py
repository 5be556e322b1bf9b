"""Cliente HTTP especializado para X API v2 (leitura de posts).

Implementa PostProviderProtocol:
- GET /2/tweets/{id} com perfil de campos recebido do use case
- Autenticacao app-only: bearer token configurado ou troca de
  API key/secret por bearer token (POST /oauth2/token)
- Toda falha vira ProviderError(message, code); sem retry
- Logging sem tokens nem texto de posts
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from api.connectors.http_base import HttpClient, HttpClientConfig, HttpError
from api.connectors.x.x_errors import parse_x_error
from api.connectors.x.x_logging import log_success, log_x_error
from utils.errors import ProviderError

if TYPE_CHECKING:
    from collections.abc import Mapping

    import httpx

    from config.settings import XSettings

logger: logging.Logger = logging.getLogger(__name__)

_TWEET_PATH = "/tweets/{post_id}"
_TOKEN_PATH = "/oauth2/token"


class XHttpClient(HttpClient):
    """Cliente da X API v2 com autenticacao app-only."""

    def __init__(
        self,
        settings: XSettings,
        config: HttpClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        super().__init__(
            config or HttpClientConfig(timeout_seconds=settings.request_timeout_seconds),
            transport=transport,
        )
        self._settings = settings
        self._bearer_token = settings.bearer_token

    async def fetch_post(
        self,
        post_id: str,
        params: Mapping[str, str],
    ) -> dict[str, Any]:
        """Busca post por ID.

        Args:
            post_id: ID canonico do post
            params: Query params do perfil de campos

        Returns:
            JSON da X API contendo `data` (e `includes`, se houver)

        Raises:
            ProviderError: Erro HTTP, erro da X API ou falha de transporte
        """
        token = await self._get_bearer_token()
        url = f"{self._settings.api_endpoint}{_TWEET_PATH.format(post_id=post_id)}"
        try:
            response = await self.get(
                url,
                params=dict(params),
                headers={"Authorization": f"Bearer {token}"},
            )
        except HttpError as exc:
            raise ProviderError(str(exc)) from exc

        body = _decode_json(response)
        x_error = parse_x_error(response.status_code, body)
        if x_error is not None:
            log_x_error(x_error, "GET", _TWEET_PATH)
            raise ProviderError(x_error.message or x_error.title, code=x_error.code)

        log_success("GET", _TWEET_PATH, response.status_code)
        return body

    async def _get_bearer_token(self) -> str:
        """Retorna bearer token, trocando API key/secret na primeira chamada."""
        if self._bearer_token:
            return self._bearer_token

        api_key = self._settings.api_key
        api_secret = self._settings.api_secret
        if not api_key or not api_secret:
            logger.error("x_credentials_missing", extra={"component": "x_http_client"})
            raise ProviderError("X API credentials not configured", code=401)

        url = f"{self._settings.api_base_url.rstrip('/')}{_TOKEN_PATH}"
        try:
            response = await self.post(
                url,
                data={"grant_type": "client_credentials"},
                auth=(api_key, api_secret),
            )
        except HttpError as exc:
            raise ProviderError(str(exc)) from exc

        body = _decode_json(response)
        token = body.get("access_token") if isinstance(body, dict) else None
        if response.status_code >= 400 or not token:
            x_error = parse_x_error(max(response.status_code, 400), body)
            if x_error is not None:
                log_x_error(x_error, "POST", _TOKEN_PATH)
            raise ProviderError(
                "Failed to obtain X API bearer token",
                code=response.status_code if response.status_code >= 400 else None,
            )

        log_success("POST", _TOKEN_PATH, response.status_code)
        self._bearer_token = str(token)
        return self._bearer_token


def _decode_json(response: httpx.Response) -> Any:
    try:
        return response.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        logger.warning(
            "x_api_invalid_json",
            extra={"status_code": response.status_code},
        )
        return None


def create_x_http_client(settings: XSettings | None = None) -> XHttpClient:
    """Factory do cliente X com settings do ambiente.

    Args:
        settings: XSettings opcional. Se None, carrega do ambiente.
    """
    from config.settings import get_x_settings

    return XHttpClient(settings or get_x_settings())
