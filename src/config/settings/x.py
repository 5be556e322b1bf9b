"""Settings especificas do provedor X/Twitter.

Configuracoes de acesso a X API v2 (leitura de posts).
Aceita nomes com prefixo `X_` e os nomes legados sem prefixo
(API_KEY, KEY_SECRET, ACCESS_TOKEN, ACCESS_TOKEN_SECRET, BEARER_TOKEN).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache

# Constantes da X API
X_API_VERSION: str = "2"
X_API_BASE_URL: str = "https://api.twitter.com"


@dataclass(frozen=True)
class XSettings:
    """Configuracoes do provedor X/Twitter.

    Attributes:
        bearer_token: Bearer Token app-only
        api_key: API Key (Consumer Key)
        api_secret: API Secret (Consumer Secret)
        access_token: Access Token do usuario
        access_token_secret: Access Token Secret do usuario
        api_version: Versao da API
        api_base_url: URL base da API
        request_timeout_seconds: Timeout para requisicoes HTTP
    """

    # Credenciais
    bearer_token: str = field(default="", repr=False)
    api_key: str = field(default="", repr=False)
    api_secret: str = field(default="", repr=False)
    access_token: str = field(default="", repr=False)
    access_token_secret: str = field(default="", repr=False)

    # API
    api_version: str = X_API_VERSION
    api_base_url: str = X_API_BASE_URL

    request_timeout_seconds: float = 30.0

    @property
    def api_endpoint(self) -> str:
        """URL base completa da API com versao."""
        return f"{self.api_base_url.rstrip('/')}/{self.api_version}"

    @property
    def has_credentials(self) -> bool:
        """True se ha bearer token ou par API key/secret."""
        return bool(self.bearer_token or (self.api_key and self.api_secret))

    def validate(self) -> list[str]:
        """Valida configuracoes minimas do provedor.

        Returns:
            Lista de erros de validacao (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.has_credentials:
            errors.append("X_BEARER_TOKEN ou X_API_KEY+X_API_SECRET nao configurado")

        if self.access_token and not self.access_token_secret:
            errors.append("X_ACCESS_TOKEN_SECRET nao configurado")

        if self.request_timeout_seconds <= 0:
            errors.append("X_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        return errors


def _env(name: str, legacy_name: str) -> str:
    return os.getenv(name) or os.getenv(legacy_name, "")


def _load_from_env() -> XSettings:
    """Carrega XSettings de variaveis de ambiente."""
    return XSettings(
        bearer_token=_env("X_BEARER_TOKEN", "BEARER_TOKEN"),
        api_key=_env("X_API_KEY", "API_KEY"),
        api_secret=_env("X_API_SECRET", "KEY_SECRET"),
        access_token=_env("X_ACCESS_TOKEN", "ACCESS_TOKEN"),
        access_token_secret=_env("X_ACCESS_TOKEN_SECRET", "ACCESS_TOKEN_SECRET"),
        api_version=os.getenv("X_API_VERSION", X_API_VERSION),
        api_base_url=os.getenv("X_API_BASE_URL", X_API_BASE_URL),
        request_timeout_seconds=float(os.getenv("X_REQUEST_TIMEOUT_SECONDS", "30")),
    )


@lru_cache(maxsize=1)
def get_x_settings() -> XSettings:
    """Retorna instancia cacheada de XSettings."""
    return _load_from_env()
