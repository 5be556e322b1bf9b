"""Settings base do servico.

Configuracoes comuns ao processo HTTP (ambiente, porta, nivel de log).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

Environment = Literal["development", "staging", "production"]

DEFAULT_PORT = 3000


@dataclass(frozen=True)
class BaseSettings:
    """Configuracoes base do processo.

    Attributes:
        environment: Ambiente de execucao (development|staging|production)
        service_name: Nome do servico para logs
        port: Porta HTTP de escuta
        log_level: Nivel de log do root logger
    """

    environment: Environment = "development"
    service_name: str = "tweet-lookup-api"
    port: int = DEFAULT_PORT
    log_level: str = "INFO"

    @property
    def is_production(self) -> bool:
        """Retorna True se ambiente e producao."""
        return self.environment == "production"

    def validate(self) -> list[str]:
        """Valida configuracoes base.

        Returns:
            Lista de erros (vazia = OK).
        """
        errors: list[str] = []

        if not self.service_name:
            errors.append("SERVICE_NAME nao pode ser vazio")

        if not 0 < self.port < 65536:
            errors.append(f"PORT invalida: {self.port}")

        return errors


def _parse_environment(env_str: str) -> Environment:
    """Converte string de ambiente para tipo Environment."""
    env_lower = env_str.lower()
    if env_lower in ("production", "prod"):
        return "production"
    if env_lower in ("staging", "stage"):
        return "staging"
    return "development"


def _parse_port(raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        return DEFAULT_PORT


def _load_base_from_env() -> BaseSettings:
    """Carrega BaseSettings de variaveis de ambiente."""
    return BaseSettings(
        environment=_parse_environment(os.getenv("ENVIRONMENT", "development")),
        service_name=os.getenv("SERVICE_NAME", "tweet-lookup-api"),
        port=_parse_port(os.getenv("PORT", str(DEFAULT_PORT))),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )


@lru_cache(maxsize=1)
def get_base_settings() -> BaseSettings:
    """Retorna instancia cacheada de BaseSettings."""
    return _load_base_from_env()
