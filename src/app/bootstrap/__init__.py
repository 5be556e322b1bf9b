"""Bootstrap da aplicacao — inicializacao e wiring.

Composition root: configura logging, valida settings e cria o provedor
de posts injetado no app (app.state.post_provider).

Uso:
    from app.bootstrap import initialize_app, create_post_provider

    initialize_app()
    provider = create_post_provider()
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import get_base_settings, get_x_settings

if TYPE_CHECKING:
    from api.connectors.x import XHttpClient

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Configura logging JSON com correlation_id.

    Deve ser chamada uma vez no inicio do processo.
    """
    settings = get_base_settings()
    configure_logging(
        level=settings.log_level,
        service_name=settings.service_name,
        correlation_id_getter=get_correlation_id,
    )


def validate_runtime_settings() -> list[str]:
    """Valida settings no startup sem bloquear o boot.

    Credenciais ausentes geram WARNING; o processo sobe mesmo assim e as
    chamadas ao provedor falham com erro classificado.

    Returns:
        Lista de erros encontrados (vazia = OK).
    """
    errors: list[str] = []
    errors.extend(f"base: {error}" for error in get_base_settings().validate())
    errors.extend(f"x: {error}" for error in get_x_settings().validate())

    if not errors:
        logger.info("settings_validated", extra={"component": "bootstrap", "result": "ok"})
        return errors

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "error_count": len(errors),
            "errors": errors,
        },
    )
    return errors


def create_post_provider() -> XHttpClient:
    """Cria o cliente X API v2 com settings do ambiente."""
    from api.connectors.x import create_x_http_client

    return create_x_http_client(get_x_settings())
