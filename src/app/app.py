"""Entrypoint da aplicacao (ASGI / FastAPI).

Uso (producao):
    uvicorn app.app:app --host 0.0.0.0 --port 3000

Uso (desenvolvimento):
    python -m app.app
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.routes import create_api_router
from api.routes.errors import register_exception_handlers
from api.routes.index.router import API_VERSION
from api.routes.middleware import correlation_id_middleware
from app.bootstrap import create_post_provider, initialize_app, validate_runtime_settings
from config.logging import get_logger
from config.settings import get_base_settings

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from app.protocols import PostProviderProtocol

# Inicializar logging ANTES de qualquer log de modulo
initialize_app()

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Cria o provedor no startup (se nao injetado) e fecha no shutdown."""
    logger.info("app_starting", extra={"port": get_base_settings().port})
    validate_runtime_settings()

    owns_provider = getattr(app.state, "post_provider", None) is None
    if owns_provider:
        app.state.post_provider = create_post_provider()

    yield

    logger.info("app_shutting_down")
    if owns_provider:
        await app.state.post_provider.aclose()


def create_app(post_provider: PostProviderProtocol | None = None) -> FastAPI:
    """Cria e configura a aplicacao FastAPI.

    Args:
        post_provider: Provedor de posts injetado (ex.: fake em testes).
            Se None, o lifespan cria o cliente X API a partir do ambiente.

    Returns:
        Aplicacao FastAPI configurada.
    """
    fastapi_app = FastAPI(
        title="Twitter Scraper API",
        description="Leitura de posts X/Twitter por ID ou URL",
        version=API_VERSION,
        lifespan=lifespan,
    )
    fastapi_app.state.post_provider = post_provider

    fastapi_app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    fastapi_app.middleware("http")(correlation_id_middleware)

    register_exception_handlers(fastapi_app)
    fastapi_app.include_router(create_api_router())

    logger.info("app_configured")
    return fastapi_app


# Aplicacao ASGI exposta para uvicorn
app = create_app()


def main() -> None:
    """Entrypoint para execucao direta."""
    import uvicorn

    settings = get_base_settings()
    logger.info("server_listening", extra={"port": settings.port})
    uvicorn.run(
        "app.app:app",
        host="0.0.0.0",
        port=settings.port,
        reload=settings.environment == "development",
    )


if __name__ == "__main__":
    main()
