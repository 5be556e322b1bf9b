"""Agregador de rotas.

Uso:
    from api.routes import create_api_router

    app = FastAPI()
    app.include_router(create_api_router())
"""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.health.router import router as health_router
from api.routes.index.router import router as index_router
from api.routes.x.router import router as tweet_router


def create_api_router() -> APIRouter:
    """Cria router principal com todos os sub-routers registrados."""
    api_router = APIRouter()

    api_router.include_router(index_router, tags=["docs"])
    api_router.include_router(health_router, tags=["health"])
    api_router.include_router(tweet_router, tags=["tweets"])

    return api_router
