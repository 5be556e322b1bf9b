"""Rotas HTTP da API.

- routes/index/: documentacao estatica (GET /)
- routes/health/: liveness (GET /health)
- routes/x/: leitura de posts (GET /tweet/{id}, POST /tweet)
- errors.py: handlers 404/500 no contrato `{success: false, error}`
- middleware.py: correlation_id por requisicao
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
