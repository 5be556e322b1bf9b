"""Handlers de erro globais — respostas `{success: false, error}`.

- Rota inexistente (ou metodo nao suportado) → 404 "Endpoint not found"
- Excecao nao tratada → 500 "Internal server error", sem detalhes internos
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.constants.x import ENDPOINT_NOT_FOUND_MESSAGE, INTERNAL_ERROR_MESSAGE

logger = logging.getLogger(__name__)

_NOT_FOUND_STATUSES = frozenset({status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED})


async def http_exception_handler(
    request: Request,
    exc: StarletteHTTPException,
) -> JSONResponse:
    """Traduz HTTPException do roteador para o contrato de erro."""
    if exc.status_code in _NOT_FOUND_STATUSES:
        logger.info(
            "endpoint_not_found",
            extra={"method": request.method, "path": request.url.path},
        )
        return JSONResponse(
            content={"success": False, "error": ENDPOINT_NOT_FOUND_MESSAGE},
            status_code=status.HTTP_404_NOT_FOUND,
        )
    return JSONResponse(
        content={"success": False, "error": str(exc.detail)},
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Ultima barreira: loga traceback e responde 500 generico."""
    logger.error(
        "unhandled_error",
        exc_info=exc,
        extra={
            "method": request.method,
            "path": request.url.path,
            "error_type": type(exc).__name__,
        },
    )
    return JSONResponse(
        content={"success": False, "error": INTERNAL_ERROR_MESSAGE},
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Registra handlers de erro no app."""
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
