"""Middleware HTTP de correlation_id.

Usa o header `x-correlation-id` quando presente (senao gera UUID) e
devolve o valor no response.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.observability import get_correlation_id, reset_correlation_id, set_correlation_id

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from fastapi import Request, Response

CORRELATION_ID_HEADER = "x-correlation-id"


async def correlation_id_middleware(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    token = set_correlation_id(request.headers.get(CORRELATION_ID_HEADER))
    try:
        response = await call_next(request)
        response.headers[CORRELATION_ID_HEADER] = get_correlation_id()
        return response
    finally:
        reset_correlation_id(token)
