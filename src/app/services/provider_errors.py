"""Taxonomia de erros do provedor → NormalizedError.

Classificacao pelo codigo numerico reportado pelo provedor. Mensagens
fixas para 404/403/429; demais codigos repassam a mensagem do provedor.
"""

from __future__ import annotations

from app.constants.x import (
    ACCESS_DENIED_MESSAGE,
    NOT_FOUND_MESSAGE,
    RATE_LIMITED_MESSAGE,
    UNKNOWN_FAILURE_MESSAGE,
    PostErrorCategory,
)
from app.domain.post import NormalizedError

DEFAULT_FAILURE_CODE = 500

_KNOWN_FAILURES: dict[int, tuple[PostErrorCategory, str]] = {
    404: (PostErrorCategory.NOT_FOUND, NOT_FOUND_MESSAGE),
    403: (PostErrorCategory.ACCESS_DENIED, ACCESS_DENIED_MESSAGE),
    429: (PostErrorCategory.RATE_LIMITED, RATE_LIMITED_MESSAGE),
}


def classify_provider_error(code: int | None, message: str | None = None) -> NormalizedError:
    """Classifica falha do provedor em uma das quatro categorias.

    Args:
        code: Codigo numerico do provedor (None se ausente).
        message: Mensagem do provedor; usada apenas na categoria unknown.

    Returns:
        NormalizedError com categoria, mensagem e codigo exposto.
    """
    known = _KNOWN_FAILURES.get(code) if code is not None else None
    if known is not None:
        category, fixed_message = known
        return NormalizedError(category=category, message=fixed_message, code=code)

    return NormalizedError(
        category=PostErrorCategory.UNKNOWN,
        message=message or UNKNOWN_FAILURE_MESSAGE,
        code=code or DEFAULT_FAILURE_CODE,
    )
