"""Resolucao de referencias de post (ID numerico ou URL) para ID canonico.

Funcao pura, sem IO e sem estado. Nunca levanta excecao: a ausencia de
resultado (None) e o unico sinal de falha.

Ordem de tentativa:
1. Entrada numerica (apos trim) → retornada como esta.
2. Padroes textuais: twitter.com, x.com e link encurtado (t.co).
3. Fallback estrutural: segmento `status` seguido de segmento numerico.
"""

from __future__ import annotations

import logging
import re
from urllib.parse import urlsplit

logger = logging.getLogger(__name__)

_NUMERIC_ID = re.compile(r"[0-9]+")

_STATUS_URL_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"twitter\.com/\w+/status/([0-9]+)"),
    re.compile(r"x\.com/\w+/status/([0-9]+)"),
)

# Links encurtados exigem seguir redirect, fora do escopo do resolver
SHORT_LINK_HOSTS = frozenset({"t.co"})


def is_canonical_id(value: str) -> bool:
    """Retorna True se o valor e um ID canonico (somente digitos ASCII)."""
    return bool(_NUMERIC_ID.fullmatch(value))


def resolve_post_reference(raw: str | None) -> str | None:
    """Converte referencia livre em ID canonico de post.

    Args:
        raw: ID numerico ou URL de post (twitter.com, x.com, outros hosts
            com path `.../status/<id>`).

    Returns:
        ID canonico (somente digitos) ou None se nao resolvivel.
    """
    if not raw:
        return None

    candidate = raw.strip()
    if is_canonical_id(candidate):
        return candidate

    for pattern in _STATUS_URL_PATTERNS:
        match = pattern.search(candidate)
        if match:
            return match.group(1)

    if _is_short_link(candidate):
        logger.info("post_reference_short_link_unresolved", extra={"component": "post_reference"})
        return None

    return _extract_from_status_path(candidate)


def _is_short_link(candidate: str) -> bool:
    try:
        hostname = urlsplit(candidate).hostname
    except ValueError:
        return False
    return hostname in SHORT_LINK_HOSTS


def _extract_from_status_path(candidate: str) -> str | None:
    try:
        parts = urlsplit(candidate)
    except ValueError:
        return None
    # Somente URLs absolutas (esquema + host)
    if not parts.scheme or not parts.netloc:
        return None

    segments = [segment for segment in parts.path.split("/") if segment]
    try:
        status_index = segments.index("status")
    except ValueError:
        return None

    if status_index + 1 >= len(segments):
        return None
    post_id = segments[status_index + 1]
    return post_id if is_canonical_id(post_id) else None
