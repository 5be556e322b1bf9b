"""Servicos de aplicacao: resolucao de referencias e taxonomia de erros."""

from app.services.post_reference import is_canonical_id, resolve_post_reference
from app.services.provider_errors import classify_provider_error

__all__ = [
    "classify_provider_error",
    "is_canonical_id",
    "resolve_post_reference",
]
