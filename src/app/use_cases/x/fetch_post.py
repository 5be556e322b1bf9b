"""Use case de leitura de post no provedor X/Twitter.

Realiza exatamente uma chamada ao provedor e traduz o resultado
(dados ou erro) para NormalizedPost | NormalizedError. Nenhuma excecao
do provedor atravessa este limite; nao ha retry.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from app.constants.x import build_field_selection
from app.domain.post import NormalizedError, NormalizedPost
from app.services.provider_errors import classify_provider_error
from utils.errors import ProviderError

if TYPE_CHECKING:
    from app.protocols.post_provider import PostProviderProtocol

logger = logging.getLogger(__name__)

_COMPONENT = "fetch_post"


class FetchPostUseCase:
    """Orquestra chamada ao provedor e normalizacao do resultado."""

    def __init__(self, provider: PostProviderProtocol) -> None:
        self._provider = provider

    async def execute(self, post_id: str) -> NormalizedPost | NormalizedError:
        """Busca post pelo ID canonico.

        Args:
            post_id: ID canonico (somente digitos), ja resolvido.

        Returns:
            NormalizedPost em sucesso ou NormalizedError classificado.
        """
        try:
            payload = await self._provider.fetch_post(post_id, build_field_selection())
            post = normalize_post_payload(payload)
        except ProviderError as exc:
            return self._failure(classify_provider_error(exc.code, exc.message))
        except Exception as exc:
            logger.exception(
                "post_fetch_unexpected_error",
                extra={"component": _COMPONENT, "error_type": type(exc).__name__},
            )
            return self._failure(classify_provider_error(None))

        logger.debug("post_fetch_succeeded", extra={"component": _COMPONENT})
        return post

    @staticmethod
    def _failure(error: NormalizedError) -> NormalizedError:
        logger.warning(
            "post_fetch_failed",
            extra={
                "component": _COMPONENT,
                "category": str(error.category),
                "code": error.code,
            },
        )
        return error


def normalize_post_payload(payload: dict[str, Any]) -> NormalizedPost:
    """Monta NormalizedPost a partir de `data` e `includes` do provedor.

    Raises:
        ProviderError: Se o payload nao contem registro primario.
    """
    data = payload.get("data")
    if not isinstance(data, dict):
        raise ProviderError("Provider response without tweet data")

    includes = payload.get("includes") or {}
    users = includes.get("users") or []
    media = includes.get("media") or []

    return NormalizedPost(
        id=str(data.get("id", "")),
        text=data.get("text", ""),
        created_at=data.get("created_at"),
        author=users[0] if users else None,
        public_metrics=data.get("public_metrics"),
        entities=data.get("entities"),
        media=media,
        lang=data.get("lang"),
        possibly_sensitive=data.get("possibly_sensitive"),
        referenced_tweets=data.get("referenced_tweets"),
        reply_settings=data.get("reply_settings"),
        source=data.get("source"),
    )
