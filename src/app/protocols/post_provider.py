"""Protocolo do provedor de conteudo de posts.

Evita dependencia direta da camada api (conector X/Twitter).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from collections.abc import Mapping


class PostProviderProtocol(Protocol):
    """Contrato minimo: buscar post por ID com perfil de campos.

    Implementacoes levantam `utils.errors.ProviderError` em falhas.
    """

    async def fetch_post(
        self,
        post_id: str,
        params: Mapping[str, str],
    ) -> dict[str, Any]: ...
