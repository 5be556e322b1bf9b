"""Modelos de dominio do resultado normalizado de leitura de posts.

Cada requisicao produz exatamente um dos dois resultados abaixo:
NormalizedPost (sucesso) ou NormalizedError (falha classificada).
Os campos opcionais repassam valores do provedor sem validacao de schema.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from app.constants.x import PostErrorCategory  # noqa: TC001 - usado em runtime pelo Pydantic


class NormalizedPost(BaseModel):
    """Post normalizado a partir do registro primario e dos includes expandidos."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str = Field(..., description="Identificador canonico do post.")
    text: str = Field(..., description="Texto do post.")
    created_at: Any = Field(default=None, description="Data de criacao (ISO-8601).")
    author: dict[str, Any] | None = Field(
        default=None,
        description="Resumo do autor (includes.users[0]) ou None se omitido.",
    )
    public_metrics: Any = None
    entities: Any = None
    media: list[Any] = Field(
        default_factory=list,
        description="Midias anexadas; lista vazia quando includes.media ausente.",
    )
    lang: Any = None
    possibly_sensitive: Any = None
    referenced_tweets: Any = None
    reply_settings: Any = None
    source: Any = None


class NormalizedError(BaseModel):
    """Falha classificada, pronta para serializacao na borda HTTP."""

    model_config = ConfigDict(frozen=True)

    category: PostErrorCategory
    message: str
    code: int

    def as_response(self) -> dict[str, Any]:
        """Corpo de resposta no contrato `{success, error, code}`."""
        return {"success": False, "error": self.message, "code": self.code}
