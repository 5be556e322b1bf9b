"""Exceções de domínio para falhas de provedores externos."""

from __future__ import annotations


class InfrastructureError(RuntimeError):
    """Base para falhas de infraestrutura externas ao core."""


class ProviderError(InfrastructureError):
    """Falha reportada (ou provocada) pelo provedor de conteúdo X/Twitter.

    Args:
        message: Mensagem do provedor, já sem dados sensíveis.
        code: Código numérico reportado pelo provedor (None se ausente).
    """

    def __init__(self, message: str = "", code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
