"""Exceções utilitárias compartilhadas."""

from .exceptions import InfrastructureError, ProviderError

__all__ = [
    "InfrastructureError",
    "ProviderError",
]
