"""Protocolos e contratos do core da aplicacao."""

from .post_provider import PostProviderProtocol

__all__ = [
    "PostProviderProtocol",
]
