"""Use cases do canal X/Twitter."""

from .fetch_post import FetchPostUseCase, normalize_post_payload

__all__ = [
    "FetchPostUseCase",
    "normalize_post_payload",
]
