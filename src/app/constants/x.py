"""Constantes do canal X/Twitter: perfil de campos e mensagens fixas."""

from __future__ import annotations

from enum import StrEnum

# Perfil fixo de campos solicitado em toda leitura de post (API v2)
TWEET_FIELDS: tuple[str, ...] = (
    "created_at",
    "author_id",
    "public_metrics",
    "context_annotations",
    "entities",
    "lang",
    "possibly_sensitive",
    "referenced_tweets",
    "reply_settings",
    "source",
)

USER_FIELDS: tuple[str, ...] = (
    "name",
    "username",
    "verified",
    "public_metrics",
    "profile_image_url",
)

MEDIA_FIELDS: tuple[str, ...] = (
    "type",
    "url",
    "preview_image_url",
    "alt_text",
)

EXPANSIONS: tuple[str, ...] = (
    "author_id",
    "attachments.media_keys",
)


def build_field_selection() -> dict[str, str]:
    """Monta query params do perfil de campos (valores separados por vírgula)."""
    return {
        "tweet.fields": ",".join(TWEET_FIELDS),
        "user.fields": ",".join(USER_FIELDS),
        "media.fields": ",".join(MEDIA_FIELDS),
        "expansions": ",".join(EXPANSIONS),
    }


class PostErrorCategory(StrEnum):
    """Categorias de falha expostas ao cliente HTTP."""

    NOT_FOUND = "not_found"
    ACCESS_DENIED = "access_denied"
    RATE_LIMITED = "rate_limited"
    UNKNOWN = "unknown"


NOT_FOUND_MESSAGE = "Tweet not found or may be private"
ACCESS_DENIED_MESSAGE = "Access denied - tweet may be private or deleted"
RATE_LIMITED_MESSAGE = "Rate limit exceeded. Please try again later."
UNKNOWN_FAILURE_MESSAGE = "Failed to fetch tweet"

REFERENCE_REQUIRED_MESSAGE = (
    'Tweet URL or ID is required. Use: {"tweetUrl": "https://x.com/username/status/1234567890"}'
)
INVALID_REFERENCE_MESSAGE = (
    "Invalid tweet URL or ID format. Please provide a valid Twitter/X URL or tweet ID."
)
ENDPOINT_NOT_FOUND_MESSAGE = "Endpoint not found"
INTERNAL_ERROR_MESSAGE = "Internal server error"
