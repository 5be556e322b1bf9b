"""Documentacao estatica da API (GET /)."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter

router = APIRouter()

API_VERSION = "1.0.0"

API_DOCUMENTATION: dict[str, Any] = {
    "message": "Twitter Scraper API",
    "version": API_VERSION,
    "endpoints": {
        "GET /tweet/:tweetId": "Fetch tweet by ID",
        "POST /tweet": "Fetch tweet by URL or ID in request body",
        "GET /health": "Health check",
        "GET /": "API documentation",
    },
    "examples": {
        "GET /tweet/1234567890": "Fetch tweet with ID 1234567890",
        "POST /tweet": {
            "body": {
                "tweetUrl": "https://twitter.com/username/status/1234567890",
                "tweetId": "1234567890",
            }
        },
    },
}


@router.get("/")
async def api_documentation() -> dict[str, Any]:
    """Objeto estatico descrevendo endpoints e exemplos."""
    return API_DOCUMENTATION
