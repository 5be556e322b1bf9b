"""Endpoint de liveness, independente do provedor."""

from __future__ import annotations

from datetime import UTC, datetime

from fastapi import APIRouter
from pydantic import BaseModel

router = APIRouter()

HEALTH_MESSAGE = "Twitter Scraper API is running"


class HealthResponse(BaseModel):
    """Resposta do health check."""

    success: bool = True
    message: str
    timestamp: str


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Liveness probe — verifica apenas se o processo responde."""
    return HealthResponse(
        message=HEALTH_MESSAGE,
        timestamp=datetime.now(UTC).isoformat(),
    )
