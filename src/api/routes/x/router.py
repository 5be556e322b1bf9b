"""Endpoints de leitura de posts X/Twitter.

Endpoints:
- GET /tweet/{tweet_id}: referencia no path
- POST /tweet: referencia no corpo (tweetUrl | url | link | tweetId)

Fluxo: referencia bruta → resolve_post_reference → FetchPostUseCase →
texto do post (string JSON) ou erro `{success, error, code}`.
"""

from __future__ import annotations

import json
import logging
from typing import Annotated, Any
from urllib.parse import parse_qsl

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from api.validators.x import select_reference_input
from app.constants.x import INVALID_REFERENCE_MESSAGE, REFERENCE_REQUIRED_MESSAGE
from app.domain.post import NormalizedError
from app.services.post_reference import resolve_post_reference
from app.use_cases.x import FetchPostUseCase

logger = logging.getLogger(__name__)

router = APIRouter()


def get_fetch_post_use_case(request: Request) -> FetchPostUseCase:
    """Monta o use case com o provedor injetado no app (app.state)."""
    return FetchPostUseCase(provider=request.app.state.post_provider)


FetchPostDep = Annotated[FetchPostUseCase, Depends(get_fetch_post_use_case)]


@router.get("/tweet/{tweet_id}")
async def get_tweet(tweet_id: str, use_case: FetchPostDep) -> JSONResponse:
    """Busca post pela referencia no path (ID ou URL codificada)."""
    post_id = resolve_post_reference(tweet_id)
    if post_id is None:
        return _validation_error(INVALID_REFERENCE_MESSAGE)
    return await _fetch_and_respond(use_case, post_id)


@router.post("/tweet")
async def post_tweet(request: Request, use_case: FetchPostDep) -> JSONResponse:
    """Busca post pela referencia no corpo (JSON ou form-urlencoded)."""
    body = await _read_body(request)
    raw_reference = select_reference_input(body)
    if raw_reference is None:
        return _validation_error(REFERENCE_REQUIRED_MESSAGE)

    post_id = resolve_post_reference(raw_reference)
    if post_id is None:
        return _validation_error(INVALID_REFERENCE_MESSAGE)
    return await _fetch_and_respond(use_case, post_id)


async def _fetch_and_respond(use_case: FetchPostUseCase, post_id: str) -> JSONResponse:
    result = await use_case.execute(post_id)
    if isinstance(result, NormalizedError):
        return JSONResponse(content=result.as_response(), status_code=result.code)
    # Contrato: sucesso devolve apenas o texto do post
    return JSONResponse(content=result.text, status_code=status.HTTP_200_OK)


def _validation_error(message: str) -> JSONResponse:
    logger.info("tweet_reference_invalid", extra={"component": "tweet_router"})
    return JSONResponse(
        content={"success": False, "error": message},
        status_code=status.HTTP_400_BAD_REQUEST,
    )


async def _read_body(request: Request) -> Any:
    """Decodifica corpo JSON ou form-urlencoded; corpo invalido vira None."""
    raw_body = await request.body()
    if not raw_body:
        return None

    content_type = request.headers.get("content-type", "")
    try:
        text = raw_body.decode("utf-8")
    except UnicodeDecodeError:
        return None

    if content_type.startswith("application/x-www-form-urlencoded"):
        return dict(parse_qsl(text))

    try:
        return json.loads(text)
    except json.JSONDecodeError:
        logger.info("tweet_body_invalid_json", extra={"component": "tweet_router"})
        return None
