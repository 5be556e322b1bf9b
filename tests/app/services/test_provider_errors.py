"""Testes da taxonomia de erros do provedor."""

from __future__ import annotations

import pytest

from app.constants.x import (
    ACCESS_DENIED_MESSAGE,
    NOT_FOUND_MESSAGE,
    RATE_LIMITED_MESSAGE,
    UNKNOWN_FAILURE_MESSAGE,
    PostErrorCategory,
)
from app.services.provider_errors import classify_provider_error


@pytest.mark.parametrize(
    ("code", "category", "message"),
    [
        (404, PostErrorCategory.NOT_FOUND, NOT_FOUND_MESSAGE),
        (403, PostErrorCategory.ACCESS_DENIED, ACCESS_DENIED_MESSAGE),
        (429, PostErrorCategory.RATE_LIMITED, RATE_LIMITED_MESSAGE),
    ],
)
def test_known_codes_use_fixed_message(
    code: int, category: PostErrorCategory, message: str
) -> None:
    error = classify_provider_error(code, "mensagem do provedor")

    assert error.category == category
    assert error.message == message
    assert error.code == code


def test_unknown_code_keeps_provider_message() -> None:
    error = classify_provider_error(401, "Unauthorized")

    assert error.category == PostErrorCategory.UNKNOWN
    assert error.message == "Unauthorized"
    assert error.code == 401


def test_missing_code_defaults_to_500_and_generic_message() -> None:
    error = classify_provider_error(None)

    assert error.category == PostErrorCategory.UNKNOWN
    assert error.message == UNKNOWN_FAILURE_MESSAGE
    assert error.code == 500


def test_as_response_shape() -> None:
    error = classify_provider_error(429)

    assert error.as_response() == {
        "success": False,
        "error": RATE_LIMITED_MESSAGE,
        "code": 429,
    }
