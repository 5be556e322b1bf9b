"""Erros e helpers de parsing para X API v2."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

# Problemas retornados com HTTP 200 (sem `data`) → codigo HTTP equivalente
_PROBLEM_TYPE_CODES: dict[str, int] = {
    "resource-not-found": 404,
    "not-authorized-for-resource": 403,
    "usage-capped": 429,
}


@dataclass(frozen=True)
class XApiError:
    """Erro retornado pela X API."""

    code: int | None
    title: str
    message: str
    problem_type: str = ""


def _problem_code(problem_type: str) -> int | None:
    # ex.: https://api.twitter.com/2/problems/resource-not-found
    suffix = problem_type.rstrip("/").rsplit("/", 1)[-1]
    return _PROBLEM_TYPE_CODES.get(suffix)


def _first_error(body: dict[str, Any]) -> dict[str, Any]:
    errors = body.get("errors")
    if isinstance(errors, list) and errors and isinstance(errors[0], dict):
        return errors[0]
    return {}


def parse_x_error(status_code: int, body: Any) -> XApiError | None:
    """Extrai erro do response da X API.

    Args:
        status_code: Status HTTP do response.
        body: JSON decodificado (ou None se nao for JSON).

    Returns:
        XApiError se houver erro, None se o response contem `data`.
    """
    payload = body if isinstance(body, dict) else {}

    if status_code < 400:
        if "data" in payload:
            return None
        first = _first_error(payload)
        problem_type = str(first.get("type", ""))
        return XApiError(
            code=_problem_code(problem_type) or _as_int(first.get("status")),
            title=str(first.get("title", "")),
            message=str(first.get("detail") or first.get("message") or ""),
            problem_type=problem_type,
        )

    first = _first_error(payload)
    message = payload.get("detail") or first.get("message") or first.get("detail") or ""
    return XApiError(
        code=status_code,
        title=str(payload.get("title", "")),
        message=str(message),
        problem_type=str(payload.get("type", "")),
    )


def _as_int(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    return None
