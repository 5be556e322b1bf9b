"""Helpers de logging para X API (sem tokens nem conteudo de posts)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .x_errors import XApiError

logger = logging.getLogger(__name__)


def log_x_error(x_error: XApiError, method: str, path: str) -> None:
    """Loga erro da X API."""
    logger.warning(
        "x_api_error",
        extra={
            "method": method,
            "path": path,
            "error_code": x_error.code,
            "error_title": x_error.title,
            "problem_type": x_error.problem_type,
        },
    )


def log_success(method: str, path: str, status_code: int) -> None:
    """Loga sucesso em DEBUG."""
    logger.debug(
        "x_api_success",
        extra={"method": method, "path": path, "status_code": status_code},
    )
