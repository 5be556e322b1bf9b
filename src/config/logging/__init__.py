"""Logging estruturado JSON do servico.

Uso:
    from config.logging import configure_logging, get_logger

    configure_logging(level="INFO", service_name="tweet-lookup-api")

    logger = get_logger(__name__)
    logger.info("post_fetch_failed", extra={"code": 429})

Todo record carrega: asctime, level, logger, message, correlation_id, service.
Nunca logar tokens nem texto de posts.
"""

from config.logging.config import configure_logging, get_logger
from config.logging.filters import CorrelationIdFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "CorrelationIdFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
]
