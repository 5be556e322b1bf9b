"""Conector X/Twitter — cliente da X API v2."""

from api.connectors.x.http_client import XHttpClient, create_x_http_client
from api.connectors.x.x_errors import XApiError, parse_x_error

__all__ = [
    "XApiError",
    "XHttpClient",
    "create_x_http_client",
    "parse_x_error",
]
