"""Agregador de settings do servico.

Re-exporta settings e funcoes de cada modulo.
"""

from __future__ import annotations

from config.settings.base import (
    DEFAULT_PORT,
    BaseSettings,
    Environment,
    get_base_settings,
)
from config.settings.x import (
    X_API_BASE_URL,
    X_API_VERSION,
    XSettings,
    get_x_settings,
)

__all__ = [
    "DEFAULT_PORT",
    "X_API_BASE_URL",
    "X_API_VERSION",
    "BaseSettings",
    "Environment",
    "XSettings",
    "get_base_settings",
    "get_x_settings",
]
