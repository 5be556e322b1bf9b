"""Selecao do campo de referencia no corpo de POST /tweet.

Varios nomes de campo sao aceitos; o primeiro nao vazio, na ordem de
REFERENCE_FIELDS, vence.
"""

from __future__ import annotations

from typing import Any

REFERENCE_FIELDS: tuple[str, ...] = ("tweetUrl", "url", "link", "tweetId")


def select_reference_input(
    body: Any,
    fields: tuple[str, ...] = REFERENCE_FIELDS,
) -> str | None:
    """Retorna a referencia bruta do corpo ou None.

    Args:
        body: Corpo decodificado (dict); outros tipos resultam em None.
        fields: Ordem de precedencia dos campos.

    Returns:
        Valor do primeiro campo nao vazio (como str) ou None.
    """
    if not isinstance(body, dict):
        return None

    for name in fields:
        value = body.get(name)
        if value is None or isinstance(value, (bool, dict, list)):
            continue
        text = str(value)
        if text:
            return text
    return None
