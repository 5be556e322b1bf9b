"""Validators do canal X/Twitter: selecao da referencia no corpo da requisicao."""

from api.validators.x.reference_input import REFERENCE_FIELDS, select_reference_input

__all__ = [
    "REFERENCE_FIELDS",
    "select_reference_input",
]
