"""Validators por canal — validacao de entradas recebidas na borda HTTP.

Estrutura:
- x/: selecao da referencia de post no corpo de POST /tweet
"""

__all__: list[str] = []
