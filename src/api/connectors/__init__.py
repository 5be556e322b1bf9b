"""Connectors — adapters de borda para APIs externas.

Estrutura:
- http_base.py: cliente HTTP generico (httpx, sem retry)
- x/: X API v2 (leitura de posts)
"""

__all__: list[str] = []
