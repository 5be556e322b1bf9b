"""API — camada de borda HTTP e conectores externos.

Subpastas:
- connectors/: clientes de APIs externas (X API v2)
- validators/: selecao/validacao de entradas da borda
- routes/: endpoints HTTP, handlers de erro e middleware

NAO PODE conter: regras de classificacao de erro ou resolucao de referencias
(ficam em app/services).
"""
