"""Rota de liveness (GET /health)."""
