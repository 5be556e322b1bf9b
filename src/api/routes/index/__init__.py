"""Rota de documentacao estatica (GET /)."""
