"""Rotas de leitura de posts X/Twitter."""
