"""Rotas GitHub montadas em /github."""
