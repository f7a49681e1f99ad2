"""Rotas de health check e readiness."""
