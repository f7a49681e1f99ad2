"""Casos de uso (orquestração sem IO direto)."""
