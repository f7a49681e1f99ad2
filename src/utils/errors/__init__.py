"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    UPSTREAM_FAILURE_MESSAGE,
    ConfigurationError,
    RelayError,
    UpstreamError,
    UpstreamNotFoundError,
    ValidationError,
)

__all__ = [
    "UPSTREAM_FAILURE_MESSAGE",
    "ConfigurationError",
    "RelayError",
    "UpstreamError",
    "UpstreamNotFoundError",
    "ValidationError",
]
