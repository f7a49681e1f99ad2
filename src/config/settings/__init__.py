"""Agregador de settings do github-relay.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    DEFAULT_PORT,
    BaseSettings,
    Environment,
    get_base_settings,
)

# Upstream settings
from config.settings.github import (
    DEFAULT_REQUEST_TIMEOUT_SECONDS,
    GITHUB_ACCEPT_HEADER,
    GITHUB_API_BASE_URL,
    GITHUB_API_VERSION,
    GitHubSettings,
    get_github_settings,
)

__all__ = [
    # Constants
    "DEFAULT_PORT",
    "DEFAULT_REQUEST_TIMEOUT_SECONDS",
    "GITHUB_ACCEPT_HEADER",
    "GITHUB_API_BASE_URL",
    "GITHUB_API_VERSION",
    # Base
    "BaseSettings",
    "Environment",
    # Upstream
    "GitHubSettings",
    "get_base_settings",
    "get_github_settings",
]
