"""Montagem dos headers autenticados para a API GitHub."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from utils.errors import ConfigurationError

if TYPE_CHECKING:
    from config.settings import GitHubSettings

logger = logging.getLogger(__name__)

MISSING_TOKEN_MESSAGE = "ACCESS_TOKEN is not set"


def build_auth_headers(settings: GitHubSettings) -> dict[str, str]:
    """Monta o header set de uma requisição ao upstream.

    Construído a cada requisição, nunca cacheado.

    Args:
        settings: GitHubSettings carregadas no startup.

    Returns:
        Accept, X-GitHub-Api-Version e Authorization (Bearer).

    Raises:
        ConfigurationError: Se a credencial está ausente ou vazia.
    """
    if not settings.has_credentials:
        logger.error(
            "github_credentials_missing",
            extra={"component": "github_auth", "missing": "ACCESS_TOKEN"},
        )
        raise ConfigurationError(MISSING_TOKEN_MESSAGE)

    logger.debug("github_auth_headers_built", extra={"component": "github_auth"})
    return {
        "Accept": settings.accept,
        "X-GitHub-Api-Version": settings.api_version,
        "Authorization": f"Bearer {settings.access_token.strip()}",
    }
