"""Helpers de logging para chamadas à API GitHub (sem token)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .github_errors import GitHubApiError

logger = logging.getLogger(__name__)


def log_github_error(
    api_error: GitHubApiError,
    method: str,
    endpoint: str,
) -> None:
    """Loga erro do upstream sem expor headers."""
    logger.warning(
        "github_api_error",
        extra={
            "method": method,
            "endpoint": endpoint,
            "status_code": api_error.status_code,
            "upstream_message": api_error.message,
            "documentation_url": api_error.documentation_url,
        },
    )


def log_success(
    method: str,
    endpoint: str,
    status_code: int,
) -> None:
    logger.debug(
        "github_call_ok",
        extra={
            "method": method,
            "endpoint": endpoint,
            "status_code": status_code,
        },
    )
