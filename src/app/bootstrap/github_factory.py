"""Factories do fluxo GitHub (cliente, headers, use cases).

Os getters são usados como dependências FastAPI nas rotas e podem ser
substituídos em testes via `app.dependency_overrides`.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from api.connectors.github.http_client import GitHubHttpClient, create_github_http_client
from app.bootstrap.github_adapters import GitHubApiResponseShaper, GitHubAuthHeadersProvider
from app.use_cases.github import (
    CreateIssueUseCase,
    GetProfileOverviewUseCase,
    GetRepositoryUseCase,
)
from config.settings import get_github_settings

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_github_client() -> GitHubHttpClient:
    """Cliente GitHub (singleton, sem estado mutável)."""
    client = create_github_http_client(get_github_settings())
    logger.info(
        "github_client_created",
        extra={"api_base_url": client.settings.api_base_url},
    )
    return client


@lru_cache(maxsize=1)
def get_auth_headers_provider() -> GitHubAuthHeadersProvider:
    return GitHubAuthHeadersProvider(get_github_settings())


@lru_cache(maxsize=1)
def get_response_shaper() -> GitHubApiResponseShaper:
    return GitHubApiResponseShaper()


def create_profile_overview_use_case() -> GetProfileOverviewUseCase:
    return GetProfileOverviewUseCase(get_github_client(), get_response_shaper())


def create_repository_use_case() -> GetRepositoryUseCase:
    return GetRepositoryUseCase(get_github_client(), get_response_shaper())


def create_issue_use_case() -> CreateIssueUseCase:
    return CreateIssueUseCase(get_github_client(), get_response_shaper())
