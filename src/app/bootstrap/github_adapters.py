"""Adapters concretos para GitHub (wiring em app/bootstrap).

Este módulo é o único autorizado a acoplar app <-> api.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from api.connectors.github.auth import build_auth_headers
from api.normalizers.github.extractor import (
    build_profile_overview,
    extract_issue_result,
    extract_owner_login,
)
from app.protocols.http_client import AuthHeadersProviderProtocol
from app.protocols.normalizer import GitHubResponseShaperProtocol

if TYPE_CHECKING:
    from app.domain.github import IssueCreationResult, ProfileOverview
    from config.settings import GitHubSettings


class GitHubAuthHeadersProvider(AuthHeadersProviderProtocol):
    """Monta headers a partir das settings carregadas no startup."""

    def __init__(self, settings: GitHubSettings) -> None:
        self._settings = settings

    def build_headers(self) -> dict[str, str]:
        return build_auth_headers(self._settings)


class GitHubApiResponseShaper(GitHubResponseShaperProtocol):
    """Shaper baseado nos extractors de api/normalizers/github."""

    def build_profile_overview(
        self,
        profile_payload: dict[str, Any],
        repositories_payload: list[dict[str, Any]],
    ) -> ProfileOverview:
        return build_profile_overview(profile_payload, repositories_payload)

    def extract_owner_login(self, profile_payload: dict[str, Any]) -> str:
        return extract_owner_login(profile_payload)

    def extract_issue_result(self, issue_payload: dict[str, Any]) -> IssueCreationResult:
        return extract_issue_result(issue_payload)
