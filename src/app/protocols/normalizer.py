"""Protocolos de projeção de respostas do upstream."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from app.domain.github import IssueCreationResult, ProfileOverview


class GitHubResponseShaperProtocol(Protocol):
    """Contrato mínimo para projetar bodies do GitHub nas views."""

    def build_profile_overview(
        self,
        profile_payload: dict[str, Any],
        repositories_payload: list[dict[str, Any]],
    ) -> ProfileOverview: ...

    def extract_owner_login(self, profile_payload: dict[str, Any]) -> str: ...

    def extract_issue_result(self, issue_payload: dict[str, Any]) -> IssueCreationResult: ...
