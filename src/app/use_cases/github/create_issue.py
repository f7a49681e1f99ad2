"""Use case de POST /github/{repo_name}/issues."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.domain.github import IssueCreationResult
    from app.protocols.http_client import GitHubClientProtocol
    from app.protocols.normalizer import GitHubResponseShaperProtocol

logger = logging.getLogger(__name__)


class CreateIssueUseCase:
    """Cria issue no repositório da conta autenticada.

    Duas chamadas em sequência: conta (owner) e depois criação da issue.
    O input já chega validado pela rota.
    """

    def __init__(
        self,
        client: GitHubClientProtocol,
        shaper: GitHubResponseShaperProtocol,
    ) -> None:
        self._client = client
        self._shaper = shaper

    async def execute(
        self,
        headers: dict[str, str],
        repo_name: str,
        title: str,
        body: str,
    ) -> IssueCreationResult:
        profile_payload = await self._client.fetch_profile(headers)
        owner = self._shaper.extract_owner_login(profile_payload)
        issue_payload = await self._client.create_issue(headers, owner, repo_name, title, body)
        result = self._shaper.extract_issue_result(issue_payload)
        logger.info("github_issue_created", extra={"repo_name": repo_name})
        return result
