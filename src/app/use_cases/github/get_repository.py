"""Use case de GET /github/{repo_name}."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from app.protocols.http_client import GitHubClientProtocol
    from app.protocols.normalizer import GitHubResponseShaperProtocol

logger = logging.getLogger(__name__)


class GetRepositoryUseCase:
    """Resolve o owner pela conta autenticada e busca o repositório.

    O body do upstream é devolvido sem filtro de campos.
    """

    def __init__(
        self,
        client: GitHubClientProtocol,
        shaper: GitHubResponseShaperProtocol,
    ) -> None:
        self._client = client
        self._shaper = shaper

    async def execute(self, headers: dict[str, str], repo_name: str) -> dict[str, Any]:
        profile_payload = await self._client.fetch_profile(headers)
        owner = self._shaper.extract_owner_login(profile_payload)
        logger.info("github_owner_resolved", extra={"repo_name": repo_name})
        return await self._client.fetch_repository(headers, owner, repo_name)
