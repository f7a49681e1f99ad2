"""Use case de GET /github: perfil + repositórios próprios."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.domain.github import ProfileOverview
    from app.protocols.http_client import GitHubClientProtocol
    from app.protocols.normalizer import GitHubResponseShaperProtocol

logger = logging.getLogger(__name__)


class GetProfileOverviewUseCase:
    """Busca conta e repositórios em paralelo e monta a view combinada."""

    def __init__(
        self,
        client: GitHubClientProtocol,
        shaper: GitHubResponseShaperProtocol,
    ) -> None:
        self._client = client
        self._shaper = shaper

    async def execute(self, headers: dict[str, str]) -> ProfileOverview:
        """Executa as duas chamadas concorrentes.

        A primeira falha propaga; a outra chamada não é cancelada e o
        resultado dela é descartado. Sem resposta parcial.

        Raises:
            UpstreamError: Se qualquer uma das chamadas falhar.
        """
        profile_payload, repositories_payload = await asyncio.gather(
            self._client.fetch_profile(headers),
            self._client.fetch_owned_repositories(headers),
        )
        overview = self._shaper.build_profile_overview(profile_payload, repositories_payload)
        logger.info(
            "github_profile_overview_built",
            extra={"repository_count": len(overview.personal_repositories)},
        )
        return overview
