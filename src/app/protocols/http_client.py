"""Protocolos HTTP usados pelo app.

Evita dependência direta da camada api.
"""

from __future__ import annotations

from typing import Any, Protocol


class GitHubClientProtocol(Protocol):
    """Contrato mínimo para o cliente da API GitHub.

    Toda operação recebe o header set autenticado da requisição e
    levanta UpstreamError em qualquer falha.
    """

    async def fetch_profile(self, headers: dict[str, str]) -> dict[str, Any]: ...

    async def fetch_owned_repositories(
        self,
        headers: dict[str, str],
    ) -> list[dict[str, Any]]: ...

    async def fetch_repository(
        self,
        headers: dict[str, str],
        owner: str,
        name: str,
    ) -> dict[str, Any]: ...

    async def create_issue(
        self,
        headers: dict[str, str],
        owner: str,
        name: str,
        title: str,
        body: str,
    ) -> dict[str, Any]: ...


class AuthHeadersProviderProtocol(Protocol):
    """Contrato para montagem do header set autenticado."""

    def build_headers(self) -> dict[str, str]: ...
