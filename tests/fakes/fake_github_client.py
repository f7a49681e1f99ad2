"""Fake em memória do cliente GitHub para testes deterministas."""

from __future__ import annotations

import asyncio
from typing import Any

from utils.errors import UpstreamError, UpstreamNotFoundError

DEFAULT_ISSUE_URL = "https://github.com/octocat/hello-world/issues/1"


class FakeGitHubClient:
    """Implementa GitHubClientProtocol sem IO.

    Registra cada chamada em `calls` (nome da operação + argumentos) e
    levanta o erro configurado em `failures[operacao]`, se houver.
    """

    def __init__(
        self,
        *,
        profile: dict[str, Any] | None = None,
        repositories: list[dict[str, Any]] | None = None,
        repository: dict[str, Any] | None = None,
        issue: dict[str, Any] | None = None,
        failures: dict[str, Exception] | None = None,
    ) -> None:
        self.profile = profile if profile is not None else build_profile_payload()
        self.repositories = repositories if repositories is not None else []
        self.repository = repository
        self.issue = issue if issue is not None else {"html_url": DEFAULT_ISSUE_URL}
        self.failures = failures or {}
        self.calls: list[tuple[str, tuple[Any, ...]]] = []

    @property
    def operations(self) -> list[str]:
        return [name for name, _ in self.calls]

    async def fetch_profile(self, headers: dict[str, str]) -> dict[str, Any]:
        await self._record("fetch_profile", headers)
        return dict(self.profile)

    async def fetch_owned_repositories(self, headers: dict[str, str]) -> list[dict[str, Any]]:
        await self._record("fetch_owned_repositories", headers)
        return [dict(item) for item in self.repositories]

    async def fetch_repository(
        self,
        headers: dict[str, str],
        owner: str,
        name: str,
    ) -> dict[str, Any]:
        await self._record("fetch_repository", headers, owner, name)
        if self.repository is None:
            raise UpstreamNotFoundError("fetch_repository: not found", status_code=404)
        return dict(self.repository)

    async def create_issue(
        self,
        headers: dict[str, str],
        owner: str,
        name: str,
        title: str,
        body: str,
    ) -> dict[str, Any]:
        await self._record("create_issue", headers, owner, name, title, body)
        return dict(self.issue)

    async def _record(self, operation: str, *args: Any) -> None:
        self.calls.append((operation, args))
        # Cede o loop para que chamadas concorrentes se intercalem
        await asyncio.sleep(0)
        failure = self.failures.get(operation)
        if failure is not None:
            raise failure


def build_profile_payload(**overrides: Any) -> dict[str, Any]:
    """Body de GET /user com campos fora da allowlist."""
    payload: dict[str, Any] = {
        "login": "octocat",
        "id": 583231,
        "node_id": "MDQ6VXNlcjU4MzIzMQ==",
        "name": "The Octocat",
        "bio": None,
        "avatar_url": "https://avatars.githubusercontent.com/u/583231?v=4",
        "html_url": "https://github.com/octocat",
        "location": "San Francisco",
        "company": "@github",
        "blog": "https://github.blog",
        "created_at": "2011-01-25T18:44:36Z",
        "updated_at": "2024-09-22T11:25:21Z",
        "followers": 16000,
        "following": 9,
        "public_repos": 8,
        "site_admin": False,
        "plan": {"name": "pro", "space": 976562499},
    }
    payload.update(overrides)
    return payload


def build_repository_payload(name: str, **overrides: Any) -> dict[str, Any]:
    """Body de um repositório como em GET /user/repos."""
    payload: dict[str, Any] = {
        "id": sum(map(ord, name)),
        "node_id": f"R_{name}",
        "name": name,
        "full_name": f"octocat/{name}",
        "html_url": f"https://github.com/octocat/{name}",
        "description": f"Repositório {name}",
        "private": False,
        "fork": False,
        "created_at": "2020-01-01T00:00:00Z",
        "updated_at": "2024-01-01T00:00:00Z",
        "pushed_at": "2024-01-02T00:00:00Z",
        "language": "Python",
        "forks_count": 2,
        "stargazers_count": 10,
        "watchers_count": 10,
        "open_issues_count": 1,
        "owner": {"login": "octocat", "id": 583231},
        "permissions": {"admin": True, "push": True, "pull": True},
        "default_branch": "main",
        "size": 120,
    }
    payload.update(overrides)
    return payload


def upstream_failure(status_code: int | None = 502) -> UpstreamError:
    return UpstreamError("fake upstream failure", status_code=status_code)
