"""Settings específicas da API GitHub.

Credencial e parâmetros de acesso à REST API. A credencial é lida uma
única vez no startup (getter cacheado) e nunca relida por requisição.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from urllib.parse import quote

# Constantes da REST API
GITHUB_API_BASE_URL: str = "https://api.github.com"
GITHUB_API_VERSION: str = "2022-11-28"
GITHUB_ACCEPT_HEADER: str = "application/vnd.github+json"
DEFAULT_REQUEST_TIMEOUT_SECONDS: float = 30.0


@dataclass(frozen=True)
class GitHubSettings:
    """Configurações de acesso à API GitHub.

    Attributes:
        access_token: Bearer token (ACCESS_TOKEN)
        api_base_url: URL base da REST API
        api_version: Valor do header X-GitHub-Api-Version
        accept: Valor do header Accept
        request_timeout_seconds: Timeout por requisição HTTP
    """

    # Credencial
    access_token: str = ""

    # API
    api_base_url: str = GITHUB_API_BASE_URL
    api_version: str = GITHUB_API_VERSION
    accept: str = GITHUB_ACCEPT_HEADER

    # Timeouts
    request_timeout_seconds: float = DEFAULT_REQUEST_TIMEOUT_SECONDS

    @property
    def has_credentials(self) -> bool:
        """True se a credencial está presente e não vazia."""
        return bool(self.access_token and self.access_token.strip())

    @property
    def user_endpoint(self) -> str:
        """URL da conta autenticada."""
        return f"{self.api_base_url.rstrip('/')}/user"

    @property
    def user_repos_endpoint(self) -> str:
        """URL dos repositórios da conta autenticada."""
        return f"{self.user_endpoint}/repos"

    def get_repository_endpoint(self, owner: str, name: str) -> str:
        """Retorna URL de um repositório.

        Returns:
            URL no formato: https://api.github.com/repos/{owner}/{name}
        """
        return (
            f"{self.api_base_url.rstrip('/')}/repos/"
            f"{quote(owner, safe='')}/{quote(name, safe='')}"
        )

    def get_issues_endpoint(self, owner: str, name: str) -> str:
        """Retorna URL de criação de issues de um repositório."""
        return f"{self.get_repository_endpoint(owner, name)}/issues"

    def validate(self) -> list[str]:
        """Valida configurações mínimas de GitHub.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.has_credentials:
            errors.append("ACCESS_TOKEN não configurado")

        if not self.api_base_url:
            errors.append("GITHUB_API_BASE_URL não pode ser vazio")

        if self.request_timeout_seconds <= 0:
            errors.append("GITHUB_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        return errors


def _parse_timeout(raw: str) -> float:
    try:
        return float(raw)
    except ValueError:
        return DEFAULT_REQUEST_TIMEOUT_SECONDS


def _load_from_env() -> GitHubSettings:
    """Carrega GitHubSettings a partir de variáveis de ambiente."""
    return GitHubSettings(
        access_token=os.getenv("ACCESS_TOKEN", ""),
        api_base_url=os.getenv("GITHUB_API_BASE_URL", GITHUB_API_BASE_URL),
        api_version=os.getenv("GITHUB_API_VERSION", GITHUB_API_VERSION),
        request_timeout_seconds=_parse_timeout(
            os.getenv("GITHUB_REQUEST_TIMEOUT_SECONDS", str(DEFAULT_REQUEST_TIMEOUT_SECONDS))
        ),
    )


@lru_cache(maxsize=1)
def get_github_settings() -> GitHubSettings:
    """Retorna instância cacheada de GitHubSettings.

    A cache garante que a credencial seja lida uma vez por processo.
    """
    return _load_from_env()
