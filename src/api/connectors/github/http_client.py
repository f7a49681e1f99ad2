"""Cliente HTTP especializado para a REST API do GitHub.

Estende HttpClient genérico com comportamentos específicos do GitHub:
- Endpoints de conta, repositórios e issues
- Status não-2xx, falha de transporte ou body inválido viram UpstreamError
- 404 em repositório vira UpstreamNotFoundError
- Logging estruturado sem token
- Latência por chamada registrada como métrica

Sem retry: cada operação é uma única tentativa.
"""

from __future__ import annotations

import json
import logging
import time
from typing import TYPE_CHECKING, Any

from api.connectors.github.github_errors import parse_github_error
from api.connectors.github.github_logging import log_github_error, log_success
from api.connectors.github.http_base import HttpClient, HttpClientConfig, HttpError
from app.observability import record_latency
from utils.errors import UpstreamError, UpstreamNotFoundError

if TYPE_CHECKING:
    import httpx

    from config.settings import GitHubSettings

logger: logging.Logger = logging.getLogger(__name__)

_COMPONENT = "github_client"


class GitHubHttpClient(HttpClient):
    """Cliente HTTP para a API GitHub.

    Recebe as settings no construtor (endpoints, timeout) e o header set
    autenticado a cada chamada, montado por build_auth_headers().
    """

    def __init__(
        self,
        settings: GitHubSettings,
        config: HttpClientConfig | None = None,
    ) -> None:
        super().__init__(
            config or HttpClientConfig(timeout_seconds=settings.request_timeout_seconds)
        )
        self._settings = settings

    @property
    def settings(self) -> GitHubSettings:
        return self._settings

    async def fetch_profile(self, headers: dict[str, str]) -> dict[str, Any]:
        """GET /user: conta autenticada.

        Raises:
            UpstreamError: Falha de transporte, status não-2xx ou body inválido.
        """
        data = await self._call("fetch_profile", "GET", self._settings.user_endpoint, headers)
        return _require_object(data, "fetch_profile")

    async def fetch_owned_repositories(self, headers: dict[str, str]) -> list[dict[str, Any]]:
        """GET /user/repos?affiliation=owner: repositórios próprios.

        Ordem preservada conforme devolvida pelo upstream.
        """
        data = await self._call(
            "fetch_owned_repositories",
            "GET",
            self._settings.user_repos_endpoint,
            headers,
            params={"affiliation": "owner"},
        )
        if not isinstance(data, list) or not all(isinstance(item, dict) for item in data):
            raise UpstreamError("fetch_owned_repositories: body não é lista de objetos")
        return data

    async def fetch_repository(
        self,
        headers: dict[str, str],
        owner: str,
        name: str,
    ) -> dict[str, Any]:
        """GET /repos/{owner}/{name}.

        Raises:
            UpstreamNotFoundError: Se o upstream responde 404.
            UpstreamError: Demais falhas.
        """
        endpoint = self._settings.get_repository_endpoint(owner, name)
        data = await self._call("fetch_repository", "GET", endpoint, headers)
        return _require_object(data, "fetch_repository")

    async def create_issue(
        self,
        headers: dict[str, str],
        owner: str,
        name: str,
        title: str,
        body: str,
    ) -> dict[str, Any]:
        """POST /repos/{owner}/{name}/issues com `{title, body}`."""
        endpoint = self._settings.get_issues_endpoint(owner, name)
        data = await self._call(
            "create_issue",
            "POST",
            endpoint,
            headers,
            payload={"title": title, "body": body},
        )
        return _require_object(data, "create_issue")

    async def _call(
        self,
        operation: str,
        method: str,
        endpoint: str,
        headers: dict[str, str],
        *,
        params: dict[str, str] | None = None,
        payload: dict[str, Any] | None = None,
    ) -> Any:
        started_at = time.perf_counter()
        try:
            if method == "POST":
                response = await self.post(endpoint, json=payload or {}, headers=headers)
            else:
                response = await self.get(endpoint, headers=headers, params=params)
        except HttpError as exc:
            _record(operation, started_at, status_code=None, success=False)
            raise UpstreamError(f"{operation}: {exc}") from exc

        success = response.is_success
        _record(operation, started_at, status_code=response.status_code, success=success)
        if not success:
            self._raise_for_status(response, method, endpoint, operation)

        log_success(method, endpoint, response.status_code)
        return _decode_json(response, operation)

    def _raise_for_status(
        self,
        response: httpx.Response,
        method: str,
        endpoint: str,
        operation: str,
    ) -> None:
        try:
            response_data = response.json()
        except (json.JSONDecodeError, UnicodeDecodeError):
            response_data = None

        api_error = parse_github_error(response.status_code, response_data)
        log_github_error(api_error, method, endpoint)

        message = f"{operation}: GitHub API error ({api_error.status_code})"
        if api_error.is_not_found:
            raise UpstreamNotFoundError(message, status_code=api_error.status_code)
        raise UpstreamError(message, status_code=api_error.status_code)


def _decode_json(response: httpx.Response, operation: str) -> Any:
    try:
        return response.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        logger.error(
            "github_response_invalid_json",
            extra={"operation": operation, "status_code": response.status_code},
        )
        raise UpstreamError(
            f"{operation}: response JSON inválido",
            status_code=response.status_code,
        ) from exc


def _require_object(data: Any, operation: str) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise UpstreamError(f"{operation}: body não é objeto JSON")
    return data


def _record(operation: str, started_at: float, *, status_code: int | None, success: bool) -> None:
    latency_ms = (time.perf_counter() - started_at) * 1000
    record_latency(
        _COMPONENT,
        operation,
        latency_ms,
        status_code=status_code,
        success=success,
    )


def create_github_http_client(
    settings: GitHubSettings | None = None,
) -> GitHubHttpClient:
    """Factory para criar cliente GitHub com config padrão.

    Args:
        settings: GitHubSettings opcional. Se None, usa as do ambiente.
    """
    # Import local para evitar dependência circular
    from config.settings import get_github_settings

    github = settings or get_github_settings()
    config = HttpClientConfig(timeout_seconds=github.request_timeout_seconds)
    return GitHubHttpClient(settings=github, config=config)
