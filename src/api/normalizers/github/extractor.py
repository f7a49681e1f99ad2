"""Extrator de payloads da API GitHub.

Responsabilidades:
- Projetar conta e repositórios nas views de allowlist
- Montar a resposta combinada de GET /github
- Extrair owner (login) e URL da issue criada

Não faz chamadas de rede. Payload fora do formato esperado vira
UpstreamError, tratado na rota como falha do upstream.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError as PydanticValidationError

from app.domain.github import IssueCreationResult, ProfileOverview, ProfileView, RepositoryView
from utils.errors import UpstreamError

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger(__name__)


def extract_profile_view(payload: dict[str, Any]) -> ProfileView:
    """Projeta a conta do upstream no ProfileView."""
    try:
        return ProfileView.model_validate(payload)
    except PydanticValidationError as exc:
        logger.warning("github_profile_payload_invalid", extra={"error_count": exc.error_count()})
        raise UpstreamError("profile payload fora do formato esperado") from exc


def extract_repository_views(payloads: Sequence[dict[str, Any]]) -> tuple[RepositoryView, ...]:
    """Projeta cada repositório, preservando a ordem do upstream."""
    try:
        return tuple(RepositoryView.model_validate(item) for item in payloads)
    except PydanticValidationError as exc:
        logger.warning("github_repository_payload_invalid", extra={"error_count": exc.error_count()})
        raise UpstreamError("repository payload fora do formato esperado") from exc


def build_profile_overview(
    profile_payload: dict[str, Any],
    repositories_payload: Sequence[dict[str, Any]],
) -> ProfileOverview:
    """Monta a resposta combinada a partir dos dois bodies do upstream.

    Contadores de followers/following saem no topo, fora do profile.
    """
    return ProfileOverview(
        profile=extract_profile_view(profile_payload),
        followers_count=_as_count(profile_payload.get("followers")),
        following_count=_as_count(profile_payload.get("following")),
        personal_repositories=extract_repository_views(repositories_payload),
    )


def extract_owner_login(profile_payload: dict[str, Any]) -> str:
    """Retorna o login da conta, usado como owner nos paths de repositório.

    Raises:
        UpstreamError: Se o body não traz login.
    """
    login = profile_payload.get("login")
    if not isinstance(login, str) or not login:
        raise UpstreamError("profile sem login")
    return login


def extract_issue_result(issue_payload: dict[str, Any]) -> IssueCreationResult:
    """Extrai a URL canônica (html_url) da issue criada."""
    issue_url = issue_payload.get("html_url")
    if not isinstance(issue_url, str) or not issue_url:
        raise UpstreamError("issue criada sem html_url")
    return IssueCreationResult(issue_url=issue_url)


def _as_count(value: Any) -> int | None:
    # bool é subclasse de int; não é contador
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return None
