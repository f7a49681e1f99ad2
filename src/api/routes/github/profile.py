"""Endpoints de leitura da conta GitHub.

Endpoints:
- GET /github: perfil + repositórios próprios (view filtrada)
- GET /github/{repo_name}: repositório da conta (body do upstream sem filtro)

Falhas do upstream viram 500 com mensagem genérica por rota; status e
body do upstream nunca são repassados.
"""

from __future__ import annotations

import logging
from typing import Annotated, Any

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from api.routes.github.dependencies import AuthHeaders
from app.bootstrap.github_factory import (
    create_profile_overview_use_case,
    create_repository_use_case,
)
from app.use_cases.github import GetProfileOverviewUseCase, GetRepositoryUseCase
from config.logging import log_route_failure
from utils.errors import UpstreamError

logger = logging.getLogger(__name__)

router = APIRouter()

PROFILE_FAILURE_MESSAGE = "Failed to fetch data from GitHub API"
REPOSITORY_FAILURE_MESSAGE = "Failed to fetch repository data"


@router.get("", response_model=None)
@router.get("/", response_model=None, include_in_schema=False)
async def get_profile_overview(
    headers: AuthHeaders,
    use_case: Annotated[GetProfileOverviewUseCase, Depends(create_profile_overview_use_case)],
) -> JSONResponse | dict[str, Any]:
    """Perfil, contadores de followers/following e repositórios próprios."""
    logger.info("github_profile_overview_requested")
    try:
        overview = await use_case.execute(headers)
    except UpstreamError as exc:
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
        log_route_failure(logger, "github_profile_overview", exc, status_code)
        return JSONResponse(status_code=status_code, content={"error": PROFILE_FAILURE_MESSAGE})
    return overview.as_response()


@router.get("/{repo_name}", response_model=None)
async def get_repository(
    repo_name: str,
    headers: AuthHeaders,
    use_case: Annotated[GetRepositoryUseCase, Depends(create_repository_use_case)],
) -> JSONResponse | dict[str, Any]:
    """Repositório da conta autenticada, como devolvido pelo upstream.

    Repositório inexistente também responde 500 (sem distinção de 404).
    """
    logger.info("github_repository_requested", extra={"repo_name": repo_name})
    try:
        return await use_case.execute(headers, repo_name)
    except UpstreamError as exc:
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
        log_route_failure(logger, "github_repository", exc, status_code)
        return JSONResponse(status_code=status_code, content={"error": REPOSITORY_FAILURE_MESSAGE})
