"""Endpoint de criação de issue.

POST /github/{repo_name}/issues com body JSON `{title, body}`.

Fluxo:
1. Credencial (dependência): 500 se ausente
2. Validação do body: 400 se title/body ausentes, sem chamada de rede
3. Conta (owner) e criação da issue: 500 em falha do upstream
"""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from api.routes.github.dependencies import AuthHeaders
from api.validators.github import parse_issue_body, validate_issue_request
from app.bootstrap.github_factory import create_issue_use_case
from app.use_cases.github import CreateIssueUseCase
from config.logging import log_route_failure
from utils.errors import UpstreamError, ValidationError

logger = logging.getLogger(__name__)

router = APIRouter()

ISSUE_FAILURE_MESSAGE = "Failed to create issue on GitHub"


@router.post("/{repo_name}/issues", response_model=None)
async def create_issue(
    repo_name: str,
    request: Request,
    headers: AuthHeaders,
    use_case: Annotated[CreateIssueUseCase, Depends(create_issue_use_case)],
) -> JSONResponse | dict[str, str]:
    """Cria issue e devolve `{issue_url}`."""
    raw_body = await request.body()
    try:
        issue = validate_issue_request(parse_issue_body(raw_body))
    except ValidationError as exc:
        logger.warning(
            "github_issue_validation_failed",
            extra={"repo_name": repo_name, "payload_size": len(raw_body)},
        )
        return JSONResponse(status_code=exc.http_status, content=exc.to_response())

    logger.info("github_issue_requested", extra={"repo_name": repo_name})
    try:
        result = await use_case.execute(headers, repo_name, issue.title, issue.body)
    except UpstreamError as exc:
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
        log_route_failure(logger, "github_issue_create", exc, status_code)
        return JSONResponse(status_code=status_code, content={"error": ISSUE_FAILURE_MESSAGE})
    return result.model_dump()
