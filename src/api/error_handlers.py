"""Error handlers globais da API.

- RelayError → status do erro com corpo `{error}`
- Exception (catch-all) → 500 sem detalhes internos, com x-correlation-id
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from app.observability import (
    CORRELATION_ID_HEADER,
    generate_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)
from utils.errors import RelayError

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"


def register_error_handlers(app: FastAPI) -> None:
    """Registra todos os handlers globais no app FastAPI."""
    _register_relay_error_handler(app)
    _register_generic_error_handler(app)


def _register_relay_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RelayError)
    async def relay_error_handler(request: Request, exc: RelayError) -> JSONResponse:
        logger.error(
            "relay_error",
            extra={
                "error_type": type(exc).__name__,
                "status_code": exc.http_status,
                "path": request.url.path,
            },
        )
        return JSONResponse(status_code=exc.http_status, content=exc.to_response())


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception) -> JSONResponse:
        """Catch-all: nunca vaza detalhes internos.

        Roda no ServerErrorMiddleware, depois do middleware de correlação
        já ter restaurado o contexto; o id vem do request.state.
        """
        correlation_id = (
            getattr(request.state, "correlation_id", None)
            or request.headers.get(CORRELATION_ID_HEADER)
            or generate_correlation_id()
        )
        token = set_correlation_id(correlation_id)
        try:
            logger.error(
                "unhandled_exception",
                extra={"error_type": type(exc).__name__, "path": request.url.path},
                exc_info=True,
            )
        finally:
            reset_correlation_id(token)
        response = JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": INTERNAL_ERROR_MESSAGE},
        )
        response.headers[CORRELATION_ID_HEADER] = correlation_id
        return response
