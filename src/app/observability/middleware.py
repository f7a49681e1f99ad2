"""Middleware HTTP que associa um correlation_id a cada requisição."""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.observability.correlation import (
    CORRELATION_ID_HEADER,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from starlette.requests import Request
    from starlette.responses import Response


async def correlation_id_middleware(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    """Usa x-correlation-id do chamador (ou gera um) e devolve no response."""
    token = set_correlation_id(request.headers.get(CORRELATION_ID_HEADER))
    # Handler catch-all roda fora deste middleware e lê o id do scope
    request.state.correlation_id = get_correlation_id()
    try:
        response = await call_next(request)
        response.headers[CORRELATION_ID_HEADER] = get_correlation_id()
        return response
    finally:
        reset_correlation_id(token)
