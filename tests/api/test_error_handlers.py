"""Testes dos error handlers globais."""

from __future__ import annotations

import httpx
import pytest
from fastapi import FastAPI

from api.error_handlers import register_error_handlers
from app.observability.middleware import correlation_id_middleware
from utils.errors import ConfigurationError, UpstreamNotFoundError, ValidationError


def _build_app() -> FastAPI:
    app = FastAPI()
    register_error_handlers(app)

    @app.get("/config")
    async def _config() -> None:
        raise ConfigurationError("ACCESS_TOKEN is not set")

    @app.get("/validation")
    async def _validation() -> None:
        raise ValidationError("Both title and body are required")

    @app.get("/upstream")
    async def _upstream() -> None:
        raise UpstreamNotFoundError("fetch_repository: GitHub API error (404)", status_code=404)

    return app


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("path", "status_code", "body"),
    [
        ("/config", 500, {"error": "ACCESS_TOKEN is not set"}),
        ("/validation", 400, {"error": "Both title and body are required"}),
        ("/upstream", 500, {"error": "GitHub API request failed"}),
    ],
)
async def test_relay_errors_become_flat_error_body(
    path: str,
    status_code: int,
    body: dict[str, str],
) -> None:
    async with httpx.AsyncClient(
        transport=httpx.ASGITransport(app=_build_app()),
        base_url="http://relay.test",
    ) as client:
        response = await client.get(path)

    assert response.status_code == status_code
    assert response.json() == body


def _build_app_with_correlation() -> FastAPI:
    app = FastAPI()
    app.middleware("http")(correlation_id_middleware)
    register_error_handlers(app)

    @app.get("/boom")
    async def _boom() -> None:
        raise RuntimeError("segredo interno")

    return app


async def _get_boom(headers: dict[str, str] | None = None) -> httpx.Response:
    # ServerErrorMiddleware relança após responder
    transport = httpx.ASGITransport(app=_build_app_with_correlation(), raise_app_exceptions=False)
    async with httpx.AsyncClient(transport=transport, base_url="http://relay.test") as client:
        return await client.get("/boom", headers=headers)


class TestGenericErrorHandler:
    """Catch-all de exceções não tratadas."""

    @pytest.mark.asyncio
    async def test_unhandled_exception_echoes_caller_correlation_id(self) -> None:
        response = await _get_boom({"x-correlation-id": "corr-boom"})

        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error"}
        assert response.headers["x-correlation-id"] == "corr-boom"

    @pytest.mark.asyncio
    async def test_unhandled_exception_carries_generated_correlation_id(self) -> None:
        response = await _get_boom()

        assert response.status_code == 500
        assert "segredo interno" not in response.text
        assert response.headers["x-correlation-id"]
