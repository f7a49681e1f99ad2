"""Testes dos endpoints de health e readiness."""

from __future__ import annotations

import json
from collections.abc import Iterator

import pytest

from api.routes.health.router import health_check, readiness_check
from config.settings import get_base_settings, get_github_settings


@pytest.fixture
def clear_settings_cache() -> Iterator[None]:
    get_base_settings.cache_clear()
    get_github_settings.cache_clear()
    yield
    get_base_settings.cache_clear()
    get_github_settings.cache_clear()


@pytest.mark.asyncio
async def test_health_reports_service_name(
    monkeypatch: pytest.MonkeyPatch,
    clear_settings_cache: None,
) -> None:
    monkeypatch.setenv("SERVICE_NAME", "relay-under-test")

    response = await health_check()

    assert response.status == "healthy"
    assert response.service == "relay-under-test"
    assert response.version == "1.0.0"


@pytest.mark.asyncio
async def test_readiness_returns_not_ready_without_credential(
    monkeypatch: pytest.MonkeyPatch,
    clear_settings_cache: None,
) -> None:
    monkeypatch.delenv("ACCESS_TOKEN", raising=False)

    response = await readiness_check()
    payload = json.loads(response.body.decode("utf-8"))

    assert response.status_code == 503
    assert payload["status"] == "not_ready"
    assert payload["checks"]["github"] == {"status": "failed", "error": "not_configured"}


@pytest.mark.asyncio
async def test_readiness_returns_ready_with_credential(
    monkeypatch: pytest.MonkeyPatch,
    clear_settings_cache: None,
) -> None:
    monkeypatch.setenv("ACCESS_TOKEN", "ghp_ready")

    response = await readiness_check()
    payload = json.loads(response.body.decode("utf-8"))

    assert response.status_code == 200
    assert payload["status"] == "ready"
    assert payload["checks"]["github"]["status"] == "ok"
