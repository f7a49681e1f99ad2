"""Configuração do pytest para o projeto github-relay."""

import sys
from pathlib import Path

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

import httpx  # noqa: E402
import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402

from api.connectors.github import GitHubHttpClient, HttpClientConfig  # noqa: E402
from config.settings import GitHubSettings  # noqa: E402
from tests.fakes.fake_github_upstream import TEST_API_BASE_URL, FakeGitHubUpstream  # noqa: E402
from tests.fakes.relay_app import TEST_ACCESS_TOKEN, build_relay_app  # noqa: E402


@pytest.fixture
def github_settings() -> GitHubSettings:
    return GitHubSettings(access_token=TEST_ACCESS_TOKEN, api_base_url=TEST_API_BASE_URL)


@pytest.fixture
def fake_upstream() -> FakeGitHubUpstream:
    return FakeGitHubUpstream()


@pytest.fixture
def github_http_client(
    github_settings: GitHubSettings,
    fake_upstream: FakeGitHubUpstream,
) -> GitHubHttpClient:
    """Cliente real apontando para o upstream simulado."""
    config = HttpClientConfig(
        timeout_seconds=github_settings.request_timeout_seconds,
        transport=fake_upstream.transport,
    )
    return GitHubHttpClient(settings=github_settings, config=config)


@pytest_asyncio.fixture
async def relay_client(github_settings: GitHubSettings, github_http_client: GitHubHttpClient):
    """Cliente HTTP in-process para o relay, com upstream simulado."""
    relay_app = build_relay_app(github_settings, github_http_client)
    async with httpx.AsyncClient(
        transport=httpx.ASGITransport(app=relay_app),
        base_url="http://relay.test",
    ) as client:
        yield client
