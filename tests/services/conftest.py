"""Service test fixtures — fake vault transport, config snapshots, FastAPI test client.

Invariants:
    - Every test gets a fresh FakeVault (no documents unless the test adds them)
    - remote_config is enabled and points at the fake vault's base URL
    - client overrides the config and transport dependencies, never Settings

Design Decisions:
    - httpx.MockTransport over a live server: no sockets, every request recorded
    - Fixed clock fixtures so daily targets and collision fallbacks are stable
"""

import pytest
from httpx import ASGITransport, AsyncClient

from notebridge.api.dependencies import get_remote_config, get_remote_transport
from notebridge.config import RemoteApiConfig
from notebridge.main import app

from tests.services.fake_vault import API_KEY, BASE_URL, NOW_MS, TODAY, FakeVault


@pytest.fixture
def vault():
    return FakeVault()


@pytest.fixture
def remote_config():
    return RemoteApiConfig(enabled=True, base_url=BASE_URL, api_key=API_KEY)


@pytest.fixture
def strict_config():
    return RemoteApiConfig(
        enabled=True, base_url=BASE_URL, api_key=API_KEY, strict_existence=True,
    )


@pytest.fixture
def clock():
    """Keyword arguments pinning place_note's clock."""
    return {"today": lambda: TODAY, "now_ms": lambda: NOW_MS}


@pytest.fixture
async def client(vault, remote_config):
    """FastAPI test client wired to the fake vault."""
    app.dependency_overrides[get_remote_config] = lambda: remote_config
    app.dependency_overrides[get_remote_transport] = lambda: vault.transport()

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
