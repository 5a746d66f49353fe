"""Shared fixtures for Spot MCP tests.

HTTP traffic is served by an in-memory fake of the token endpoint and the
Spot API mounted on httpx.MockTransport.
"""

import os
from typing import Any

import httpx
import pytest

from spot_mcp.clients.base import SpotClient
from spot_mcp.clients.session import SessionManager
from spot_mcp.config import SpotConfig
from spot_mcp.server import SpotServer

AUTH_URL = "https://login.spot.test"
API_URL = "https://spot.test"
REFRESH_TOKEN = "refresh-secret"


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, now: float = 1000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeSpotAPI:
    """Records requests and answers them from configured routes."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.routes: dict[tuple[str, str], tuple[int, Any]] = {}
        self.token_status = 200
        self.token_payload: dict[str, Any] = {
            "access_token": "access-1",
            "id_token": "id-1",
            "expires_in": 3600,
            "token_type": "Bearer",
        }

    def route(self, method: str, path: str, status: int = 200, payload: Any = None) -> None:
        """Answer ``method path`` with a JSON payload, raw text, or empty body."""
        self.routes[(method, path)] = (status, payload)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)

        if request.url.path == "/oauth/token":
            if self.token_status != 200:
                return httpx.Response(self.token_status, text="invalid_grant")
            return httpx.Response(200, json=self.token_payload)

        key = (request.method, request.url.path)
        if key not in self.routes:
            return httpx.Response(404, text="not found")

        status, payload = self.routes[key]
        if payload is None:
            return httpx.Response(status)
        if isinstance(payload, str):
            return httpx.Response(status, text=payload)
        return httpx.Response(status, json=payload)

    @property
    def token_requests(self) -> list[httpx.Request]:
        return [r for r in self.requests if r.url.path == "/oauth/token"]

    @property
    def api_requests(self) -> list[httpx.Request]:
        return [r for r in self.requests if r.url.path != "/oauth/token"]


@pytest.fixture
def clock() -> FakeClock:
    """A clock starting at t=1000."""
    return FakeClock()


@pytest.fixture
def spot_api() -> FakeSpotAPI:
    """Fake token endpoint and Spot API."""
    return FakeSpotAPI()


@pytest.fixture
def http(spot_api: FakeSpotAPI) -> httpx.AsyncClient:
    """HTTP client routed to the fake API."""
    return httpx.AsyncClient(
        base_url=API_URL,
        transport=httpx.MockTransport(spot_api.handler),
    )


@pytest.fixture
def session_manager(http: httpx.AsyncClient, clock: FakeClock) -> SessionManager:
    """Session manager using the fake token endpoint and clock."""
    return SessionManager(
        http,
        refresh_token=REFRESH_TOKEN,
        auth_url=AUTH_URL,
        client_id="test-client",
        refresh_margin=60.0,
        clock=clock,
    )


@pytest.fixture
def spot_client(http: httpx.AsyncClient, session_manager: SessionManager) -> SpotClient:
    """Authenticated dispatcher over the fake API."""
    return SpotClient(http, session_manager)


@pytest.fixture
def config() -> SpotConfig:
    """Permissive configuration independent of the environment."""
    return SpotConfig(_env_file=None, refresh_token=REFRESH_TOKEN, api_url=API_URL)


@pytest.fixture
def read_only_config() -> SpotConfig:
    """Restricted configuration independent of the environment."""
    return SpotConfig(
        _env_file=None, refresh_token=REFRESH_TOKEN, api_url=API_URL, read_only=True
    )


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep RACKSPACE_SPOT_* variables from the host out of the tests."""
    for key in list(os.environ):
        if key.startswith("RACKSPACE_SPOT_"):
            monkeypatch.delenv(key)


def _make_server(config: SpotConfig, spot_client: SpotClient) -> SpotServer:
    server = SpotServer(config)
    server._spot = spot_client
    server.load_commands()
    return server


@pytest.fixture
def server(config: SpotConfig, spot_client: SpotClient) -> SpotServer:
    """Read-write server with all core commands and a fake API."""
    return _make_server(config, spot_client)


@pytest.fixture
def read_only_server(read_only_config: SpotConfig, spot_client: SpotClient) -> SpotServer:
    """Read-only server with all core commands and a fake API."""
    return _make_server(read_only_config, spot_client)
