"""Tests for the session manager's token caching and refresh coalescing."""

import asyncio
from typing import Any
from urllib.parse import parse_qs

import pytest

from spot_mcp.clients.session import Session, SessionManager, TokenResponse
from spot_mcp.utils.errors import AuthError


class TestTokenResponse:
    """Tests for TokenResponse."""

    def test_prefers_id_token(self) -> None:
        """The ID token is presented as the bearer credential when issued."""
        token = TokenResponse(access_token="a", id_token="i", expires_in=60)
        assert token.bearer_token == "i"

    def test_falls_back_to_access_token(self) -> None:
        """Without an ID token the access token is used."""
        token = TokenResponse(access_token="a", expires_in=60)
        assert token.bearer_token == "a"


class TestSession:
    """Tests for Session validity."""

    def test_valid_before_margin(self) -> None:
        session = Session(access_token="t", expires_at=200.0)
        assert session.is_valid(now=139.0, margin=60.0) is True

    def test_invalid_inside_margin(self) -> None:
        session = Session(access_token="t", expires_at=200.0)
        assert session.is_valid(now=140.0, margin=60.0) is False


class TestSessionManager:
    """Tests for SessionManager."""

    async def test_exchange_posts_refresh_token_form(
        self, session_manager: SessionManager, spot_api: Any
    ) -> None:
        """The exchange is a form-encoded refresh_token grant to the auth URL."""
        await session_manager.ensure_valid()

        request = spot_api.token_requests[0]
        assert request.method == "POST"
        assert str(request.url) == "https://login.spot.test/oauth/token"
        assert request.headers["Content-Type"] == "application/x-www-form-urlencoded"
        form = parse_qs(request.content.decode())
        assert form == {
            "grant_type": ["refresh_token"],
            "client_id": ["test-client"],
            "refresh_token": ["refresh-secret"],
        }

    async def test_reuses_valid_session(
        self, session_manager: SessionManager, spot_api: Any
    ) -> None:
        """Two calls inside the validity window trigger one exchange."""
        first = await session_manager.ensure_valid()
        second = await session_manager.ensure_valid()

        assert first == second == "id-1"
        assert len(spot_api.token_requests) == 1
        assert session_manager.is_authenticated is True

    async def test_refreshes_at_expiry_margin(
        self, session_manager: SessionManager, spot_api: Any, clock: Any
    ) -> None:
        """A token within the margin of expiry is replaced by one new exchange."""
        await session_manager.ensure_valid()

        clock.advance(3600 - 60 - 1)
        await session_manager.ensure_valid()
        assert len(spot_api.token_requests) == 1

        clock.advance(1)
        spot_api.token_payload = {"access_token": "access-2", "expires_in": 3600}
        token = await session_manager.ensure_valid()

        assert token == "access-2"
        assert len(spot_api.token_requests) == 2

    async def test_concurrent_callers_share_one_exchange(
        self, session_manager: SessionManager, spot_api: Any
    ) -> None:
        """Concurrent callers without a session coalesce into one exchange."""
        tokens = await asyncio.gather(*(session_manager.ensure_valid() for _ in range(5)))

        assert tokens == ["id-1"] * 5
        assert len(spot_api.token_requests) == 1

    async def test_concurrent_callers_share_failure(
        self, session_manager: SessionManager, spot_api: Any
    ) -> None:
        """When the shared exchange fails, every waiter sees the same error."""
        spot_api.token_status = 401

        results = await asyncio.gather(
            *(session_manager.ensure_valid() for _ in range(5)),
            return_exceptions=True,
        )

        assert len(spot_api.token_requests) == 1
        assert all(isinstance(r, AuthError) for r in results)
        assert {str(r) for r in results} == {"Authentication failed: 401 - invalid_grant"}
        assert session_manager.session is None

    async def test_failure_is_not_cached(
        self, session_manager: SessionManager, spot_api: Any
    ) -> None:
        """A failed exchange does not block the next attempt."""
        spot_api.token_status = 500
        with pytest.raises(AuthError) as exc_info:
            await session_manager.ensure_valid()
        assert exc_info.value.status == 500

        spot_api.token_status = 200
        assert await session_manager.ensure_valid() == "id-1"
        assert len(spot_api.token_requests) == 2

    async def test_failure_keeps_previous_session(
        self, session_manager: SessionManager, spot_api: Any, clock: Any
    ) -> None:
        """A rejected refresh leaves the previously cached session in place."""
        await session_manager.ensure_valid()
        previous = session_manager.session

        clock.advance(3600)
        spot_api.token_status = 401
        with pytest.raises(AuthError):
            await session_manager.ensure_valid()

        assert session_manager.session is previous

    async def test_invalidate_forces_exchange(
        self, session_manager: SessionManager, spot_api: Any
    ) -> None:
        """invalidate() drops the cached token."""
        await session_manager.ensure_valid()
        session_manager.invalidate()

        assert session_manager.is_authenticated is False
        await session_manager.ensure_valid()
        assert len(spot_api.token_requests) == 2

    def test_credential_exposes_refresh_token(self, session_manager: SessionManager) -> None:
        assert session_manager.credential == "refresh-secret"
