"""Session management for the Rackspace Spot API.

The Spot API authenticates resource calls with short-lived bearer tokens
issued in exchange for a long-lived refresh token. SessionManager caches
the current token and re-authenticates lazily when it is missing or about
to expire.

Concurrent callers that find no valid session share one in-flight
exchange: the pending asyncio.Task is cached and every caller awaits the
same task, so a burst of tool calls produces a single token request.
"""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Callable
from dataclasses import dataclass

import httpx
from pydantic import BaseModel, Field

from spot_mcp.utils.errors import AuthError

logger = logging.getLogger(__name__)

TOKEN_ENDPOINT = "/oauth/token"


class TokenResponse(BaseModel):
    """Successful response from the token endpoint."""

    access_token: str = Field(..., description="OAuth access token")
    id_token: str | None = Field(None, description="OpenID Connect ID token")
    expires_in: int = Field(..., description="Token lifetime in seconds")
    token_type: str = Field("Bearer", description="Token type")
    scope: str | None = Field(None, description="Granted scopes")

    @property
    def bearer_token(self) -> str:
        """Token to present as bearer credential.

        The Spot API validates the ID token, so it is preferred when issued.
        """
        return self.id_token or self.access_token


@dataclass(frozen=True)
class Session:
    """A bearer token and the clock time at which it expires."""

    access_token: str
    expires_at: float

    def is_valid(self, now: float, margin: float) -> bool:
        """Check whether the token is still usable at ``now``."""
        return now < self.expires_at - margin


class SessionManager:
    """Owns the refresh token and the derived access token."""

    def __init__(
        self,
        http: httpx.AsyncClient,
        refresh_token: str,
        auth_url: str,
        client_id: str,
        refresh_margin: float = 60.0,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._http = http
        self._refresh_token = refresh_token
        self._token_url = f"{auth_url.rstrip('/')}{TOKEN_ENDPOINT}"
        self._client_id = client_id
        self._refresh_margin = refresh_margin
        self._clock = clock
        self._session: Session | None = None
        self._pending: asyncio.Task[Session] | None = None

    @property
    def credential(self) -> str:
        """The raw refresh token, for endpoints that authenticate with it directly."""
        return self._refresh_token

    @property
    def session(self) -> Session | None:
        """The cached session, if any."""
        return self._session

    @property
    def is_authenticated(self) -> bool:
        """Whether a cached session is currently valid."""
        return self._session is not None and self._session.is_valid(
            self._clock(), self._refresh_margin
        )

    async def ensure_valid(self) -> str:
        """Return an access token that is valid right now.

        Authenticates first if there is no session or the cached one is
        within the refresh margin of its expiry.

        Raises:
            AuthError: If the token exchange is rejected.
        """
        session = self._session
        if session is not None and session.is_valid(self._clock(), self._refresh_margin):
            return session.access_token

        session = await self.authenticate()
        return session.access_token

    async def authenticate(self) -> Session:
        """Exchange the refresh token for a new session.

        If an exchange is already in flight, waits for it instead of
        starting another one. Every waiter sees the same result or the
        same exception.

        Raises:
            AuthError: If the token endpoint returns a non-success status.
        """
        if self._pending is None:
            task = asyncio.ensure_future(self._exchange())
            task.add_done_callback(self._clear_pending)
            self._pending = task

        # Shield so a cancelled caller does not cancel the shared exchange.
        return await asyncio.shield(self._pending)

    def invalidate(self) -> None:
        """Drop the cached session so the next call re-authenticates."""
        self._session = None

    def _clear_pending(self, task: asyncio.Task[Session]) -> None:
        if self._pending is task:
            self._pending = None
        # Mark the exception retrieved; waiters re-raise it themselves.
        if not task.cancelled():
            task.exception()

    async def _exchange(self) -> Session:
        logger.debug("Requesting new access token")
        response = await self._http.post(
            self._token_url,
            data={
                "grant_type": "refresh_token",
                "client_id": self._client_id,
                "refresh_token": self._refresh_token,
            },
            headers={"Content-Type": "application/x-www-form-urlencoded"},
        )

        if not response.is_success:
            logger.warning(f"Token exchange rejected with status {response.status_code}")
            raise AuthError(response.status_code, response.text)

        token = TokenResponse.model_validate(response.json())
        session = Session(
            access_token=token.bearer_token,
            expires_at=self._clock() + token.expires_in,
        )
        self._session = session
        logger.info(f"Obtained access token valid for {token.expires_in}s")
        return session
