"""Authenticated HTTP dispatcher for the Rackspace Spot API."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import httpx

from spot_mcp.utils.errors import TransportError

if TYPE_CHECKING:
    from spot_mcp.clients.session import SessionManager

logger = logging.getLogger(__name__)

# Endpoints that authenticate themselves: the token endpoint, and the
# kubeconfig generator which takes the refresh token in its request body.
AUTH_EXEMPT_ENDPOINTS = (
    "/oauth/token",
    "/generate-kubeconfig",
)


def is_auth_exempt(endpoint: str) -> bool:
    """Check whether an endpoint must be sent without a bearer token."""
    path = httpx.URL(endpoint).path
    return any(path.endswith(exempt) for exempt in AUTH_EXEMPT_ENDPOINTS)


class SpotClient:
    """Dispatches requests to the Spot API.

    Attaches a bearer token obtained from the session manager to every
    request except those addressed to auth-exempt endpoints. Non-2xx
    responses are raised as TransportError without retrying.
    """

    def __init__(self, http: httpx.AsyncClient, session: SessionManager) -> None:
        self._http = http
        self._session = session

    @property
    def session(self) -> SessionManager:
        """The session manager supplying bearer tokens."""
        return self._session

    async def send(
        self,
        endpoint: str,
        method: str = "GET",
        body: Any = None,
        params: dict[str, str] | None = None,
        operation: str | None = None,
    ) -> Any:
        """Send a request and return the decoded response body.

        Args:
            endpoint: Path relative to the API base URL, or an absolute URL.
            method: HTTP method.
            body: JSON-serializable request body.
            params: Query string parameters.
            operation: Short description used in error messages, e.g. "list regions".

        Returns:
            Decoded JSON, the raw text for non-JSON responses, or None if empty.

        Raises:
            TransportError: If the response status is not 2xx.
            AuthError: If a token is needed and the exchange is rejected.
        """
        headers: dict[str, str] = {}
        if not is_auth_exempt(endpoint):
            token = await self._session.ensure_valid()
            headers["Authorization"] = f"Bearer {token}"

        logger.debug(f"{method} {endpoint}")
        response = await self._http.request(
            method,
            endpoint,
            json=body,
            params=params,
            headers=headers,
        )

        if not response.is_success:
            raise TransportError(response.status_code, response.text, operation)

        return _decode(response)

    async def aclose(self) -> None:
        """Close the underlying HTTP connection pool."""
        await self._http.aclose()


def _decode(response: httpx.Response) -> Any:
    """Decode a response body as JSON, falling back to text."""
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text
