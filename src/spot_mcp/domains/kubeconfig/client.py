"""Kubeconfig client operations.

The generate-kubeconfig endpoint authenticates with the refresh token in
its request body rather than a bearer header, so the dispatcher sends it
without an Authorization header.
"""

from typing import TYPE_CHECKING, Any

from spot_mcp.clients.resources import AUTH_GROUP

if TYPE_CHECKING:
    from spot_mcp.clients.base import SpotClient

KUBECONFIG_ENDPOINT = f"/apis/{AUTH_GROUP}/v1/generate-kubeconfig"


class KubeconfigClient:
    """Client for kubeconfig generation."""

    def __init__(self, spot: "SpotClient") -> None:
        self._spot = spot

    async def generate_kubeconfig(self, organization_name: str, cloudspace_name: str) -> Any:
        """Generate a kubeconfig for a cloudspace."""
        return await self._spot.send(
            KUBECONFIG_ENDPOINT,
            method="POST",
            body={
                "organization_name": organization_name,
                "cloudspace_name": cloudspace_name,
                "refresh_token": self._spot.session.credential,
            },
            operation="generate kubeconfig",
        )
