"""Cloudspace client operations."""

from typing import TYPE_CHECKING, Any

from spot_mcp.clients.resources import SpotResources
from spot_mcp.domains.cloudspaces.models import CloudspaceCreate

if TYPE_CHECKING:
    from spot_mcp.clients.base import SpotClient


class CloudspaceClient:
    """Client for cloudspace operations."""

    def __init__(self, spot: "SpotClient") -> None:
        self._spot = spot

    async def list_cloudspaces(self, namespace: str) -> Any:
        """List cloudspaces in an organization namespace."""
        return await self._spot.send(
            SpotResources.CLOUDSPACE.path(namespace),
            operation="list cloudspaces",
        )

    async def get_cloudspace(self, namespace: str, name: str) -> Any:
        """Get a cloudspace by name."""
        return await self._spot.send(
            SpotResources.CLOUDSPACE.path(namespace, name),
            operation="get cloudspace",
        )

    async def create_cloudspace(self, request: CloudspaceCreate) -> Any:
        """Create a new cloudspace."""
        return await self._spot.send(
            SpotResources.CLOUDSPACE.path(request.namespace),
            method="POST",
            body=request.to_manifest(),
            operation="create cloudspace",
        )

    async def delete_cloudspace(self, namespace: str, name: str) -> Any:
        """Delete a cloudspace and everything in it."""
        return await self._spot.send(
            SpotResources.CLOUDSPACE.path(namespace, name),
            method="DELETE",
            operation="delete cloudspace",
        )
