"""Node pool client operations.

Spot and on-demand node pools share the same REST shape and differ only
in resource type, so one client serves both.
"""

from typing import TYPE_CHECKING, Any

from spot_mcp.clients.resources import ResourceDefinition, SpotResources, cloudspace_selector
from spot_mcp.domains.nodepools.models import NodePoolCreate

if TYPE_CHECKING:
    from spot_mcp.clients.base import SpotClient

_LABELS = {
    SpotResources.SPOT_NODE_POOL.kind: "spot node pool",
    SpotResources.ONDEMAND_NODE_POOL.kind: "on-demand node pool",
}


class NodePoolClient:
    """Client for spot or on-demand node pool operations."""

    def __init__(self, spot: "SpotClient", resource: ResourceDefinition) -> None:
        self._spot = spot
        self._resource = resource
        self._label = _LABELS.get(resource.kind, resource.kind)

    @classmethod
    def spot_pools(cls, spot: "SpotClient") -> "NodePoolClient":
        """Client for auction-priced spot node pools."""
        return cls(spot, SpotResources.SPOT_NODE_POOL)

    @classmethod
    def ondemand_pools(cls, spot: "SpotClient") -> "NodePoolClient":
        """Client for fixed-price on-demand node pools."""
        return cls(spot, SpotResources.ONDEMAND_NODE_POOL)

    async def list_node_pools(self, namespace: str, cloudspace: str | None = None) -> Any:
        """List node pools, optionally only those owned by a cloudspace."""
        params = {"labelSelector": cloudspace_selector(cloudspace)} if cloudspace else None
        return await self._spot.send(
            self._resource.path(namespace),
            params=params,
            operation=f"list {self._label}s",
        )

    async def get_node_pool(self, namespace: str, name: str) -> Any:
        """Get a node pool by name."""
        return await self._spot.send(
            self._resource.path(namespace, name),
            operation=f"get {self._label}",
        )

    async def create_node_pool(self, request: NodePoolCreate) -> Any:
        """Create a node pool."""
        return await self._spot.send(
            self._resource.path(request.namespace),
            method="POST",
            body=request.to_manifest(self._resource),
            operation=f"create {self._label}",
        )

    async def delete_node_pool(self, namespace: str, name: str) -> Any:
        """Delete a node pool."""
        return await self._spot.send(
            self._resource.path(namespace, name),
            method="DELETE",
            operation=f"delete {self._label}",
        )
