"""Region client operations."""

from typing import TYPE_CHECKING, Any

from spot_mcp.clients.resources import SpotResources

if TYPE_CHECKING:
    from spot_mcp.clients.base import SpotClient


class RegionClient:
    """Client for region operations."""

    def __init__(self, spot: "SpotClient") -> None:
        self._spot = spot

    async def list_regions(self) -> Any:
        """List all regions."""
        return await self._spot.send(
            SpotResources.REGION.path(), operation="list regions"
        )

    async def get_region(self, name: str) -> Any:
        """Get a region by name."""
        return await self._spot.send(
            SpotResources.REGION.path(name=name), operation="get region"
        )
