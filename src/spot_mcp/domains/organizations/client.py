"""Organization client operations."""

from typing import TYPE_CHECKING, Any

from spot_mcp.clients.resources import SpotResources

if TYPE_CHECKING:
    from spot_mcp.clients.base import SpotClient


class OrganizationClient:
    """Client for organization operations."""

    def __init__(self, spot: "SpotClient") -> None:
        self._spot = spot

    async def list_organizations(self) -> Any:
        """List organizations visible to the authenticated user."""
        return await self._spot.send(
            SpotResources.ORGANIZATION.path(), operation="list organizations"
        )
