"""Server class client operations."""

from typing import TYPE_CHECKING, Any

from spot_mcp.clients.resources import SpotResources

if TYPE_CHECKING:
    from spot_mcp.clients.base import SpotClient


class ServerClassClient:
    """Client for server class operations."""

    def __init__(self, spot: "SpotClient") -> None:
        self._spot = spot

    async def list_server_classes(self) -> Any:
        """List all server classes."""
        return await self._spot.send(
            SpotResources.SERVER_CLASS.path(), operation="list server classes"
        )

    async def get_server_class(self, name: str) -> Any:
        """Get a server class by name."""
        return await self._spot.send(
            SpotResources.SERVER_CLASS.path(name=name), operation="get server class"
        )
