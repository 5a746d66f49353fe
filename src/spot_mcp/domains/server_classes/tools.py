"""Commands for server class operations."""

from typing import TYPE_CHECKING, Any

from spot_mcp.domains.server_classes.client import ServerClassClient
from spot_mcp.domains.server_classes.models import GetServerClassArgs

if TYPE_CHECKING:
    from spot_mcp.commands.registry import CommandRegistry
    from spot_mcp.server import SpotServer


def register_tools(registry: "CommandRegistry", server: "SpotServer") -> None:
    """Register server class commands."""

    @registry.command()
    async def list_server_classes(args: Any) -> Any:
        """List all available server classes (machine types) that can be used for node pools.
        Returns CPU, memory, and pricing information."""
        return await ServerClassClient(server.spot).list_server_classes()

    @registry.command(args=GetServerClassArgs)
    async def get_server_class(args: GetServerClassArgs) -> Any:
        """Get detailed information about a specific server class by name."""
        return await ServerClassClient(server.spot).get_server_class(args.name)
