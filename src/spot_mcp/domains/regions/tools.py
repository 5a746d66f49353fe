"""Commands for region operations."""

from typing import TYPE_CHECKING, Any

from spot_mcp.domains.regions.client import RegionClient
from spot_mcp.domains.regions.models import GetRegionArgs

if TYPE_CHECKING:
    from spot_mcp.commands.registry import CommandRegistry
    from spot_mcp.server import SpotServer


def register_tools(registry: "CommandRegistry", server: "SpotServer") -> None:
    """Register region commands."""

    @registry.command()
    async def list_regions(args: Any) -> Any:
        """List all available Rackspace Spot regions where cloudspaces can be deployed.
        Returns region names, countries, and provider information."""
        return await RegionClient(server.spot).list_regions()

    @registry.command(args=GetRegionArgs)
    async def get_region(args: GetRegionArgs) -> Any:
        """Get detailed information about a specific Rackspace Spot region by name."""
        return await RegionClient(server.spot).get_region(args.name)
