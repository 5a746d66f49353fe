"""Commands for pricing information."""

from typing import TYPE_CHECKING, Any

from spot_mcp.domains.pricing.client import PricingClient
from spot_mcp.domains.pricing.models import PriceHistoryArgs

if TYPE_CHECKING:
    from spot_mcp.commands.registry import CommandRegistry
    from spot_mcp.server import SpotServer


def register_tools(registry: "CommandRegistry", server: "SpotServer") -> None:
    """Register pricing commands."""

    @registry.command()
    async def get_market_pricing(args: Any) -> Any:
        """Get current market pricing and capacity information for all server classes
        across regions. Useful for determining optimal bid prices."""
        return await PricingClient(server.spot).get_market_price_capacity()

    @registry.command(args=PriceHistoryArgs)
    async def get_price_history(args: PriceHistoryArgs) -> Any:
        """Get historical price data for a specific server class in a region.
        Useful for understanding price trends."""
        return await PricingClient(server.spot).get_price_history(args.server_class, args.region)

    @registry.command()
    async def get_percentile_pricing(args: Any) -> Any:
        """Get percentile pricing information showing price distribution for server classes.
        Useful for setting competitive bid prices."""
        return await PricingClient(server.spot).get_percentile_information()
