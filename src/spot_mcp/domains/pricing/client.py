"""Pricing client operations."""

from typing import TYPE_CHECKING, Any
from urllib.parse import quote

from spot_mcp.clients.resources import PRICING_GROUP, SpotResources

if TYPE_CHECKING:
    from spot_mcp.clients.base import SpotClient

MARKET_PRICE_CAPACITY_ENDPOINT = f"/apis/{PRICING_GROUP}/v1/market-price-capacity"
PERCENTILE_ENDPOINT = f"/apis/{PRICING_GROUP}/v1/percentile"


class PricingClient:
    """Client for pricing information."""

    def __init__(self, spot: "SpotClient") -> None:
        self._spot = spot

    async def get_price_history(self, server_class: str, region: str) -> Any:
        """Get historical prices for a server class in a region."""
        path = (
            f"{SpotResources.SERVER_CLASS.path(name=server_class)}"
            f"/{SpotResources.REGION.plural}/{quote(region, safe='')}/price-history"
        )
        return await self._spot.send(path, operation="get price history")

    async def get_market_price_capacity(self) -> Any:
        """Get current market price and capacity for all server classes."""
        return await self._spot.send(
            MARKET_PRICE_CAPACITY_ENDPOINT, operation="get market price capacity"
        )

    async def get_percentile_information(self) -> Any:
        """Get the price percentile distribution for server classes."""
        return await self._spot.send(
            PERCENTILE_ENDPOINT, operation="get percentile information"
        )
