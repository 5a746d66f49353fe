"""Pricing domain - market prices, price history and percentiles."""

from spot_mcp.domains.pricing.client import PricingClient
from spot_mcp.domains.pricing.models import PriceHistoryArgs

__all__ = [
    "PriceHistoryArgs",
    "PricingClient",
]
