"""Pydantic models for pricing queries."""

from pydantic import Field

from spot_mcp.models.common import CommandArgs


class PriceHistoryArgs(CommandArgs):
    """Arguments for get_price_history."""

    server_class: str = Field(
        ..., min_length=1, alias="serverClass", description="Server class name"
    )
    region: str = Field(..., min_length=1, description="Region name")
