"""Pydantic models for regions."""

from pydantic import Field

from spot_mcp.models.common import CommandArgs


class GetRegionArgs(CommandArgs):
    """Arguments for get_region."""

    name: str = Field(
        ...,
        min_length=1,
        description="Region name (e.g., us-central-dfw-1, us-east-iad-1, eu-west-lon-1)",
    )
