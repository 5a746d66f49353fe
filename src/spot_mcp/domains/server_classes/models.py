"""Pydantic models for server classes."""

from pydantic import Field

from spot_mcp.models.common import CommandArgs


class GetServerClassArgs(CommandArgs):
    """Arguments for get_server_class."""

    name: str = Field(
        ...,
        min_length=1,
        description="Server class name (e.g., gp.vs1.small-dfw, m3.medium)",
    )
