"""Commands for organization operations."""

from typing import TYPE_CHECKING, Any

from spot_mcp.domains.organizations.client import OrganizationClient

if TYPE_CHECKING:
    from spot_mcp.commands.registry import CommandRegistry
    from spot_mcp.server import SpotServer


def register_tools(registry: "CommandRegistry", server: "SpotServer") -> None:
    """Register organization commands."""

    @registry.command()
    async def list_organizations(args: Any) -> Any:
        """List all organizations the user has access to. Returns organization names and
        their associated namespaces (org-xxx format) needed for other API calls."""
        return await OrganizationClient(server.spot).list_organizations()
