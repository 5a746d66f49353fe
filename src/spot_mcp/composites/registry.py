"""Plugin registry for composite commands.

This module provides plugin classes for composite commands that combine
multiple domain operations. All plugins use pluggy hooks for integration.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from spot_mcp import __version__
from spot_mcp.hooks import hookimpl
from spot_mcp.plugin import BasePlugin, PluginMetadata

if TYPE_CHECKING:
    from spot_mcp.commands.registry import CommandRegistry
    from spot_mcp.server import SpotServer


class CloudspaceCompositesPlugin(BasePlugin):
    """Plugin for cloudspace-wide composite commands.

    Combines cloudspace and node pool lookups into one overview so agents
    need fewer round trips to understand a cluster.
    """

    def __init__(self) -> None:
        super().__init__(
            PluginMetadata(
                name="cloudspace-composites",
                version=__version__,
                description="Single-call cloudspace overviews for AI agents",
            )
        )

    @hookimpl
    def spot_register_commands(self, registry: CommandRegistry, server: SpotServer) -> None:
        from spot_mcp.composites.cloudspace.tools import register_tools

        register_tools(registry, server)


def get_composite_plugins() -> list[BasePlugin]:
    """Return all composite plugin instances."""
    return [
        CloudspaceCompositesPlugin(),
    ]
