"""Pluggy hook specifications for Spot MCP plugins.

Domain modules, composites and external packages contribute commands to
the server by implementing these hooks.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pluggy

if TYPE_CHECKING:
    from spot_mcp.commands.registry import CommandRegistry
    from spot_mcp.plugin import PluginMetadata
    from spot_mcp.server import SpotServer

PROJECT_NAME = "spot_mcp"

hookspec = pluggy.HookspecMarker(PROJECT_NAME)
hookimpl = pluggy.HookimplMarker(PROJECT_NAME)


class SpotMCPHookSpec:
    """Hook specifications implemented by Spot MCP plugins."""

    @hookspec
    def spot_get_plugin_metadata(self) -> PluginMetadata:  # type: ignore[empty-body]
        """Return metadata describing the plugin."""

    @hookspec
    def spot_register_commands(self, registry: CommandRegistry, server: SpotServer) -> None:
        """Register the plugin's commands with the command registry.

        Args:
            registry: Registry to add commands to.
            server: The server instance, giving access to the API client.
        """
