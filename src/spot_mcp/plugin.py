"""Plugin interface for Spot MCP components.

This module defines the plugin base class and metadata that all Spot MCP
plugins use to integrate with the server via pluggy hooks.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from spot_mcp.hooks import hookimpl

if TYPE_CHECKING:
    from spot_mcp.commands.registry import CommandRegistry
    from spot_mcp.server import SpotServer


@dataclass
class PluginMetadata:
    """Metadata describing a Spot MCP plugin."""

    name: str
    """Unique plugin name, e.g., 'cloudspaces', 'pricing'."""

    version: str
    """Plugin version following semver, e.g., '1.0.0'."""

    description: str
    """Human-readable description of what this plugin provides."""


class BasePlugin:
    """Base implementation of a Spot MCP plugin.

    Subclasses override spot_register_commands to add their commands.

    Example entry point in pyproject.toml for external plugins:
        [project.entry-points."spot_mcp.plugins"]
        my_plugin = "my_package.plugin:MyPlugin"
    """

    def __init__(self, metadata: PluginMetadata) -> None:
        self._metadata = metadata

    @property
    def metadata(self) -> PluginMetadata:
        """Plugin metadata."""
        return self._metadata

    @hookimpl
    def spot_get_plugin_metadata(self) -> PluginMetadata:
        """Return plugin metadata."""
        return self._metadata

    @hookimpl
    def spot_register_commands(self, registry: CommandRegistry, server: SpotServer) -> None:
        """Register commands. Override in subclass."""
