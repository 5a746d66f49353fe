"""Plugin manager using pluggy for Spot MCP.

This module provides the PluginManager class that handles plugin
discovery and command registration using pluggy.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import pluggy

from spot_mcp.hooks import PROJECT_NAME, SpotMCPHookSpec

if TYPE_CHECKING:
    from spot_mcp.commands.registry import CommandRegistry
    from spot_mcp.plugin import PluginMetadata
    from spot_mcp.server import SpotServer

logger = logging.getLogger(__name__)

# Entry point group name for external plugin discovery
PLUGIN_ENTRY_POINT_GROUP = "spot_mcp.plugins"


class PluginManager:
    """Manages plugin discovery and registration.

    Uses pluggy for hook-based plugin architecture, providing a unified
    interface for core domain plugins and external plugins.
    """

    def __init__(self) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(SpotMCPHookSpec)
        self._registered_plugins: dict[str, Any] = {}

    @property
    def hook(self) -> Any:
        """Get the pluggy hook caller for invoking hooks."""
        return self._pm.hook

    @property
    def registered_plugins(self) -> dict[str, Any]:
        """Get all registered plugins by name."""
        return self._registered_plugins

    def register_plugin(self, plugin: Any, name: str | None = None) -> str:
        """Register a plugin instance.

        Args:
            plugin: Plugin instance implementing hook methods.
            name: Optional name for the plugin. If not provided,
                  will try to get from plugin metadata.

        Returns:
            The name used to register the plugin.
        """
        if name is None:
            if hasattr(plugin, "spot_get_plugin_metadata"):
                name = plugin.spot_get_plugin_metadata().name
            else:
                name = type(plugin).__name__

        self._pm.register(plugin, name=name)
        self._registered_plugins[name] = plugin
        logger.debug(f"Registered plugin: {name}")
        return name

    def load_entrypoint_plugins(self) -> int:
        """Discover and load external plugins from entry points.

        Returns:
            Number of plugins loaded.
        """
        count = self._pm.load_setuptools_entrypoints(PLUGIN_ENTRY_POINT_GROUP)

        for plugin in self._pm.get_plugins():
            name = self._pm.get_name(plugin)
            if name and name not in self._registered_plugins:
                self._registered_plugins[name] = plugin
                logger.info(f"Loaded external plugin from entry point: {name}")

        if count:
            logger.info(f"Loaded {count} external plugins from entry points")
        return count

    def load_core_plugins(self) -> int:
        """Load core domain plugins and composite plugins.

        Returns:
            Total number of plugins loaded.
        """
        from spot_mcp.composites.registry import get_composite_plugins
        from spot_mcp.domains.registry import get_core_plugins

        domain_plugins = get_core_plugins()
        for plugin in domain_plugins:
            self.register_plugin(plugin)

        logger.info(f"Loaded {len(domain_plugins)} core domain plugins")

        composite_plugins = get_composite_plugins()
        for plugin in composite_plugins:
            self.register_plugin(plugin)

        logger.info(f"Loaded {len(composite_plugins)} composite plugins")

        return len(domain_plugins) + len(composite_plugins)

    def get_all_metadata(self) -> list[PluginMetadata]:
        """Collect metadata from all registered plugins."""
        results = self.hook.spot_get_plugin_metadata()
        return [meta for meta in results if meta is not None]

    def register_all_commands(self, registry: CommandRegistry, server: SpotServer) -> None:
        """Call command registration hooks on all plugins.

        Args:
            registry: The command registry to populate.
            server: The Spot server instance.
        """
        self.hook.spot_register_commands(registry=registry, server=server)
        logger.info(
            f"Registered {len(registry)} commands from {len(self._registered_plugins)} plugins"
        )
