"""Plugin registry for core domain modules.

Each domain is wrapped in a plugin whose spot_register_commands hook
adds the domain's commands to the server's registry.
"""

from __future__ import annotations

from collections.abc import Callable
from importlib import import_module
from typing import TYPE_CHECKING

from spot_mcp import __version__
from spot_mcp.hooks import hookimpl
from spot_mcp.plugin import BasePlugin, PluginMetadata

if TYPE_CHECKING:
    from spot_mcp.commands.registry import CommandRegistry
    from spot_mcp.server import SpotServer


class DomainPlugin(BasePlugin):
    """Plugin contributing the commands of one domain package."""

    def __init__(self, name: str, description: str) -> None:
        super().__init__(
            PluginMetadata(
                name=name,
                version=__version__,
                description=description,
            )
        )

    def _register_tools(self) -> Callable[[CommandRegistry, SpotServer], None]:
        module = import_module(f"spot_mcp.domains.{self.metadata.name}.tools")
        return module.register_tools  # type: ignore[no-any-return]

    @hookimpl
    def spot_register_commands(self, registry: CommandRegistry, server: SpotServer) -> None:
        self._register_tools()(registry, server)


CORE_DOMAINS: list[tuple[str, str]] = [
    ("regions", "Regions where cloudspaces can be deployed"),
    ("server_classes", "Machine types available for node pools"),
    ("organizations", "Organizations and their namespaces"),
    ("cloudspaces", "Managed Kubernetes cloudspaces"),
    ("nodepools", "Spot and on-demand node pools"),
    ("kubeconfig", "Kubeconfig generation for kubectl access"),
    ("pricing", "Market pricing, price history and percentiles"),
]


def get_core_plugins() -> list[BasePlugin]:
    """Return plugin instances for all core domains."""
    return [DomainPlugin(name, description) for name, description in CORE_DOMAINS]
