"""FastMCP server definition for Rackspace Spot with plugin-provided commands."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator, Callable, Sequence
from contextlib import AbstractAsyncContextManager, asynccontextmanager
from typing import Any

import httpx
from mcp import types
from mcp.server.fastmcp import FastMCP
from mcp.server.fastmcp.exceptions import ToolError

from spot_mcp import __version__
from spot_mcp.clients.base import SpotClient
from spot_mcp.clients.session import SessionManager
from spot_mcp.commands.executor import CommandExecutor
from spot_mcp.commands.policy import AccessPolicy, CommandGate
from spot_mcp.commands.registry import CommandRegistry
from spot_mcp.config import SpotConfig
from spot_mcp.plugin_manager import PluginManager

logger = logging.getLogger(__name__)

SERVER_NAME = "rackspace-spot-mcp"

SERVER_INSTRUCTIONS = (
    "MCP server for Rackspace Spot - enables AI agents to manage "
    "cloudspaces (managed Kubernetes clusters), spot and on-demand node pools, "
    "and to look up regions, server classes and market pricing."
)


def create_http_client(config: SpotConfig) -> httpx.AsyncClient:
    """Create the shared HTTP client for the Spot API and token endpoint."""
    return httpx.AsyncClient(
        base_url=config.api_url,
        timeout=httpx.Timeout(config.request_timeout),
        headers={
            "Accept": "application/json",
            "User-Agent": f"{SERVER_NAME}/{__version__}",
        },
    )


class SpotMCP(FastMCP):
    """FastMCP server whose tool surface is served by the command executor.

    Tool listing goes through the access policy gate, and every tool call
    goes through the executor. Error results are raised as ToolError so the
    protocol layer marks them with isError.
    """

    def __init__(self, executor: CommandExecutor, **settings: Any) -> None:
        self._executor = executor
        super().__init__(**settings)

    async def list_tools(self) -> list[types.Tool]:
        """List the commands permitted by the access policy."""
        return self._executor.gate.list_commands()

    async def call_tool(
        self, name: str, arguments: dict[str, Any]
    ) -> Sequence[types.TextContent]:
        """Invoke a command and return its JSON payload as text content."""
        result = await self._executor.invoke(name, arguments)
        if result.is_error:
            raise ToolError(result.text)
        return [types.TextContent(type="text", text=result.text)]


class SpotServer:
    """Rackspace Spot MCP server.

    Owns the configuration, the authenticated API client, and the command
    registry, policy gate and executor. Commands are contributed by core
    domain plugins, composite plugins and external entry-point plugins.
    """

    def __init__(self, config: SpotConfig | None = None) -> None:
        self._config = config or SpotConfig()
        self._spot: SpotClient | None = None
        self._mcp: FastMCP | None = None
        self._plugin_manager: PluginManager | None = None
        self._active_sessions = 0
        self._registry = CommandRegistry()
        self._gate = CommandGate(self._registry, AccessPolicy.from_config(self._config))
        self._executor = CommandExecutor(self._gate)

    @property
    def config(self) -> SpotConfig:
        """Get server configuration."""
        return self._config

    @property
    def spot(self) -> SpotClient:
        """Get the authenticated Spot API client.

        Raises:
            RuntimeError: If the server has not been started.
        """
        if self._spot is None:
            raise RuntimeError("Server not running. Spot API client not available.")
        return self._spot

    @property
    def session(self) -> SessionManager:
        """Get the session manager owning the access token."""
        return self.spot.session

    @property
    def policy(self) -> AccessPolicy:
        """Get the access policy fixed at startup."""
        return self._gate.policy

    @property
    def registry(self) -> CommandRegistry:
        """Get the command registry."""
        return self._registry

    @property
    def gate(self) -> CommandGate:
        """Get the policy gate over the registry."""
        return self._gate

    @property
    def executor(self) -> CommandExecutor:
        """Get the command executor."""
        return self._executor

    @property
    def mcp(self) -> FastMCP:
        """Get the MCP server instance.

        Raises:
            RuntimeError: If server is not initialized.
        """
        if self._mcp is None:
            raise RuntimeError("Server not initialized.")
        return self._mcp

    @property
    def plugin_manager(self) -> PluginManager | None:
        """Get the plugin manager, once commands are loaded."""
        return self._plugin_manager

    def startup(self) -> None:
        """Create the session manager and API client.

        Keeps an already-injected client. Safe to call more than once.

        Raises:
            ConfigurationError: If no refresh token is configured.
        """
        if self._spot is not None:
            return

        refresh_token = self._config.require_refresh_token()
        http = create_http_client(self._config)
        session = SessionManager(
            http,
            refresh_token=refresh_token,
            auth_url=self._config.auth_url,
            client_id=self._config.client_id,
            refresh_margin=self._config.token_refresh_margin,
        )
        self._spot = SpotClient(http, session)
        logger.debug(f"Spot API client created for {self._config.api_url}")

    async def shutdown(self) -> None:
        """Close the API client."""
        if self._spot is not None:
            await self._spot.aclose()
        self._spot = None

    def load_commands(self) -> int:
        """Populate the registry from core, composite and external plugins.

        Returns:
            Number of registered commands.
        """
        if self._plugin_manager is not None:
            return len(self._registry)

        pm = PluginManager()
        pm.load_core_plugins()
        pm.load_entrypoint_plugins()
        pm.register_all_commands(self._registry, self)
        self._plugin_manager = pm

        advertised = len(self._gate.allowed_commands())
        logger.info(
            f"Loaded {len(self._registry)} commands, {advertised} available "
            f"in {self._config.mode_label} mode"
        )
        return len(self._registry)

    def _create_lifespan(self) -> Callable[[Any], AbstractAsyncContextManager[None]]:
        """Create the lifespan context manager for the MCP server."""
        server_self = self

        @asynccontextmanager
        async def lifespan(_app: Any) -> AsyncIterator[None]:
            """Start the API client on startup, close it on shutdown.

            HTTP transports enter the lifespan once per client session, so
            the shared client is closed only when the last one exits.
            """
            logger.info("Starting Rackspace Spot MCP server...")
            server_self.startup()
            server_self._active_sessions += 1
            try:
                yield
            finally:
                server_self._active_sessions -= 1
                if server_self._active_sessions == 0:
                    logger.info("Shutting down Rackspace Spot MCP server...")
                    await server_self.shutdown()

        return lifespan

    def create_mcp(self) -> FastMCP:
        """Create and configure the FastMCP server."""
        self.startup()
        self.load_commands()

        mcp = SpotMCP(
            self._executor,
            name=SERVER_NAME,
            instructions=SERVER_INSTRUCTIONS,
            lifespan=self._create_lifespan(),
            host=self._config.host,
            port=self._config.port,
        )
        self._mcp = mcp

        self._register_core_resources(mcp)
        return mcp

    def status(self) -> dict[str, Any]:
        """Summarize server mode, commands and plugins."""
        allowed = [cmd.name for cmd in self._gate.allowed_commands()]
        plugins = self._plugin_manager.get_all_metadata() if self._plugin_manager else []
        return {
            "version": __version__,
            "mode": self._config.mode_label,
            "api_url": self._config.api_url,
            "authenticated": self._spot is not None and self._spot.session.is_authenticated,
            "commands": {
                "total": len(self._registry),
                "available": len(allowed),
                "names": allowed,
            },
            "plugins": [
                {"name": meta.name, "version": meta.version, "description": meta.description}
                for meta in plugins
            ],
        }

    def _register_core_resources(self, mcp: FastMCP) -> None:
        """Register core MCP resources."""

        @mcp.resource("spot://server/status")
        def server_status() -> dict[str, Any]:
            """Get Rackspace Spot MCP server status.

            Returns the safety mode, available commands, loaded plugins and
            whether a valid access token is currently cached.
            """
            return self.status()

        logger.info("Registered core MCP resources")


def create_server(config: SpotConfig | None = None) -> FastMCP:
    """Create and return the MCP server instance.

    This is the main entry point for creating the server.
    """
    return SpotServer(config).create_mcp()
