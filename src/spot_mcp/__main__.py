"""Entry point for the Rackspace Spot MCP server."""

import argparse
import logging
import sys
from typing import Any

from spot_mcp import __version__
from spot_mcp.config import LogLevel, SpotConfig, TransportMode
from spot_mcp.utils.errors import ConfigurationError


def setup_logging(level: LogLevel) -> None:
    """Configure logging for the server.

    Logs go to stderr so they never mix with the stdio protocol stream.
    """
    logging.basicConfig(
        level=level.value,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="spot-mcp",
        description="MCP server for Rackspace Spot",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    # Transport options
    parser.add_argument(
        "--transport",
        choices=[mode.value for mode in TransportMode],
        default=None,
        help="Transport mode (default: from config or stdio)",
    )
    parser.add_argument(
        "--host",
        default=None,
        help="Host to bind HTTP server to (default: 127.0.0.1)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to bind HTTP server to (default: 8000)",
    )

    # Endpoints
    parser.add_argument(
        "--api-url",
        default=None,
        help="Base URL of the Spot API (default: https://spot.rackspace.com)",
    )
    parser.add_argument(
        "--auth-url",
        default=None,
        help="Base URL of the token service (default: https://login.spot.rackspace.com)",
    )

    # Safety options
    parser.add_argument(
        "--read-only",
        action="store_true",
        help="Run in read-only mode (hide and block create/delete commands)",
    )

    # Logging
    parser.add_argument(
        "--log-level",
        choices=[level.value for level in LogLevel],
        default=None,
        help="Logging level (default: INFO)",
    )

    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> SpotConfig:
    """Build config from args, falling back to environment/defaults."""
    config_kwargs: dict[str, Any] = {}

    if args.transport:
        config_kwargs["transport"] = TransportMode(args.transport)

    if args.host:
        config_kwargs["host"] = args.host

    if args.port:
        config_kwargs["port"] = args.port

    if args.api_url:
        config_kwargs["api_url"] = args.api_url

    if args.auth_url:
        config_kwargs["auth_url"] = args.auth_url

    if args.read_only:
        config_kwargs["read_only"] = True

    if args.log_level:
        config_kwargs["log_level"] = LogLevel(args.log_level)

    return SpotConfig(**config_kwargs)


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    config = build_config(args)

    setup_logging(config.log_level)

    logger = logging.getLogger(__name__)
    logger.info(f"Starting Rackspace Spot MCP server v{__version__}")

    try:
        config.require_refresh_token()
    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        return 1

    from spot_mcp.server import create_server

    mcp = create_server(config)

    if config.transport == TransportMode.STDIO:
        logger.info(f"Rackspace Spot MCP server running on stdio ({config.mode_label} mode)")
    else:
        logger.info(
            f"Rackspace Spot MCP server running with {config.transport.value} transport "
            f"on {config.host}:{config.port} ({config.mode_label} mode)"
        )
    mcp.run(transport=config.transport.value)  # type: ignore[arg-type]

    return 0


if __name__ == "__main__":
    sys.exit(main())
