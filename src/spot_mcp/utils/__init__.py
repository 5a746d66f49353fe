"""Utility functions and helpers for the Spot MCP server."""

from spot_mcp.utils.errors import (
    AuthError,
    ConfigurationError,
    NotFoundError,
    PolicyError,
    SpotError,
    TransportError,
    ValidationError,
)

__all__ = [
    # Errors
    "SpotError",
    "AuthError",
    "TransportError",
    "PolicyError",
    "NotFoundError",
    "ValidationError",
    "ConfigurationError",
]
