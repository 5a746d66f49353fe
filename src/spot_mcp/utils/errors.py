"""Exception hierarchy for the Spot MCP server.

Every error raised below the command executor derives from SpotError.
The executor converts them into error results, so none of these ever
reach the MCP client as an unhandled fault.
"""

from __future__ import annotations


class SpotError(Exception):
    """Base exception for all Spot MCP errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class AuthError(SpotError):
    """The token endpoint rejected the refresh token exchange."""

    def __init__(self, status: int, body: str) -> None:
        self.status = status
        self.body = body
        super().__init__(f"Authentication failed: {status} - {body}")


class TransportError(SpotError):
    """A resource call returned a non-2xx response."""

    def __init__(self, status: int, body: str, operation: str | None = None) -> None:
        self.status = status
        self.body = body
        self.operation = operation
        action = operation or "complete request"
        super().__init__(f"Failed to {action}: {status} - {body}")


class PolicyError(SpotError):
    """A mutating command was blocked by read-only mode."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(
            f'Tool "{name}" is not available in read-only mode. '
            "Set RACKSPACE_SPOT_READ_ONLY=false to enable write operations."
        )


class NotFoundError(SpotError):
    """No command is registered under the requested name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown tool: {name}")


class ValidationError(SpotError):
    """Command arguments did not match the declared input schema."""

    def __init__(self, name: str, details: str) -> None:
        self.name = name
        self.details = details
        super().__init__(f'Invalid arguments for tool "{name}": {details}')


class ConfigurationError(SpotError):
    """Startup configuration is missing or invalid."""
