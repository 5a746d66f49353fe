"""Configuration for the Spot MCP server.

Settings are loaded from environment variables with the RACKSPACE_SPOT_
prefix or from a .env file, and can be overridden from the command line.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from spot_mcp.utils.errors import ConfigurationError

DEFAULT_AUTH_URL = "https://login.spot.rackspace.com"
DEFAULT_API_URL = "https://spot.rackspace.com"
DEFAULT_CLIENT_ID = "mwG3lUMV8KyeMqHe4fJ5Bb3nM1vBvRNa"

REFRESH_TOKEN_HELP_URL = "https://spot.rackspace.com/ui/api-access/terraform"


class TransportMode(str, Enum):
    """MCP transport the server listens on."""

    STDIO = "stdio"
    SSE = "sse"
    STREAMABLE_HTTP = "streamable-http"


class LogLevel(str, Enum):
    """Logging level."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class SpotConfig(BaseSettings):
    """Configuration for the Rackspace Spot MCP server."""

    model_config = SettingsConfigDict(
        env_prefix="RACKSPACE_SPOT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Credentials
    refresh_token: SecretStr | None = Field(
        default=None,
        description="Long-lived refresh token exchanged for short-lived access tokens",
    )
    client_id: str = Field(
        default=DEFAULT_CLIENT_ID,
        description="OAuth client identifier used for the token exchange",
    )

    # Endpoints
    auth_url: str = Field(
        default=DEFAULT_AUTH_URL,
        description="Base URL of the token issuance service",
    )
    api_url: str = Field(
        default=DEFAULT_API_URL,
        description="Base URL of the Spot resource API",
    )

    # Safety
    read_only: bool = Field(
        default=False,
        description="Hide and block commands that create or delete resources",
    )

    # Session
    token_refresh_margin: float = Field(
        default=60.0,
        ge=0,
        description="Seconds before expiry at which a cached token is treated as stale",
    )
    request_timeout: float | None = Field(
        default=60.0,
        description="Timeout in seconds for upstream requests (0 or less disables it)",
    )

    # Server
    transport: TransportMode = Field(
        default=TransportMode.STDIO,
        description="MCP transport mode",
    )
    host: str = Field(default="127.0.0.1", description="Host for HTTP transports")
    port: int = Field(default=8000, ge=1, le=65535, description="Port for HTTP transports")
    log_level: LogLevel = Field(default=LogLevel.INFO, description="Logging level")

    @field_validator("read_only", mode="before")
    @classmethod
    def _parse_read_only(cls, value: Any) -> bool:
        # Only the exact strings "true" and "1" enable read-only mode.
        if isinstance(value, bool):
            return value
        if value is None:
            return False
        return str(value) in ("true", "1")

    @field_validator("request_timeout", mode="before")
    @classmethod
    def _parse_timeout(cls, value: Any) -> float | None:
        if value is None or value == "":
            return None
        timeout = float(value)
        return timeout if timeout > 0 else None

    @field_validator("auth_url", "api_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @property
    def mode_label(self) -> str:
        """Human-readable name of the active safety mode."""
        return "read-only" if self.read_only else "read-write"

    def require_refresh_token(self) -> str:
        """Return the refresh token, failing if it is not configured.

        Raises:
            ConfigurationError: If no refresh token is set.
        """
        token = self.refresh_token.get_secret_value() if self.refresh_token else ""
        if not token.strip():
            raise ConfigurationError(
                "RACKSPACE_SPOT_REFRESH_TOKEN environment variable is required. "
                f"Get your refresh token from {REFRESH_TOKEN_HELP_URL}"
            )
        return token.strip()
