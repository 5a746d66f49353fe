"""Access policy gating which commands are advertised and executable.

The policy is resolved once from configuration at startup and never
changes. In restricted (read-only) mode, mutating commands are hidden
from the tool list and refused if called by name anyway.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from mcp import types

from spot_mcp.utils.errors import NotFoundError, PolicyError

if TYPE_CHECKING:
    from spot_mcp.commands.registry import CommandDefinition, CommandRegistry
    from spot_mcp.config import SpotConfig


class PolicyMode(str, Enum):
    """Process-wide safety mode."""

    PERMISSIVE = "permissive"
    RESTRICTED = "restricted"


@dataclass(frozen=True)
class AccessPolicy:
    """Immutable access policy."""

    mode: PolicyMode = PolicyMode.PERMISSIVE

    @classmethod
    def from_config(cls, config: SpotConfig) -> AccessPolicy:
        """Resolve the policy from server configuration."""
        return cls(PolicyMode.RESTRICTED if config.read_only else PolicyMode.PERMISSIVE)

    @property
    def read_only(self) -> bool:
        """Whether mutating commands are disabled."""
        return self.mode == PolicyMode.RESTRICTED

    def permits(self, definition: CommandDefinition) -> bool:
        """Check whether a command may be advertised and executed."""
        return not (self.read_only and definition.mutating)


class CommandGate:
    """Applies an AccessPolicy to a CommandRegistry."""

    def __init__(self, registry: CommandRegistry, policy: AccessPolicy) -> None:
        self._registry = registry
        self._policy = policy

    @property
    def policy(self) -> AccessPolicy:
        """The active access policy."""
        return self._policy

    @property
    def registry(self) -> CommandRegistry:
        """The underlying command catalog."""
        return self._registry

    def allowed_commands(self) -> list[CommandDefinition]:
        """Command definitions permitted by the policy."""
        return [cmd for cmd in self._registry if self._policy.permits(cmd)]

    def list_commands(self) -> list[types.Tool]:
        """Public tool descriptions for every permitted command."""
        return [cmd.to_tool() for cmd in self.allowed_commands()]

    def authorize(self, name: str) -> CommandDefinition:
        """Resolve a command name, enforcing the policy.

        Raises:
            NotFoundError: If no command has this name.
            PolicyError: If the command is not permitted in the active mode.
        """
        definition = self._registry.get(name)
        if definition is None:
            raise NotFoundError(name)
        if not self._policy.permits(definition):
            raise PolicyError(name)
        return definition
