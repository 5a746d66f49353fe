"""Command registry, access policy and executor."""

from spot_mcp.commands.executor import CommandExecutor, CommandResult
from spot_mcp.commands.policy import AccessPolicy, CommandGate, PolicyMode
from spot_mcp.commands.registry import (
    Capability,
    CommandDefinition,
    CommandRegistry,
    NoArguments,
    build_input_schema,
)

__all__ = [
    "AccessPolicy",
    "Capability",
    "CommandDefinition",
    "CommandExecutor",
    "CommandGate",
    "CommandRegistry",
    "CommandResult",
    "NoArguments",
    "PolicyMode",
    "build_input_schema",
]
