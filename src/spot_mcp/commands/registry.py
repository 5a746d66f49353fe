"""Command catalog for the Spot MCP server.

Each command is a CommandDefinition carrying its name, description,
argument model, capability and async handler. The capability drives the
access policy and is never part of the schema exposed to clients; see
CommandDefinition.to_tool for the public projection.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Any

from mcp import types
from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)

CommandHandler = Callable[[Any], Awaitable[Any]]


class Capability(str, Enum):
    """Whether a command only reads state or changes it."""

    READ = "read"
    MUTATE = "mutate"


class NoArguments(BaseModel):
    """Argument model for commands that take no input."""

    model_config = ConfigDict(extra="ignore")


def build_input_schema(args_model: type[BaseModel]) -> dict[str, Any]:
    """Build the JSON schema advertised for a command's arguments."""
    schema = args_model.model_json_schema(by_alias=True)
    schema.pop("title", None)
    schema.pop("description", None)
    for prop in schema.get("properties", {}).values():
        prop.pop("title", None)
    schema.setdefault("type", "object")
    schema.setdefault("properties", {})
    schema.setdefault("required", [])
    return schema


@dataclass(frozen=True)
class CommandDefinition:
    """A named, schema-described operation an agent can invoke."""

    name: str
    description: str
    args_model: type[BaseModel]
    capability: Capability
    handler: CommandHandler

    @property
    def mutating(self) -> bool:
        """Whether the command changes remote state."""
        return self.capability == Capability.MUTATE

    @property
    def input_schema(self) -> dict[str, Any]:
        """JSON schema for the command arguments."""
        return build_input_schema(self.args_model)

    def to_tool(self) -> types.Tool:
        """Project the definition onto the MCP tool shape (no capability)."""
        return types.Tool(
            name=self.name,
            description=self.description,
            inputSchema=self.input_schema,
        )


class CommandRegistry:
    """Catalog of commands keyed by unique name."""

    def __init__(self) -> None:
        self._commands: dict[str, CommandDefinition] = {}

    def register(self, definition: CommandDefinition) -> None:
        """Add a command to the catalog.

        Raises:
            ValueError: If a command with the same name is already registered.
        """
        if definition.name in self._commands:
            raise ValueError(f"Command '{definition.name}' is already registered")
        self._commands[definition.name] = definition
        logger.debug(f"Registered command: {definition.name} ({definition.capability.value})")

    def command(
        self,
        args: type[BaseModel] = NoArguments,
        capability: Capability = Capability.READ,
        name: str | None = None,
        description: str | None = None,
    ) -> Callable[[CommandHandler], CommandHandler]:
        """Decorator registering an async function as a command.

        The function name becomes the command name and its docstring, folded
        onto one line, the description unless given explicitly. The handler
        receives a single
        validated instance of ``args``.
        """

        def decorator(fn: CommandHandler) -> CommandHandler:
            self.register(
                CommandDefinition(
                    name=name or fn.__name__,
                    description=description or " ".join((fn.__doc__ or "").split()),
                    args_model=args,
                    capability=capability,
                    handler=fn,
                )
            )
            return fn

        return decorator

    def get(self, name: str) -> CommandDefinition | None:
        """Look up a command by name."""
        return self._commands.get(name)

    def names(self) -> list[str]:
        """All command names in registration order."""
        return list(self._commands)

    def __contains__(self, name: object) -> bool:
        return name in self._commands

    def __iter__(self) -> Iterator[CommandDefinition]:
        return iter(self._commands.values())

    def __len__(self) -> int:
        return len(self._commands)
