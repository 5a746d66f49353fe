"""Command execution with uniform result envelopes."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import pydantic

from spot_mcp.utils.errors import SpotError, ValidationError

if TYPE_CHECKING:
    from spot_mcp.commands.policy import CommandGate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommandResult:
    """Outcome of a command invocation.

    ``text`` holds the JSON payload for successful results and a
    human-readable message for errors.
    """

    text: str
    is_error: bool = False

    @classmethod
    def ok(cls, payload: Any) -> CommandResult:
        """Wrap a handler return value."""
        return cls(text=json.dumps(payload, indent=2, default=str))

    @classmethod
    def error(cls, message: str) -> CommandResult:
        """Wrap an error message."""
        return cls(text=f"Error: {message}", is_error=True)


def _format_validation_error(exc: pydantic.ValidationError) -> str:
    problems = []
    for err in exc.errors():
        location = ".".join(str(part) for part in err["loc"]) or "arguments"
        problems.append(f"{location}: {err['msg']}")
    return "; ".join(problems)


class CommandExecutor:
    """Resolves, validates and runs commands without ever raising."""

    def __init__(self, gate: CommandGate) -> None:
        self._gate = gate

    @property
    def gate(self) -> CommandGate:
        """The policy gate used to resolve commands."""
        return self._gate

    async def invoke(self, name: str, arguments: dict[str, Any] | None = None) -> CommandResult:
        """Invoke a command by name.

        Args:
            name: Command name.
            arguments: Raw argument object from the client.

        Returns:
            CommandResult with the JSON payload, or an error result for an
            unknown or blocked command, invalid arguments, or any failure
            raised by the handler.
        """
        try:
            definition = self._gate.authorize(name)
        except SpotError as e:
            logger.info(f"Refused tool call {name}: {e}")
            return CommandResult.error(str(e))

        try:
            args = definition.args_model.model_validate(arguments or {})
        except pydantic.ValidationError as e:
            error = ValidationError(name, _format_validation_error(e))
            logger.info(str(error))
            return CommandResult.error(str(error))

        try:
            payload = await definition.handler(args)
            return CommandResult.ok(payload)
        except Exception as e:
            logger.warning(f"Tool {name} failed: {e}")
            return CommandResult.error(str(e) or type(e).__name__)
