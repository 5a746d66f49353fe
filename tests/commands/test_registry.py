"""Tests for the command registry and schema projection."""

from typing import Any

import pytest
from pydantic import Field

from spot_mcp.commands.registry import (
    Capability,
    CommandDefinition,
    CommandRegistry,
    NoArguments,
    build_input_schema,
)
from spot_mcp.models.common import CommandArgs


class ExampleArgs(CommandArgs):
    """Arguments with an aliased field."""

    namespace: str = Field(..., description="Organization namespace")
    cloudspace_name: str = Field(..., alias="cloudspaceName", description="Cloudspace")
    desired_nodes: int = Field(1, alias="desiredNodes", description="Node count")


async def _noop(args: Any) -> Any:
    return None


class TestBuildInputSchema:
    """Tests for build_input_schema."""

    def test_no_arguments(self) -> None:
        assert build_input_schema(NoArguments) == {
            "type": "object",
            "properties": {},
            "required": [],
        }

    def test_uses_wire_names(self) -> None:
        """Properties and required lists use the camelCase aliases."""
        schema = build_input_schema(ExampleArgs)

        assert schema["type"] == "object"
        assert set(schema["properties"]) == {"namespace", "cloudspaceName", "desiredNodes"}
        assert set(schema["required"]) == {"namespace", "cloudspaceName"}
        assert schema["properties"]["cloudspaceName"] == {
            "type": "string",
            "description": "Cloudspace",
        }
        assert "title" not in schema
        assert "description" not in schema


class TestCommandRegistry:
    """Tests for CommandRegistry."""

    def test_decorator_uses_name_and_docstring(self) -> None:
        registry = CommandRegistry()

        @registry.command(args=ExampleArgs, capability=Capability.MUTATE)
        async def scale_pool(args: ExampleArgs) -> Any:
            """Scale a node pool.
            Takes effect asynchronously."""
            return None

        definition = registry.get("scale_pool")
        assert definition is not None
        assert definition.description == "Scale a node pool. Takes effect asynchronously."
        assert definition.args_model is ExampleArgs
        assert definition.mutating is True
        assert definition.handler is scale_pool

    def test_explicit_name_and_description(self) -> None:
        registry = CommandRegistry()
        registry.command(name="renamed", description="Custom")(_noop)

        assert registry.names() == ["renamed"]
        assert registry.get("renamed").description == "Custom"  # type: ignore[union-attr]

    def test_duplicate_name_rejected(self) -> None:
        registry = CommandRegistry()
        registry.command(name="list_regions")(_noop)

        with pytest.raises(ValueError, match="already registered"):
            registry.command(name="list_regions")(_noop)

    def test_defaults_to_read_capability(self) -> None:
        registry = CommandRegistry()
        registry.command(name="list_regions")(_noop)

        definition = registry.get("list_regions")
        assert definition is not None
        assert definition.capability == Capability.READ
        assert definition.mutating is False

    def test_container_protocol(self) -> None:
        registry = CommandRegistry()
        registry.command(name="a")(_noop)
        registry.command(name="b")(_noop)

        assert len(registry) == 2
        assert "a" in registry
        assert "missing" not in registry
        assert [d.name for d in registry] == ["a", "b"]
        assert registry.get("missing") is None


class TestCommandDefinition:
    """Tests for the public tool projection."""

    def test_to_tool_omits_capability(self) -> None:
        """The capability tag never reaches the advertised tool."""
        definition = CommandDefinition(
            name="delete_cloudspace",
            description="Delete a cloudspace",
            args_model=ExampleArgs,
            capability=Capability.MUTATE,
            handler=_noop,
        )

        tool = definition.to_tool()
        dumped = tool.model_dump(exclude_none=True)

        assert tool.name == "delete_cloudspace"
        assert tool.description == "Delete a cloudspace"
        assert tool.inputSchema == build_input_schema(ExampleArgs)
        assert "capability" not in dumped
        assert "mutate" not in str(dumped)
