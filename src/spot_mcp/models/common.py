"""Common Pydantic models shared across Spot commands."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

NAMESPACE_DESCRIPTION = "Organization namespace (e.g., org-xxxxx)"


class CommandArgs(BaseModel):
    """Base class for command argument models.

    Fields use camelCase aliases on the wire; snake_case names are
    accepted as well. Unknown keys are ignored.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class NamespaceArgs(CommandArgs):
    """Arguments addressing an organization namespace."""

    namespace: str = Field(..., min_length=1, description=NAMESPACE_DESCRIPTION)


class AutoscalingArgs(CommandArgs):
    """Node count settings shared by spot and on-demand node pools."""

    min_nodes: int = Field(
        0, ge=0, alias="minNodes", description="Minimum number of nodes (default: 0)"
    )
    max_nodes: int = Field(
        10,
        ge=0,
        alias="maxNodes",
        description="Maximum number of nodes for autoscaling (default: 10)",
    )
    desired_nodes: int = Field(
        1, ge=0, alias="desiredNodes", description="Initial desired number of nodes (default: 1)"
    )


class ResourceMetadata(BaseModel):
    """Metadata block of a Spot resource manifest."""

    name: str = Field(..., description="Resource name")
    namespace: str | None = Field(None, description="Resource namespace")
    labels: dict[str, str] = Field(default_factory=dict, description="Resource labels")

    def to_manifest(self) -> dict[str, Any]:
        """Render as the metadata section of a request body."""
        metadata: dict[str, Any] = {"name": self.name}
        if self.namespace:
            metadata["namespace"] = self.namespace
        if self.labels:
            metadata["labels"] = dict(self.labels)
        return metadata
