"""Pydantic models for spot and on-demand node pools."""

from typing import Any

from pydantic import BaseModel, Field, model_validator

from spot_mcp.clients.resources import CLOUDSPACE_LABEL, ResourceDefinition
from spot_mcp.models.common import AutoscalingArgs, NamespaceArgs, ResourceMetadata


class ListNodePoolsArgs(NamespaceArgs):
    """Arguments for listing the node pools of a cloudspace."""

    cloudspace_name: str = Field(
        ..., min_length=1, alias="cloudspaceName", description="Cloudspace name"
    )


class NodePoolArgs(NamespaceArgs):
    """Arguments addressing a single node pool."""

    name: str = Field(..., min_length=1, description="Node pool name")


class CreateOnDemandNodePoolArgs(NamespaceArgs, AutoscalingArgs):
    """Arguments for create_ondemand_node_pool."""

    name: str = Field(..., min_length=1, description="Name for the new node pool")
    cloudspace_name: str = Field(
        ...,
        min_length=1,
        alias="cloudspaceName",
        description="Cloudspace to add the node pool to",
    )
    server_class_name: str = Field(
        ...,
        min_length=1,
        alias="serverClassName",
        description="Server class for nodes (e.g., gp.vs1.small-dfw)",
    )

    @model_validator(mode="after")
    def _check_node_bounds(self) -> "CreateOnDemandNodePoolArgs":
        if self.min_nodes > self.max_nodes:
            raise ValueError("minNodes must not exceed maxNodes")
        return self


class CreateSpotNodePoolArgs(CreateOnDemandNodePoolArgs):
    """Arguments for create_spot_node_pool."""

    bid_price: str = Field(
        ...,
        min_length=1,
        alias="bidPrice",
        description="Maximum bid price per hour (e.g., '0.05' for $0.05/hr)",
    )


class NodePoolCreate(BaseModel):
    """Request model for creating a spot or on-demand node pool."""

    name: str = Field(..., description="Node pool name")
    namespace: str = Field(..., description="Organization namespace")
    cloudspace: str = Field(..., description="Owning cloudspace")
    server_class: str = Field(..., description="Server class for the nodes")
    bid_price: str | None = Field(None, description="Hourly bid price (spot pools only)")
    min_nodes: int = Field(0, description="Autoscaling minimum")
    max_nodes: int = Field(10, description="Autoscaling maximum")
    desired_nodes: int = Field(1, description="Desired node count")

    @classmethod
    def from_args(cls, args: CreateOnDemandNodePoolArgs) -> "NodePoolCreate":
        """Build a request from validated command arguments."""
        return cls(
            name=args.name,
            namespace=args.namespace,
            cloudspace=args.cloudspace_name,
            server_class=args.server_class_name,
            bid_price=getattr(args, "bid_price", None),
            min_nodes=args.min_nodes,
            max_nodes=args.max_nodes,
            desired_nodes=args.desired_nodes,
        )

    def to_manifest(self, resource: ResourceDefinition) -> dict[str, Any]:
        """Render the request body for the given node pool resource."""
        spec: dict[str, Any] = {
            "cloudspace": self.cloudspace,
            "serverClass": self.server_class,
        }
        if self.bid_price is not None:
            spec["bidPrice"] = self.bid_price
        spec["autoscaling"] = {
            "minNodes": self.min_nodes,
            "maxNodes": self.max_nodes,
        }
        spec["desired"] = self.desired_nodes

        metadata = ResourceMetadata(
            name=self.name,
            namespace=self.namespace,
            labels={CLOUDSPACE_LABEL: self.cloudspace},
        )
        return {
            "apiVersion": resource.api_version,
            "kind": resource.kind,
            "metadata": metadata.to_manifest(),
            "spec": spec,
        }
