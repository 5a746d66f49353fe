"""Pydantic models for cloudspaces."""

from typing import Any

from pydantic import BaseModel, Field

from spot_mcp.clients.resources import SpotResources
from spot_mcp.models.common import NamespaceArgs, ResourceMetadata


class CloudspaceArgs(NamespaceArgs):
    """Arguments addressing a single cloudspace."""

    name: str = Field(..., min_length=1, description="Cloudspace name")


class CreateCloudspaceArgs(NamespaceArgs):
    """Arguments for create_cloudspace."""

    name: str = Field(..., min_length=1, description="Name for the new cloudspace")
    region: str = Field(
        ..., min_length=1, description="Region to deploy the cloudspace (e.g., us-central-dfw-1)"
    )
    ha_control_plane: bool = Field(
        False,
        alias="haControlPlane",
        description="Enable high-availability control plane (default: false, costs extra)",
    )


class CloudspaceCreate(BaseModel):
    """Request model for creating a cloudspace."""

    name: str = Field(..., description="Cloudspace name")
    namespace: str = Field(..., description="Organization namespace")
    region: str = Field(..., description="Deployment region")
    ha_control_plane: bool = Field(False, description="High-availability control plane")

    def to_manifest(self) -> dict[str, Any]:
        """Render the CloudSpace request body."""
        resource = SpotResources.CLOUDSPACE
        return {
            "apiVersion": resource.api_version,
            "kind": resource.kind,
            "metadata": ResourceMetadata(name=self.name, namespace=self.namespace).to_manifest(),
            "spec": {
                "region": self.region,
                "haControlPlane": self.ha_control_plane,
            },
        }
