"""Cloudspaces domain - managed Kubernetes clusters."""

from spot_mcp.domains.cloudspaces.client import CloudspaceClient
from spot_mcp.domains.cloudspaces.models import (
    CloudspaceArgs,
    CloudspaceCreate,
    CreateCloudspaceArgs,
)

__all__ = [
    "CloudspaceArgs",
    "CloudspaceClient",
    "CloudspaceCreate",
    "CreateCloudspaceArgs",
]
