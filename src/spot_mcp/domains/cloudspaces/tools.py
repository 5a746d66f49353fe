"""Commands for cloudspace operations."""

import logging
from typing import TYPE_CHECKING, Any

from spot_mcp.commands.registry import Capability
from spot_mcp.domains.cloudspaces.client import CloudspaceClient
from spot_mcp.domains.cloudspaces.models import (
    CloudspaceArgs,
    CloudspaceCreate,
    CreateCloudspaceArgs,
)
from spot_mcp.models.common import NamespaceArgs

if TYPE_CHECKING:
    from spot_mcp.commands.registry import CommandRegistry
    from spot_mcp.server import SpotServer

logger = logging.getLogger(__name__)


def register_tools(registry: "CommandRegistry", server: "SpotServer") -> None:
    """Register cloudspace commands."""

    @registry.command(args=NamespaceArgs)
    async def list_cloudspaces(args: NamespaceArgs) -> Any:
        """List all Kubernetes cloudspaces (clusters) in a specific organization namespace."""
        return await CloudspaceClient(server.spot).list_cloudspaces(args.namespace)

    @registry.command(args=CloudspaceArgs)
    async def get_cloudspace(args: CloudspaceArgs) -> Any:
        """Get detailed information about a specific cloudspace including its status,
        region, and configuration."""
        return await CloudspaceClient(server.spot).get_cloudspace(args.namespace, args.name)

    @registry.command(args=CreateCloudspaceArgs, capability=Capability.MUTATE)
    async def create_cloudspace(args: CreateCloudspaceArgs) -> Any:
        """Create a new Kubernetes cloudspace (cluster) in a specific region.
        The cloudspace will be fully managed by Rackspace Spot."""
        request = CloudspaceCreate(
            name=args.name,
            namespace=args.namespace,
            region=args.region,
            ha_control_plane=args.ha_control_plane,
        )
        logger.info(f"Creating cloudspace {args.namespace}/{args.name} in {args.region}")
        return await CloudspaceClient(server.spot).create_cloudspace(request)

    @registry.command(args=CloudspaceArgs, capability=Capability.MUTATE)
    async def delete_cloudspace(args: CloudspaceArgs) -> Any:
        """Delete a cloudspace and all its associated resources. This action is irreversible."""
        logger.info(f"Deleting cloudspace {args.namespace}/{args.name}")
        return await CloudspaceClient(server.spot).delete_cloudspace(args.namespace, args.name)
