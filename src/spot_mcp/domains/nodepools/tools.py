"""Commands for spot and on-demand node pool operations."""

import logging
from typing import TYPE_CHECKING, Any

from spot_mcp.commands.registry import Capability
from spot_mcp.domains.nodepools.client import NodePoolClient
from spot_mcp.domains.nodepools.models import (
    CreateOnDemandNodePoolArgs,
    CreateSpotNodePoolArgs,
    ListNodePoolsArgs,
    NodePoolArgs,
    NodePoolCreate,
)

if TYPE_CHECKING:
    from spot_mcp.commands.registry import CommandRegistry
    from spot_mcp.server import SpotServer

logger = logging.getLogger(__name__)


def register_tools(registry: "CommandRegistry", server: "SpotServer") -> None:
    """Register node pool commands."""

    # Spot node pools

    @registry.command(args=ListNodePoolsArgs)
    async def list_spot_node_pools(args: ListNodePoolsArgs) -> Any:
        """List all spot node pools in a cloudspace. Spot nodes use auction-based pricing
        for significant cost savings."""
        client = NodePoolClient.spot_pools(server.spot)
        return await client.list_node_pools(args.namespace, args.cloudspace_name)

    @registry.command(args=NodePoolArgs)
    async def get_spot_node_pool(args: NodePoolArgs) -> Any:
        """Get detailed information about a specific spot node pool including bid price,
        node count, and status."""
        client = NodePoolClient.spot_pools(server.spot)
        return await client.get_node_pool(args.namespace, args.name)

    @registry.command(args=CreateSpotNodePoolArgs, capability=Capability.MUTATE)
    async def create_spot_node_pool(args: CreateSpotNodePoolArgs) -> Any:
        """Create a new spot node pool with auction-based pricing. Set a maximum bid price
        per hour for significant cost savings."""
        logger.info(
            f"Creating spot node pool {args.namespace}/{args.name} "
            f"for cloudspace {args.cloudspace_name} at bid {args.bid_price}"
        )
        client = NodePoolClient.spot_pools(server.spot)
        return await client.create_node_pool(NodePoolCreate.from_args(args))

    @registry.command(args=NodePoolArgs, capability=Capability.MUTATE)
    async def delete_spot_node_pool(args: NodePoolArgs) -> Any:
        """Delete a spot node pool from a cloudspace."""
        logger.info(f"Deleting spot node pool {args.namespace}/{args.name}")
        client = NodePoolClient.spot_pools(server.spot)
        return await client.delete_node_pool(args.namespace, args.name)

    # On-demand node pools

    @registry.command(args=ListNodePoolsArgs)
    async def list_ondemand_node_pools(args: ListNodePoolsArgs) -> Any:
        """List all on-demand node pools in a cloudspace. On-demand nodes have fixed
        pricing and guaranteed availability."""
        client = NodePoolClient.ondemand_pools(server.spot)
        return await client.list_node_pools(args.namespace, args.cloudspace_name)

    @registry.command(args=NodePoolArgs)
    async def get_ondemand_node_pool(args: NodePoolArgs) -> Any:
        """Get detailed information about a specific on-demand node pool."""
        client = NodePoolClient.ondemand_pools(server.spot)
        return await client.get_node_pool(args.namespace, args.name)

    @registry.command(args=CreateOnDemandNodePoolArgs, capability=Capability.MUTATE)
    async def create_ondemand_node_pool(args: CreateOnDemandNodePoolArgs) -> Any:
        """Create a new on-demand node pool with fixed pricing and guaranteed availability."""
        logger.info(
            f"Creating on-demand node pool {args.namespace}/{args.name} "
            f"for cloudspace {args.cloudspace_name}"
        )
        client = NodePoolClient.ondemand_pools(server.spot)
        return await client.create_node_pool(NodePoolCreate.from_args(args))

    @registry.command(args=NodePoolArgs, capability=Capability.MUTATE)
    async def delete_ondemand_node_pool(args: NodePoolArgs) -> Any:
        """Delete an on-demand node pool from a cloudspace."""
        logger.info(f"Deleting on-demand node pool {args.namespace}/{args.name}")
        client = NodePoolClient.ondemand_pools(server.spot)
        return await client.delete_node_pool(args.namespace, args.name)
