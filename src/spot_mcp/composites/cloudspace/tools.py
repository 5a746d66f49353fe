"""Composite commands for cloudspace overviews."""

import asyncio
from typing import TYPE_CHECKING, Any

from spot_mcp.domains.cloudspaces.client import CloudspaceClient
from spot_mcp.domains.cloudspaces.models import CloudspaceArgs
from spot_mcp.domains.nodepools.client import NodePoolClient

if TYPE_CHECKING:
    from spot_mcp.commands.registry import CommandRegistry
    from spot_mcp.server import SpotServer


def summarize_node_pool(item: dict[str, Any]) -> dict[str, Any]:
    """Reduce a node pool resource to the fields an agent usually needs."""
    metadata = item.get("metadata") or {}
    spec = item.get("spec") or {}
    summary: dict[str, Any] = {
        "name": metadata.get("name"),
        "serverClass": spec.get("serverClass"),
        "desired": spec.get("desired"),
        "autoscaling": spec.get("autoscaling"),
    }
    if "bidPrice" in spec:
        summary["bidPrice"] = spec["bidPrice"]
    if item.get("status") is not None:
        summary["status"] = item["status"]
    return summary


def _pool_items(resource_list: Any) -> list[dict[str, Any]]:
    if not isinstance(resource_list, dict):
        return []
    return [item for item in resource_list.get("items") or [] if isinstance(item, dict)]


def register_tools(registry: "CommandRegistry", server: "SpotServer") -> None:
    """Register cloudspace composite commands."""

    @registry.command(args=CloudspaceArgs)
    async def get_cloudspace_overview(args: CloudspaceArgs) -> dict[str, Any]:
        """Get a cloudspace together with summaries of all its spot and on-demand node
        pools in a single call. Use this instead of calling get_cloudspace,
        list_spot_node_pools and list_ondemand_node_pools separately."""
        cloudspace, spot_pools, ondemand_pools = await asyncio.gather(
            CloudspaceClient(server.spot).get_cloudspace(args.namespace, args.name),
            NodePoolClient.spot_pools(server.spot).list_node_pools(args.namespace, args.name),
            NodePoolClient.ondemand_pools(server.spot).list_node_pools(
                args.namespace, args.name
            ),
        )

        spot_items = [summarize_node_pool(i) for i in _pool_items(spot_pools)]
        ondemand_items = [summarize_node_pool(i) for i in _pool_items(ondemand_pools)]

        return {
            "namespace": args.namespace,
            "name": args.name,
            "cloudspace": cloudspace,
            "spotNodePools": {
                "count": len(spot_items),
                "items": spot_items,
            },
            "onDemandNodePools": {
                "count": len(ondemand_items),
                "items": ondemand_items,
            },
        }
