"""Node pools domain - spot (auction priced) and on-demand worker pools."""

from spot_mcp.domains.nodepools.client import NodePoolClient
from spot_mcp.domains.nodepools.models import (
    CreateOnDemandNodePoolArgs,
    CreateSpotNodePoolArgs,
    ListNodePoolsArgs,
    NodePoolArgs,
    NodePoolCreate,
)

__all__ = [
    "CreateOnDemandNodePoolArgs",
    "CreateSpotNodePoolArgs",
    "ListNodePoolsArgs",
    "NodePoolArgs",
    "NodePoolClient",
    "NodePoolCreate",
]
