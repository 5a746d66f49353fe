"""Regions domain - locations where cloudspaces can be deployed."""

from spot_mcp.domains.regions.client import RegionClient
from spot_mcp.domains.regions.models import GetRegionArgs

__all__ = [
    "GetRegionArgs",
    "RegionClient",
]
