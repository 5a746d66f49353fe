"""Server classes domain - machine types available for node pools."""

from spot_mcp.domains.server_classes.client import ServerClassClient
from spot_mcp.domains.server_classes.models import GetServerClassArgs

__all__ = [
    "GetServerClassArgs",
    "ServerClassClient",
]
