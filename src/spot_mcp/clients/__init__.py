"""HTTP clients for the Rackspace Spot API."""

from spot_mcp.clients.base import AUTH_EXEMPT_ENDPOINTS, SpotClient, is_auth_exempt
from spot_mcp.clients.resources import ResourceDefinition, SpotResources
from spot_mcp.clients.session import Session, SessionManager, TokenResponse

__all__ = [
    "AUTH_EXEMPT_ENDPOINTS",
    "ResourceDefinition",
    "Session",
    "SessionManager",
    "SpotClient",
    "SpotResources",
    "TokenResponse",
    "is_auth_exempt",
]
