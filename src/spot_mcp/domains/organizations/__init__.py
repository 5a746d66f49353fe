"""Organizations domain - tenants and their namespaces."""

from spot_mcp.domains.organizations.client import OrganizationClient

__all__ = ["OrganizationClient"]
