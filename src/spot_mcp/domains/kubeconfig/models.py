"""Pydantic models for kubeconfig generation."""

from pydantic import Field

from spot_mcp.models.common import CommandArgs


class GetKubeconfigArgs(CommandArgs):
    """Arguments for get_kubeconfig."""

    organization_name: str = Field(
        ...,
        min_length=1,
        alias="organizationName",
        description="Organization name (not namespace)",
    )
    cloudspace_name: str = Field(
        ..., min_length=1, alias="cloudspaceName", description="Cloudspace name"
    )
