"""Commands for kubeconfig generation."""

from typing import TYPE_CHECKING, Any

from spot_mcp.domains.kubeconfig.client import KubeconfigClient
from spot_mcp.domains.kubeconfig.models import GetKubeconfigArgs

if TYPE_CHECKING:
    from spot_mcp.commands.registry import CommandRegistry
    from spot_mcp.server import SpotServer


def register_tools(registry: "CommandRegistry", server: "SpotServer") -> None:
    """Register kubeconfig commands."""

    @registry.command(args=GetKubeconfigArgs)
    async def get_kubeconfig(args: GetKubeconfigArgs) -> Any:
        """Generate a kubeconfig file for accessing a cloudspace's Kubernetes cluster
        with kubectl."""
        return await KubeconfigClient(server.spot).generate_kubeconfig(
            args.organization_name, args.cloudspace_name
        )
