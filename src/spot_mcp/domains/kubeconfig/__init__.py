"""Kubeconfig domain - kubectl access to cloudspaces."""

from spot_mcp.domains.kubeconfig.client import KUBECONFIG_ENDPOINT, KubeconfigClient
from spot_mcp.domains.kubeconfig.models import GetKubeconfigArgs

__all__ = [
    "GetKubeconfigArgs",
    "KUBECONFIG_ENDPOINT",
    "KubeconfigClient",
]
