"""MCP server for Rackspace Spot managed Kubernetes."""

__version__ = "0.1.0"
