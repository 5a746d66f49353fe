"""Domain modules for Rackspace Spot resources.

Each domain package provides a client for its resources, argument models,
and a ``register_tools`` function that adds its commands to the registry.
"""
