"""Composite commands that combine multiple domain operations.

Composites orchestrate calls across domains so an agent can get a
complete answer in one command instead of several.

The dependency flow is one-way: composites import from domains,
never the reverse.
"""
