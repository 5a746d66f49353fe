"""Cloudspace composite operations.

Provides a single-call overview of a cloudspace together with all of its
spot and on-demand node pools.
"""
