"""Shared Pydantic models."""
