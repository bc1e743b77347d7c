"""Adapters for talking to external services."""
