"""Shared state and ports."""
