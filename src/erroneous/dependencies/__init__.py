"""Dependency wiring for the public API."""
