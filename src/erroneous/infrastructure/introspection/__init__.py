"""Interpreter introspection."""
