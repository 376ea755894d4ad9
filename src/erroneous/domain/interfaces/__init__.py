"""Domain-facing interfaces."""
