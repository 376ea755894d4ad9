"""Domain layer: records, options, rendering and ports."""
