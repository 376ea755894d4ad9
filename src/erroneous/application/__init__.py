"""Application layer: record construction."""
