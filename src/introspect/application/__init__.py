"""Application layer: query explanation."""
