"""Application layer: use case helpers around directory operations."""
