"""Application layer: use cases orchestrating the user domain."""
