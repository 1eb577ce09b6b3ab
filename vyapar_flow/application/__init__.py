"""Application layer: ports, state store and use cases."""
