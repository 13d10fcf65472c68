"""Application layer – event sourcing infrastructure and customer use cases."""
