"""Domain layer – aggregates, value objects and events."""
