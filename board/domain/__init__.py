"""Domain layer: aggregates, value objects, repositories and services."""
