"""Domain layer: aggregates, value objects, repository ports and rules."""
