"""Domain layer: taxonomy, accounting and snapshot bounded contexts."""
