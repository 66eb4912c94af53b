"""Infrastructure layer: provider adapters and predicate composition."""
