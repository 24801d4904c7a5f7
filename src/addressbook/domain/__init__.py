"""Domain layer: models, ports and errors."""
