"""Domain layer: field value box, settings, and error taxonomy."""
