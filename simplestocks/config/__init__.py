"""Exchange configuration: defaults, YAML overrides and validation."""
