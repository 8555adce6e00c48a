"""Configuration: limits, discovery, settings and logging."""
