"""History viewer settings."""
