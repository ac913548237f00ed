"""Core utilities: exceptions and version lookup."""
