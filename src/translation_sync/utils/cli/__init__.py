"""Command-line argument handling."""
