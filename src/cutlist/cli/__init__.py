"""Command-line interface for the cutlist optimizer."""
