"""Command-line management utilities."""
