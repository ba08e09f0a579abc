"""Command-line interface for colprint."""
