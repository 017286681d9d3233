"""Command-line interface for sdls."""
