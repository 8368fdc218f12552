"""Command line interface for dialogue search."""
