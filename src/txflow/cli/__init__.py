"""Command line interface for txflow."""
