"""Command-line entry point for promptpad."""
