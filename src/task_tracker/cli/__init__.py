"""Command-line entry points, bootstrap and slash commands."""
