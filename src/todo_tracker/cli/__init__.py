"""Command-line entrypoint, bootstrap and command handlers."""
