"""CLI entrypoint, bootstrap and slash commands."""
