"""CLI commands for repoqa."""
