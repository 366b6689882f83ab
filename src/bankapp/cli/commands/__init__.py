"""CLI commands for bankapp."""
