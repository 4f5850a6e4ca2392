"""CLI commands for kickstart."""
