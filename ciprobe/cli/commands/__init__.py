"""CLI commands for ciprobe."""
