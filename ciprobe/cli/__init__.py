"""Command-line interface for ciprobe."""
