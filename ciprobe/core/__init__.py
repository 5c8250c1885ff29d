"""Core functionality for ciprobe."""
