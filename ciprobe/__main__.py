"""Allow running ciprobe with ``python -m ciprobe``."""

from .cli.main import cli

if __name__ == '__main__':
    cli()
