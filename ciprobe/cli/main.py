"""Main CLI entry point for ciprobe."""

from pathlib import Path

import click

from ..core.constants import CONFIG_PATH_ENV_VAR
from .commands.check import check
from .commands.compare import compare
from .commands.credentials import credentials
from .commands.tasks import tasks
from .helpers import configure_logging


@click.group()
@click.option('--config', 'config_path', envvar=CONFIG_PATH_ENV_VAR,
              type=click.Path(dir_okay=False, path_type=Path),
              help='Path to the task state configuration file')
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging')
@click.pass_context
def cli(ctx, config_path, verbose):
    """ciprobe - Check CI task versions against known-good states"""
    configure_logging(verbose)
    ctx.ensure_object(dict)
    ctx.obj['config_path'] = config_path


# Register commands
cli.add_command(tasks)
cli.add_command(check)
cli.add_command(compare)
cli.add_command(credentials)


if __name__ == '__main__':
    cli()
