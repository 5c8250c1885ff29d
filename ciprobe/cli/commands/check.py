"""Check a task version against the configuration."""

import sys

import click
from rich.console import Console

from ..helpers import get_task_store


@click.command()
@click.argument('task_name')
@click.argument('version')
@click.option('--normalized', is_flag=True,
              help='Compare versions semantically instead of verbatim')
@click.pass_context
def check(ctx, task_name, version, normalized):
    """Check whether VERSION is a known-good version of TASK_NAME.

    Exits with status 1 when the version is not listed. Without
    --normalized the version must appear verbatim in the configuration and
    TASK_NAME is matched exactly, except for gitversion.
    """
    console = Console()
    store = get_task_store(ctx)

    if normalized:
        valid = store.matches_version(task_name, version)
    else:
        valid = store.is_valid_version(task_name, version)

    if valid:
        console.print(f"[green]✓ {task_name} {version} is a known-good version[/green]")
    else:
        console.print(f"[red]✗ {task_name} {version} is not a known-good version[/red]")
        sys.exit(1)
