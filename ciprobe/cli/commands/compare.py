"""Compare two version strings."""

import sys

import click

from ...core.version_compare import version_eq


@click.command()
@click.argument('first')
@click.argument('second')
def compare(first, second):
    """Check whether two versions are equal after normalization"""
    if version_eq(first, second):
        click.echo(f"{first} == {second}")
    else:
        click.echo(f"{first} != {second}")
        sys.exit(1)
