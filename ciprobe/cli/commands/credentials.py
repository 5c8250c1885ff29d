"""Resolve CI provider credentials."""

import sys
from pathlib import Path

import click

from ...core.constants import DEFAULT_DOTENV_FILE
from ...core.credentials import Credentials
from ...services.exceptions import CredentialsError
from ...utils.env_sources import DotenvSource


@click.command()
@click.option('--credentials', 'cli_credentials', metavar='USERNAME:TOKEN',
              help='Credentials to use instead of the environment')
@click.option('--env-file', type=click.Path(dir_okay=False, path_type=Path),
              default=DEFAULT_DOTENV_FILE, show_default=True,
              help='Dotfile consulted when the environment has no credentials')
def credentials(cli_credentials, env_file):
    """Show which credentials would be used, with the token masked"""
    try:
        creds = Credentials.load(cli_credentials, dotfile=DotenvSource(env_file))
    except CredentialsError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo(f"Username: {creds.username}")
    click.echo(f"Token:    {creds.masked_token}")
    click.echo(f"Source:   {creds.source.value}")
