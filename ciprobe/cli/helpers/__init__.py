"""CLI Helper Functions for ciprobe.

This module provides reusable helper functions for CLI commands so that every
command loads configuration, reports errors and prints tables the same way.
"""

import logging
import sys
from pathlib import Path
from typing import Any, List, Optional

import click
from tabulate import tabulate

from ciprobe.core.task_state_store import TaskStateStore
from ciprobe.models.task import GitVersionValidState, SupportedTask
from ciprobe.services.exceptions import ConfigError
from ciprobe.utils.config_manager import ConfigManager


def configure_logging(verbose: bool = False) -> None:
    """Configure root logging for a CLI invocation."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )


def get_config_path(ctx: click.Context) -> Optional[Path]:
    """Get the configuration path chosen on the command line, if any."""
    obj = ctx.find_object(dict) or {}
    return obj.get('config_path')


def get_task_store(ctx: click.Context) -> TaskStateStore:
    """Load the task state store, exit with error if it cannot be loaded.

    Returns:
        TaskStateStore instance
    """
    try:
        return ConfigManager(get_config_path(ctx)).load_store()
    except ConfigError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


def format_state_rows(store: TaskStateStore, task: SupportedTask) -> List[List[str]]:
    """Build table rows describing the valid states of one task."""
    rows = []
    for state in store.get_valid_states(task):
        if isinstance(state, GitVersionValidState):
            rows.append([task.display_name, f"setup {state.setup_version}",
                         f"execute {state.execute_version}"])
        else:
            rows.append([task.display_name, state.version, ""])
    if not rows:
        rows.append([task.display_name, "-", ""])
    return rows


def print_table(headers: list[str], rows: list[list[Any]],
                tablefmt: str = "simple") -> None:
    """Print a table with project-wide defaults.

    Args:
        headers: Table headers
        rows: Table rows
        tablefmt: Table format (default: "simple")
    """
    table_str = tabulate(rows, headers=headers, tablefmt=tablefmt, disable_numparse=True)
    click.echo(table_str)
