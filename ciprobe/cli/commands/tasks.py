"""List known tasks and their valid states."""

import click

from ..helpers import format_state_rows, get_task_store, print_table


@click.command()
@click.pass_context
def tasks(ctx):
    """List every known task and its valid versions"""
    store = get_task_store(ctx)

    rows = []
    for task in store.get_all_tasks():
        rows.extend(format_state_rows(store, task))

    print_table(["Task", "Version", "Execute"], rows)
