"""
Task commands for the todo CLI.

Each command opens the TaskStore once for the invocation; click closes it
when the command context is torn down, whether the command succeeded or not.
"""
from typing import Optional

import click

from todo.constants import MAX_TASK_ID, get_list_order
from todo.exceptions import TodoError
from todo.models.task import ListOrder
from todo.presenter import build_line
from todo.store import TaskStore

TASK_ID = click.IntRange(1, MAX_TASK_ID)

HELP_TEXT = """
    - add [TASK]
        add new task/s
    - list [--by-status]
        list all tasks, by id or with pending tasks first
    - toggle [TASK_ID]
        toggle the status of a task (Done/Pending)
    - remove [TASK_ID]
        remove a task
    - reset
        remove all tasks
"""


def _open_store(ctx: click.Context) -> TaskStore:
    """Open the store for this invocation and tie its lifetime to ctx."""
    db_path = ctx.find_root().obj["db_path"]
    try:
        store = TaskStore.open(db_path)
    except TodoError as e:
        raise click.ClickException(str(e))
    return ctx.with_resource(store)


@click.command()
@click.argument("words", nargs=-1)
@click.pass_context
def add(ctx, words):
    """Add a new task. All remaining words form the task name."""
    name = " ".join(words)
    if not name.strip():
        raise click.UsageError("Task name is required.", ctx=ctx)

    store = _open_store(ctx)
    try:
        task_id = store.add(name)
    except TodoError as e:
        raise click.ClickException(str(e))
    click.echo(f"Added task with ID: {task_id}")


@click.command(name="list")
@click.option("--by-status/--by-id", "by_status", default=None,
              help="Show pending tasks first (default order comes from config).")
@click.pass_context
def list_tasks(ctx, by_status: Optional[bool]):
    """List all tasks."""
    try:
        if by_status is None:
            order = ListOrder(get_list_order())
        else:
            order = ListOrder.BY_STATUS if by_status else ListOrder.BY_INSERTION
        tasks = _open_store(ctx).list(order)
    except TodoError as e:
        raise click.ClickException(str(e))

    click.echo(f"TODO List (sorted by {order.value}):")
    if not tasks:
        click.echo("No tasks found.")
        return
    for task in tasks:
        click.echo(build_line(task).styled())


@click.command()
@click.argument("task_id", type=TASK_ID)
@click.pass_context
def toggle(ctx, task_id):
    """Toggle the status of a task (Done/Pending)."""
    store = _open_store(ctx)
    try:
        store.toggle(task_id)
    except TodoError as e:
        raise click.ClickException(str(e))
    click.echo(f"Toggled task with ID: {task_id}")


@click.command()
@click.argument("task_id", type=TASK_ID)
@click.pass_context
def remove(ctx, task_id):
    """Remove a task."""
    store = _open_store(ctx)
    try:
        store.remove(task_id)
    except TodoError as e:
        raise click.ClickException(str(e))
    click.echo(f"Removed task with ID: {task_id}")


@click.command()
@click.option("-y", "--yes", is_flag=True, help="Skip the confirmation prompt.")
@click.pass_context
def reset(ctx, yes):
    """Remove all tasks."""
    # Aborts with exit code 1 on EOF / Ctrl-C, before anything is deleted.
    if not yes and not click.confirm(click.style("Do you really want to reset?", fg="red", bold=True)):
        click.echo("Alright, nothing was removed.")
        return

    store = _open_store(ctx)
    try:
        store.reset()
    except TodoError as e:
        raise click.ClickException(str(e))
    click.echo("Database reset, all tasks were removed.")


@click.command(name="help")
def help_command():
    """Show the available commands."""
    click.echo(click.style("\nAvailable commands:", fg="cyan", bold=True))
    click.echo(click.style(HELP_TEXT, fg="green"))
