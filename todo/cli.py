"""
Command-line entry point for the todo CLI.

Resolves global options (database location, verbosity) and dispatches to
the task commands.
"""
import click

from todo.commands.tasks import add, help_command, list_tasks, remove, reset, toggle
from todo.constants import get_log_level, resolve_db_path
from todo.exceptions import ConfigurationError
from todo.logging_setup import setup_logging


class TodoGroup(click.Group):
    """Command group that answers unknown commands with the help text."""

    def resolve_command(self, ctx, args):
        if self.get_command(ctx, args[0]) is None:
            return help_command.name, help_command, []
        return super().resolve_command(ctx, args)


@click.group(cls=TodoGroup, invoke_without_command=True,
             context_settings={"help_option_names": ["-h", "--help"]})
@click.option("--db", "db_path", metavar="PATH",
              help="Path to the SQLite database (default: ./todo_db/todo.sqlite or TODO_DB env var).")
@click.option("-v", "--verbose", is_flag=True, help="Show debug logging on stderr.")
@click.pass_context
def cli(ctx, db_path, verbose):
    """A small command-line task tracker."""
    try:
        setup_logging("DEBUG" if verbose else get_log_level())
        ctx.obj = {"db_path": resolve_db_path(db_path)}
    except ConfigurationError as e:
        raise click.ClickException(str(e))

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        ctx.exit(1)


cli.add_command(add)
cli.add_command(list_tasks)
cli.add_command(toggle)
cli.add_command(remove)
cli.add_command(reset)
cli.add_command(help_command)


if __name__ == '__main__':
    cli()
