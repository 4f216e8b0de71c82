"""Main CLI entry point for fastjump."""

import sys
import click
from .commands import (
    delete_project,
    edit_project,
    load_project,
    open_project,
    reset_projects,
    save_project,
    view_project,
)
from .utils import CommandContext, format_error
from ..config import get_default_shell_channel, load_settings
from ..prompter import ConsolePrompter
from ..shell.handoff import wrapper_snippet
from ..store.json_store import ProjectStore
from ..utils.errors import ConfigError, FastJumpError, NoProjectsError
from ..utils.logging import get_logger, setup_logging
from .. import __version__

logger = get_logger("cli.main")

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}

EPILOG_TEMPLATE = """\b
Changing directory and launching $EDITOR happen in the calling shell.
Add this function to your shell profile and run "f" instead of fastjump:
  {snippet}"""

SAVE_TIP = "Save the current directory with: fastjump -s NAME"


def _configured_channel():
    """Shell channel from settings, or the default when settings are invalid."""
    try:
        return load_settings().shell_channel
    except ConfigError as e:
        logger.warning(f"Showing default shell channel in help: {e}")
        return get_default_shell_channel()


class FastJumpCommand(click.Command):
    """Command whose epilog shows the wrapper for the configured channel."""

    def format_epilog(self, ctx, formatter):
        epilog = EPILOG_TEMPLATE.format(snippet=wrapper_snippet(_configured_channel()))
        formatter.write_paragraph()
        with formatter.indentation():
            formatter.write_text(epilog)


@click.command(cls=FastJumpCommand, context_settings=CONTEXT_SETTINGS)
@click.argument("query", nargs=-1, metavar="[PROJECT]")
@click.option("-s", "--save", "save", is_flag=True, help="Save current directory as project")
@click.option("-d", "--delete", "delete", is_flag=True, help="Delete project with name")
@click.option("-v", "--view", "view", is_flag=True, help="View project in system file explorer")
@click.option("-o", "--open", "open_", is_flag=True, help="Open project environment or IDE")
@click.option("-e", "--edit", "edit", is_flag=True, help="Open project in $EDITOR")
@click.option("--reset", "reset", is_flag=True, help="Reset list of projects")
@click.version_option(version=__version__, prog_name="fastjump", message="%(prog)s version %(version)s")
def cli(query, save, delete, view, open_, edit, reset):
    """
    Quickly open and interact with project directories.

    PROJECT is a project name, allowing partial match. Without a flag the
    project is loaded (the shell changes into its directory).
    """
    flags = [name for name, enabled in (
        ("save", save),
        ("delete", delete),
        ("view", view),
        ("open", open_),
        ("edit", edit),
        ("reset", reset),
    ) if enabled]
    if len(flags) > 1 or len(query) > 1:
        raise click.UsageError("Too many arguments provided")

    command = flags[0] if flags else "load"
    project = query[0] if query else ""

    try:
        settings = load_settings()
        setup_logging(settings.log_level)
        store = ProjectStore(settings.store_path)
        ctx = CommandContext(
            projects=store.load(),
            store=store,
            settings=settings,
            prompter=ConsolePrompter(),
        )
        logger.debug(f"Running '{command}' with query '{project}'")
        _dispatch(command, project, ctx)
    except NoProjectsError as e:
        tip = None if command == "reset" else SAVE_TIP
        click.echo(format_error(str(e), tip), err=True)
        sys.exit(1)
    except FastJumpError as e:
        click.echo(format_error(str(e)), err=True)
        sys.exit(1)
    except Exception as e:
        logger.error(f"Unexpected error: {e}", exc_info=True)
        click.echo(format_error(f"Unexpected error: {e}"), err=True)
        sys.exit(1)


def _dispatch(command: str, project: str, ctx: CommandContext) -> None:
    """Run the command selected by the flag."""
    if command == "load":
        load_project(project, ctx)
    elif command == "save":
        save_project(project, ctx)
    elif command == "delete":
        delete_project(project, ctx)
    elif command == "view":
        view_project(project, ctx)
    elif command == "open":
        open_project(project, ctx)
    elif command == "edit":
        edit_project(project, ctx)
    else:
        reset_projects(ctx)
