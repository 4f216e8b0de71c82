"""Load command - change the shell's directory to a project."""

import os
from ..utils import CommandContext
from ...core.resolver import resolve
from ...shell.handoff import send_to_shell
from ...utils.errors import CommandError

PROMPT = "Which project should be loaded?"


def load_project(query: str, ctx: CommandContext) -> None:
    """Resolve query and ask the wrapping shell to cd into it."""
    selection = resolve(query, ctx.projects, PROMPT, ctx.prompter)

    if os.path.realpath(selection.path) == os.path.realpath(ctx.cwd):
        raise CommandError("Already in project directory")

    ctx.prompter.print_line(f'Switching to "{selection.name}"')
    send_to_shell("cd", selection.path, ctx.settings.shell_channel)
