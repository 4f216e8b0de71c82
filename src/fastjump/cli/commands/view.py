"""View command - show a project in the system file explorer."""

from ..utils import CommandContext
from ...core.resolver import resolve
from ...launch.opener import open_native

PROMPT = "Which project should open in the file explorer?"


def view_project(query: str, ctx: CommandContext) -> None:
    selection = resolve(query, ctx.projects, PROMPT, ctx.prompter)
    ctx.prompter.print_line(f'Opening "{selection.name}" in file explorer...')
    open_native(selection.path)
