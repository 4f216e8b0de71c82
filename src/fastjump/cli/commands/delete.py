"""Delete command - forget a saved project."""

from ..utils import CommandContext
from ...core.resolver import resolve

PROMPT = "Which project should be deleted?"


def delete_project(query: str, ctx: CommandContext) -> bool:
    """Resolve query and remove it after confirmation. Returns True if removed."""
    selection = resolve(query, ctx.projects, PROMPT, ctx.prompter)

    if not ctx.prompter.confirm(f'Delete "{selection.name}"'):
        return False

    del ctx.projects[selection.name]
    ctx.store.save(ctx.projects)
    ctx.prompter.print_line(f'Deleted project "{selection.name}"')
    return True
