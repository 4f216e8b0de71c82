"""Reset command - forget all saved projects."""

from ..utils import CommandContext
from ...utils.errors import NoProjectsError


def reset_projects(ctx: CommandContext) -> bool:
    """Remove the store after confirmation. Returns True if removed."""
    if not ctx.projects:
        raise NoProjectsError()

    count = len(ctx.projects)
    suffix = "s" if count != 1 else ""
    if not ctx.prompter.confirm(f"Remove {count} saved project{suffix}"):
        return False

    ctx.store.reset()
    ctx.projects.clear()
    ctx.prompter.print_line("Removed all saved projects")
    return True
