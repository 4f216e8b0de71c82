"""Save command - remember the current directory under a name."""

from ..utils import CommandContext
from ...utils.errors import CommandError
from ...utils.logging import get_logger

logger = get_logger("cli.save")

NAME_PROMPT = "Enter new project name: "


def save_project(query: str, ctx: CommandContext) -> bool:
    """
    Save the current directory as project query (or a prompted name).

    An existing project is only overwritten when the user confirms.

    Returns:
        True if the store was written
    """
    name = query or ctx.prompter.read_line(NAME_PROMPT).strip()
    if not name:
        raise CommandError("Project name cannot be empty")

    if name in ctx.projects:
        message = f'Project named "{name}" already exists. Overwrite'
        if not ctx.prompter.confirm(message):
            logger.debug(f"Kept existing project '{name}'")
            return False

    ctx.projects[name] = str(ctx.cwd)
    ctx.store.save(ctx.projects)
    ctx.prompter.print_line(f'Saved project "{name}"')
    return True
