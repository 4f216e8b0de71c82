"""Open command - start a project's environment or IDE."""

from pathlib import Path
from ..utils import CommandContext
from ...core.resolver import resolve
from ...launch.opener import find_file_with_extension, has_start_script, open_native, run_start_script
from ...utils.errors import CommandError, LaunchError

PROMPT = "Which project would you like to open?"

# Checked in order after the start script
XCODE_EXTENSIONS = ("xcworkspace", "xcodeproj")


def open_project(query: str, ctx: CommandContext) -> None:
    """
    Open the resolved project.

    A ./start script wins; otherwise the first Xcode workspace, then the
    first Xcode project, is opened with the system opener.
    """
    selection = resolve(query, ctx.projects, PROMPT, ctx.prompter)
    path = Path(selection.path)

    if has_start_script(path):
        ctx.prompter.print_line(f'Starting "{selection.name}"...')
        code = run_start_script(path)
        if code != 0:
            raise LaunchError(f"Start script exited with status {code}")
        return

    for ext in XCODE_EXTENSIONS:
        target = find_file_with_extension(ext, path)
        if target is not None:
            ctx.prompter.print_line(f'Opening "{selection.name}" in Xcode...')
            open_native(target)
            return

    raise CommandError(f"No environment or system app to open for project: {selection.name}")
