"""Edit command - open a project in $EDITOR through the shell wrapper."""

import os
from typing import Optional
from ..utils import CommandContext
from ...core.resolver import resolve
from ...shell.handoff import send_to_shell
from ...utils.errors import ConfigError


def get_editor(configured: Optional[str] = None) -> str:
    """Return $EDITOR, falling back to the configured editor."""
    editor = os.environ.get("EDITOR") or configured
    if not editor:
        raise ConfigError("No editor configured. Please set the $EDITOR environment variable")
    return editor


def edit_project(query: str, ctx: CommandContext) -> None:
    editor = get_editor(ctx.settings.editor)
    selection = resolve(query, ctx.projects, f"Which project should be opened with {editor}?", ctx.prompter)
    send_to_shell(editor, selection.path, ctx.settings.shell_channel)
