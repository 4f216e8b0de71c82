"""Render project listings for interactive selection."""

import os
from pathlib import Path
from typing import List, Mapping, Optional
import click

# Spaces between the name column and the path column
COLUMN_GAP = 2


def tilde_path(path: str, home: Optional[str] = None) -> str:
    """Abbreviate the user's home directory prefix in path to ~."""
    if home is None:
        home = str(Path.home())
    home = home.rstrip(os.sep)
    if not home:
        return path
    if path == home:
        return "~"
    if path.startswith(home + os.sep):
        return "~" + path[len(home):]
    return path


def render_heading(count: int, prompt: str = "") -> List[str]:
    """Return the heading lines: the prompt, or a project count when there is none."""
    if prompt:
        return [prompt, ""]
    suffix = "s" if count != 1 else ""
    return [f"{count} project{suffix} found", ""]


def render_listing(
    projects: Mapping[str, str],
    prompt: str = "",
    home: Optional[str] = None,
    bold: bool = True,
) -> List[str]:
    """
    Render a heading followed by one aligned line per project.

    Names are sorted and padded to the longest name in this listing, so
    the column width follows the candidates being shown.

    Args:
        projects: Candidates to list
        prompt: Heading text; empty shows "<n> projects found"
        home: Home directory to abbreviate (defaults to the current user's)
        bold: Emphasize names with ANSI bold

    Returns:
        Lines to print, without trailing newlines
    """
    lines = render_heading(len(projects), prompt)
    if not projects:
        return lines

    width = max(len(name) for name in projects) + COLUMN_GAP
    for name in sorted(projects):
        column = name.ljust(width)
        if bold:
            column = click.style(column, bold=True)
        lines.append(f"{column}{tilde_path(projects[name], home)}")
    return lines
