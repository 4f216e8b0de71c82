"""Resolve a query to exactly one saved project, asking the user when needed."""

from typing import Mapping, Optional
from .models import ProjectMap, Selection
from ..presentation.listing import render_listing
from ..prompter import Prompter
from ..utils.errors import NoProjectsError, NoMatchError
from ..utils.logging import get_logger

logger = get_logger("core.resolver")

ENTER_PROJECT = "\nEnter project: "


def resolve(
    query: str,
    projects: Mapping[str, str],
    prompt: str,
    prompter: Prompter,
    home: Optional[str] = None,
) -> Selection:
    """
    Resolve query to a single (name, path) selection.

    Precedence: an empty store fails, an empty query lists the candidates
    and asks for one, an exact name wins, then a name containing the query.
    When several names contain the query, only those are listed and the
    user is asked again; this repeats until one project is left or the
    answer matches nothing.

    The projects mapping is never modified. The returned path is always
    looked up in the mapping passed in, not in a narrowed copy.

    Args:
        query: Full or partial project name; empty to ask
        projects: Saved projects (name -> path)
        prompt: Heading for the first full listing
        prompter: Interactive I/O used for listings and answers
        home: Home directory abbreviated in listings (defaults to the user's)

    Returns:
        Selection for the resolved project

    Raises:
        NoProjectsError: If there are no projects to choose from
        NoMatchError: If a non-empty query matches no project
        InputError: If reading an answer fails
    """
    candidates: ProjectMap = dict(projects)
    heading = prompt

    while True:
        if not candidates:
            raise NoProjectsError()

        if not query:
            query = _ask(candidates, heading, prompter, home)
            heading = ""
            continue

        if query in candidates:
            name = query
            break

        matches = [key for key in candidates if query in key]
        if not matches:
            raise NoMatchError()
        if len(matches) == 1:
            name = matches[0]
            break

        logger.debug(f"Query '{query}' matched {len(matches)} projects, narrowing")
        candidates = {key: candidates[key] for key in matches}
        heading = ""
        query = _ask(candidates, heading, prompter, home)

    logger.debug(f"Resolved project '{name}'")
    return Selection(name=name, path=projects[name])


def _ask(candidates: ProjectMap, heading: str, prompter: Prompter, home: Optional[str]) -> str:
    """List candidates under heading and read the next query."""
    for line in render_listing(candidates, heading, home=home):
        prompter.print_line(line)
    return prompter.read_line(ENTER_PROJECT)
