"""fastjump - Bookmark project directories and jump to them from the shell."""

from .core.models import ProjectMap, Selection
from .core.resolver import resolve
from .utils.logging import setup_logging
from .utils.errors import FastJumpError, NoProjectsError, NoMatchError, InputError

__version__ = "0.1.0"

__all__ = [
    "resolve",
    "Selection",
    "ProjectMap",
    "FastJumpError",
    "NoProjectsError",
    "NoMatchError",
    "InputError",
]

setup_logging()
