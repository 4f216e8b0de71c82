"""Command implementations, one per CLI flag."""

from .load import load_project
from .save import save_project
from .delete import delete_project
from .view import view_project
from .open import open_project
from .edit import edit_project
from .reset import reset_projects

__all__ = [
    "load_project",
    "save_project",
    "delete_project",
    "view_project",
    "open_project",
    "edit_project",
    "reset_projects",
]
