"""Project resolution core."""

from .models import ProjectMap, Selection
from .resolver import resolve

__all__ = ["ProjectMap", "Selection", "resolve"]
