"""CLI utilities package."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional
from ...config.settings import Settings
from ...core.models import ProjectMap
from ...prompter import Prompter
from ...store.json_store import ProjectStore


@dataclass
class CommandContext:
    """Everything a command needs: the loaded projects and where they came from."""
    projects: ProjectMap
    store: ProjectStore
    settings: Settings
    prompter: Prompter
    cwd: Path = field(default_factory=Path.cwd)


def format_error(message: str, suggestion: Optional[str] = None) -> str:
    """
    Format error message with optional suggestion.

    Args:
        message: Error message
        suggestion: Optional suggestion or help text

    Returns:
        Formatted error string
    """
    error = f"Error: {message}"
    if suggestion:
        error += f"\nTip: {suggestion}"
    return error


__all__ = ["CommandContext", "format_error"]
