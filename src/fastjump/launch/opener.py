"""Open project directories and files with system applications."""

import subprocess
import sys
from pathlib import Path
from typing import Optional, Union
from ..utils.errors import LaunchError
from ..utils.logging import get_logger

logger = get_logger("launch.opener")

START_SCRIPT = "start"


def native_opener() -> str:
    """Return the OS command that opens files and folders with their default app."""
    if sys.platform == "darwin":
        return "open"
    if sys.platform.startswith("linux"):
        return "xdg-open"
    raise LaunchError("Unsupported OS")


def open_native(path: Union[str, Path]) -> None:
    """
    Open path with the operating system's default application.

    The opener is spawned and not waited on.

    Raises:
        LaunchError: If the OS is unsupported or the opener cannot start
    """
    command = native_opener()
    try:
        subprocess.Popen([command, str(path)])
    except OSError as e:
        raise LaunchError(f"Failed to run {command}: {e}")
    logger.debug(f"Opened {path} with {command}")


def find_file_with_extension(ext: str, directory: Union[str, Path]) -> Optional[Path]:
    """Get the first entry in directory with the given extension (without dot)."""
    try:
        entries = sorted(Path(directory).iterdir())
    except OSError:
        return None
    for entry in entries:
        if entry.suffix == f".{ext}":
            return entry
    return None


def has_start_script(directory: Union[str, Path]) -> bool:
    """Check whether the project ships a ./start script."""
    return (Path(directory) / START_SCRIPT).is_file()


def run_start_script(directory: Union[str, Path]) -> int:
    """
    Run ./start inside directory and wait for it.

    Returns:
        Exit code of the script

    Raises:
        LaunchError: If the script cannot be executed
    """
    try:
        result = subprocess.run([f"./{START_SCRIPT}"], cwd=str(directory))
    except OSError as e:
        raise LaunchError(f"Failed to execute start script: {e}")
    logger.debug(f"Start script in {directory} exited with {result.returncode}")
    return result.returncode
