"""Load and save the project map as a JSON object."""

import json
from pathlib import Path
from typing import Any, Dict, Union
from ..core.models import ProjectMap
from ..utils.errors import StoreError
from ..utils.logging import get_logger

logger = get_logger("store.json_store")


class ProjectStore:
    """Whole-file JSON store of project name -> directory path."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def __repr__(self) -> str:
        return f"ProjectStore(path={self.path})"

    def load(self) -> ProjectMap:
        """
        Load all saved projects.

        Returns:
            Mapping of project name to path (empty if nothing was saved yet)

        Raises:
            StoreError: If the store cannot be read or holds anything but
                an object of strings
        """
        if not self.path.exists():
            logger.debug(f"No project store at {self.path}")
            return {}

        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise StoreError(f"Failed to read projects from {self.path}: invalid JSON ({e})")
        except OSError as e:
            raise StoreError(f"Failed to read projects from {self.path}: {e}")

        projects = _validate(data, self.path)
        logger.debug(f"Loaded {len(projects)} projects from {self.path}")
        return projects

    def save(self, projects: ProjectMap) -> None:
        """
        Replace the stored projects with projects.

        Raises:
            StoreError: If the store cannot be written
        """
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, 'w', encoding='utf-8') as f:
                json.dump(projects, f, indent=2, sort_keys=True)
                f.write("\n")
        except OSError as e:
            raise StoreError(f"Failed to write projects to {self.path}: {e}")
        logger.debug(f"Saved {len(projects)} projects to {self.path}")

    def reset(self) -> None:
        """Remove the store file, forgetting every project."""
        try:
            self.path.unlink()
        except FileNotFoundError:
            pass
        except OSError as e:
            raise StoreError(f"Failed to remove {self.path}: {e}")
        logger.debug(f"Removed project store {self.path}")


def _validate(data: Any, path: Path) -> Dict[str, str]:
    """Check that data is a mapping of non-empty names to path strings."""
    if not isinstance(data, dict):
        raise StoreError(f"Failed to read projects from {path}: expected a JSON object")

    bad = [name for name, value in data.items() if not name or not isinstance(value, str)]
    if bad:
        raise StoreError(
            f"Failed to read projects from {path}: invalid entries {', '.join(repr(b) for b in bad[:5])}"
        )
    return dict(data)
