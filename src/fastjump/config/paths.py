"""Config path resolution."""

import os
from pathlib import Path


def get_user_config_path() -> Path:
    """Get user config path: ~/.fastjump/config.yaml, or $FASTJUMP_CONFIG when set."""
    override = os.environ.get("FASTJUMP_CONFIG")
    if override:
        return Path(override).expanduser()
    return Path.home() / ".fastjump" / "config.yaml"


def get_default_store_path() -> Path:
    """Get the default project store: ~/.fstore"""
    return Path.home() / ".fstore"


def get_default_shell_channel() -> Path:
    """Get the file the wrapping shell function reads commands from."""
    return Path("/tmp/fast_cmd")
