"""Configuration module: load settings from YAML and the environment."""

from .manager import load_config, load_settings
from .paths import get_user_config_path, get_default_store_path, get_default_shell_channel
from .settings import Settings

__all__ = [
    "Settings",
    "load_config",
    "load_settings",
    "get_user_config_path",
    "get_default_store_path",
    "get_default_shell_channel",
]
