"""Configuration manager: YAML file with environment overrides."""

import os
import yaml
from pathlib import Path
from typing import Dict, Any, Optional
from pydantic import ValidationError
from .paths import get_user_config_path
from .settings import Settings
from ..utils.errors import ConfigError
from ..utils.logging import get_logger

logger = get_logger("config.manager")

# Environment variable -> settings field
ENV_OVERRIDES = {
    "FASTJUMP_STORE": "store_path",
    "FASTJUMP_SHELL_CHANNEL": "shell_channel",
    "FASTJUMP_LOG_LEVEL": "log_level",
}


def load_config(path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load the raw config mapping from YAML.

    Args:
        path: Optional config path (defaults to the user config)

    Returns:
        Configuration dictionary (empty if the file does not exist)

    Raises:
        ConfigError: If the file is not valid YAML or not a mapping
    """
    if path is None:
        path = get_user_config_path()

    if not path.exists():
        logger.debug(f"No config file at {path}, using defaults")
        return {}

    try:
        with open(path, 'r', encoding='utf-8') as f:
            config = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in config file {path}: {e}")
    except OSError as e:
        raise ConfigError(f"Error reading config file {path}: {e}")

    if not isinstance(config, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")

    logger.debug(f"Loaded configuration from {path}")
    return config


def load_settings(path: Optional[Path] = None) -> Settings:
    """
    Build settings from defaults, the config file and the environment.

    Environment variables win over the file, the file wins over defaults.

    Raises:
        ConfigError: If any value is invalid
    """
    values = load_config(path)
    for env_var, field in ENV_OVERRIDES.items():
        value = os.environ.get(env_var)
        if value:
            values[field] = value

    try:
        return Settings(**values)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}")
