"""Pydantic model for runtime settings."""

import logging
from pathlib import Path
from typing import Optional
from pydantic import BaseModel, Field, field_validator
from .paths import get_default_store_path, get_default_shell_channel


class Settings(BaseModel):
    """Resolved fastjump settings (defaults < config file < environment)."""
    store_path: Path = Field(default_factory=get_default_store_path, description="JSON file holding saved projects")
    shell_channel: Path = Field(default_factory=get_default_shell_channel, description="File the shell wrapper sources after exit")
    editor: Optional[str] = Field(default=None, description="Fallback editor when $EDITOR is unset")
    log_level: str = Field(default="WARNING", description="Logging level name")

    class Config:
        """Pydantic config."""
        extra = "forbid"

    @field_validator("store_path", "shell_channel", mode="before")
    @classmethod
    def _expand_user(cls, value):
        if isinstance(value, str):
            return Path(value).expanduser()
        if isinstance(value, Path):
            return value.expanduser()
        return value

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level '{value}'")
        return level
