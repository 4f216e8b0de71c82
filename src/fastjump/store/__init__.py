"""Persistent project storage."""

from .json_store import ProjectStore

__all__ = ["ProjectStore"]
