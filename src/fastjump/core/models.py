"""Pydantic models for resolved projects."""

from typing import Dict
from pydantic import BaseModel, Field

# Project name -> absolute directory path
ProjectMap = Dict[str, str]


class Selection(BaseModel):
    """A single project picked from the store."""
    name: str = Field(..., min_length=1, description="Project name as saved")
    path: str = Field(..., description="Directory the project points at")

    class Config:
        """Pydantic config."""
        frozen = True
