"""Presentation layer - project listings."""

from .listing import render_listing, render_heading, tilde_path

__all__ = ["render_listing", "render_heading", "tilde_path"]
