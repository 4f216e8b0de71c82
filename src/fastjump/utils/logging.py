"""Structured logging setup for fastjump."""

import logging
import sys
from typing import Optional, Union


def setup_logging(level: Union[int, str] = logging.WARNING, format_string: Optional[str] = None) -> logging.Logger:
    """
    Set up logging for fastjump.

    Output goes to stderr so it never mixes with listings on stdout.

    Args:
        level: Logging level (default: WARNING)
        format_string: Custom format string (optional)

    Returns:
        Configured logger instance
    """
    if format_string is None:
        format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=level,
        format=format_string,
        stream=sys.stderr,
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    logger = logging.getLogger("fastjump")
    logger.setLevel(level)
    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for a specific module."""
    return logging.getLogger(f"fastjump.{name}")
