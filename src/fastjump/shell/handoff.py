"""Pass a command to the shell function wrapping fastjump.

A child process cannot change its parent shell's working directory, so
commands such as ``cd`` are written to a channel file that the wrapper
sources once fastjump exits.
"""

import shlex
from pathlib import Path
from typing import Union
from ..utils.errors import ShellHandoffError
from ..utils.logging import get_logger

logger = get_logger("shell.handoff")

WRAPPER_TEMPLATE = (
    'f() { rm -f {channel}; fastjump "$@"; fastjump_status=$?; '
    '[ $fastjump_status -eq 0 ] && [ -f {channel} ] && . {channel}; '
    'rm -f {channel}; return $fastjump_status; }'
)


def format_command(command: str, path: Union[str, Path]) -> str:
    """Build the shell line run by the wrapper, quoting path."""
    return f"{command} {shlex.quote(str(path))}"


def send_to_shell(command: str, path: Union[str, Path], channel: Union[str, Path]) -> None:
    """
    Write a command for the wrapping shell function to run.

    Args:
        command: Program or builtin to run, e.g. "cd" or an editor
        path: Argument passed to command
        channel: File the wrapper sources

    Raises:
        ShellHandoffError: If the channel file cannot be written
    """
    line = format_command(command, path)
    try:
        Path(channel).write_text(line, encoding='utf-8')
    except OSError as e:
        raise ShellHandoffError(f"Failed to communicate with shell: {e}")
    logger.debug(f"Wrote '{line}' to {channel}")


def wrapper_snippet(channel: Union[str, Path]) -> str:
    """
    Return a shell function that runs fastjump and sources its channel.

    The channel is cleared before fastjump runs and sourced only when it
    exits 0. The function returns fastjump's exit status.
    """
    quoted = shlex.quote(str(channel))
    return WRAPPER_TEMPLATE.replace("{channel}", quoted)
