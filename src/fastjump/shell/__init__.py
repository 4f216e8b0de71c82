"""Hand commands back to the invoking shell."""

from .handoff import send_to_shell, format_command, wrapper_snippet

__all__ = ["send_to_shell", "format_command", "wrapper_snippet"]
