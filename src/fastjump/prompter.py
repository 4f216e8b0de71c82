"""Line-based interactive I/O used while resolving and confirming."""

from abc import ABC, abstractmethod
import click
from .utils.errors import InputError


class Prompter(ABC):
    """Interactive channel: print lines, read one answer, ask yes/no."""

    @abstractmethod
    def print_line(self, text: str) -> None:
        pass

    @abstractmethod
    def read_line(self, label: str) -> str:
        """Show label and return one line of input without its newline."""
        pass

    @abstractmethod
    def confirm(self, message: str) -> bool:
        """Ask a y/N question; anything but yes declines."""
        pass


class ConsolePrompter(Prompter):
    """Prompter on the process's stdin/stdout, via click."""

    def print_line(self, text: str) -> None:
        click.echo(text)

    def read_line(self, label: str) -> str:
        try:
            value = click.prompt(label, default="", show_default=False, prompt_suffix="")
        except (click.Abort, EOFError, OSError) as e:
            raise InputError(f"Failed to read input: {str(e) or 'no input'}") from e
        return value.rstrip()

    def confirm(self, message: str) -> bool:
        try:
            return click.confirm(message, default=False)
        except (click.Abort, EOFError, OSError) as e:
            raise InputError(f"Failed to read input: {str(e) or 'no input'}") from e
