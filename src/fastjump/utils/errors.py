"""Custom exception classes for fastjump."""


class FastJumpError(Exception):
    """Base exception for all fastjump errors."""
    pass


class ResolutionError(FastJumpError):
    """Raised when a query cannot be resolved to a single project."""
    pass


class NoProjectsError(ResolutionError):
    """Raised when there are no saved projects to choose from."""

    def __init__(self, message: str = "No saved projects found"):
        super().__init__(message)


class NoMatchError(ResolutionError):
    """Raised when a query matches no project name."""

    def __init__(self, message: str = "No matching project found"):
        super().__init__(message)


class InputError(ResolutionError):
    """Raised when interactive input cannot be read."""
    pass


class StoreError(FastJumpError):
    """Raised when the project store cannot be read or written."""
    pass


class ConfigError(FastJumpError):
    """Raised when configuration is invalid or missing."""
    pass


class ShellHandoffError(FastJumpError):
    """Raised when a command cannot be passed to the wrapping shell."""
    pass


class LaunchError(FastJumpError):
    """Raised when an external program cannot be started."""
    pass


class CommandError(FastJumpError):
    """Raised when a command refuses to run."""
    pass
