"""Launch system applications for projects."""

from .opener import open_native, find_file_with_extension, has_start_script, run_start_script

__all__ = ["open_native", "find_file_with_extension", "has_start_script", "run_start_script"]
