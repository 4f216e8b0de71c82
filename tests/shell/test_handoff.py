"""Tests for handing commands to the wrapping shell."""

import os
import shutil
import subprocess
import pytest
from fastjump.shell.handoff import format_command, send_to_shell, wrapper_snippet
from fastjump.utils.errors import ShellHandoffError


class TestHandoff:
    """Channel file contents."""

    def test_writes_cd_command(self, tmp_path):
        channel = tmp_path / "fast_cmd"
        send_to_shell("cd", "/srv/api", channel)

        assert channel.read_text(encoding='utf-8') == "cd /srv/api"

    def test_quotes_paths_with_spaces(self):
        assert format_command("cd", "/srv/my project") == "cd '/srv/my project'"

    def test_quotes_single_quotes(self):
        """A quote in the path cannot break out of the argument."""
        assert format_command("vim", "/srv/it's") == "vim '/srv/it'\"'\"'s'"

    def test_overwrites_previous_command(self, tmp_path):
        channel = tmp_path / "fast_cmd"
        send_to_shell("cd", "/one", channel)
        send_to_shell("cd", "/two", channel)

        assert channel.read_text(encoding='utf-8') == "cd /two"

    def test_unwritable_channel(self, tmp_path):
        with pytest.raises(ShellHandoffError, match="Failed to communicate with shell"):
            send_to_shell("cd", "/srv", tmp_path / "missing" / "fast_cmd")

    def test_wrapper_sources_channel(self):
        snippet = wrapper_snippet("/tmp/fast_cmd")

        assert snippet.startswith("f() { rm -f /tmp/fast_cmd;")
        assert ". /tmp/fast_cmd" in snippet
        assert snippet.endswith("return $fastjump_status; }")


def _stand_in(bin_dir, body):
    """Install an executable named fastjump running body under sh."""
    bin_dir.mkdir(exist_ok=True)
    script = bin_dir / "fastjump"
    script.write_text(f"#!/bin/sh\n{body}\n", encoding='utf-8')
    script.chmod(0o755)


def _run_wrapper(tmp_path, channel, *args):
    """Define the wrapper in sh, call f with args and return the exit status."""
    env = dict(os.environ, PATH=f"{tmp_path / 'bin'}{os.pathsep}{os.environ.get('PATH', '')}")
    script = f"{wrapper_snippet(channel)}\nf \"$@\"\n"
    result = subprocess.run(["sh", "-c", script, "sh", *args], env=env, cwd=str(tmp_path))
    return result.returncode


@pytest.mark.skipif(shutil.which("sh") is None, reason="requires a POSIX shell")
class TestWrapperFunction:
    """The shell function printed in the help text."""

    def test_failure_status_is_returned(self, tmp_path):
        """A failing fastjump makes f fail too."""
        _stand_in(tmp_path / "bin", "exit 1")

        assert _run_wrapper(tmp_path, tmp_path / "fast_cmd", "zzz") == 1

    def test_failure_does_not_source_channel(self, tmp_path):
        channel = tmp_path / "fast_cmd"
        marker = tmp_path / "sourced"
        _stand_in(tmp_path / "bin", f"echo 'touch {marker}' > {channel}; exit 1")

        assert _run_wrapper(tmp_path, channel, "zzz") == 1
        assert not marker.exists()
        assert not channel.exists()

    def test_success_sources_channel(self, tmp_path):
        channel = tmp_path / "fast_cmd"
        marker = tmp_path / "sourced"
        _stand_in(tmp_path / "bin", f"echo 'touch {marker}' > {channel}")

        assert _run_wrapper(tmp_path, channel, "api") == 0
        assert marker.exists()
        assert not channel.exists()

    def test_stale_channel_is_not_sourced(self, tmp_path):
        """Commands that write nothing never run a leftover channel."""
        channel = tmp_path / "fast_cmd"
        marker = tmp_path / "sourced"
        channel.write_text(f"touch {marker}", encoding='utf-8')
        _stand_in(tmp_path / "bin", "exit 0")

        assert _run_wrapper(tmp_path, channel, "-s", "api") == 0
        assert not marker.exists()
        assert not channel.exists()
