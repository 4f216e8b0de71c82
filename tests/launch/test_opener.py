"""Tests for launching system applications."""

import subprocess
import pytest
from fastjump.launch import opener
from fastjump.launch.opener import (
    find_file_with_extension,
    has_start_script,
    native_opener,
    open_native,
    run_start_script,
)
from fastjump.utils.errors import LaunchError


class TestNativeOpener:
    """Platform-specific opener selection."""

    def test_macos(self, monkeypatch):
        monkeypatch.setattr(opener.sys, "platform", "darwin")
        assert native_opener() == "open"

    def test_linux(self, monkeypatch):
        monkeypatch.setattr(opener.sys, "platform", "linux")
        assert native_opener() == "xdg-open"

    def test_unsupported(self, monkeypatch):
        monkeypatch.setattr(opener.sys, "platform", "win32")
        with pytest.raises(LaunchError, match="Unsupported OS"):
            native_opener()

    def test_open_native_spawns(self, monkeypatch):
        calls = []
        monkeypatch.setattr(opener.sys, "platform", "linux")
        monkeypatch.setattr(opener.subprocess, "Popen", lambda args: calls.append(args))

        open_native("/srv/api")

        assert calls == [["xdg-open", "/srv/api"]]

    def test_open_native_missing_binary(self, monkeypatch):
        def _missing(args):
            raise FileNotFoundError("xdg-open")

        monkeypatch.setattr(opener.sys, "platform", "linux")
        monkeypatch.setattr(opener.subprocess, "Popen", _missing)

        with pytest.raises(LaunchError, match="Failed to run xdg-open"):
            open_native("/srv/api")


class TestProjectFiles:
    """Finding things to open inside a project."""

    def test_find_by_extension(self, tmp_path):
        (tmp_path / "README.md").write_text("", encoding='utf-8')
        (tmp_path / "App.xcodeproj").mkdir()

        assert find_file_with_extension("xcodeproj", tmp_path) == tmp_path / "App.xcodeproj"
        assert find_file_with_extension("xcworkspace", tmp_path) is None

    def test_find_in_missing_directory(self, tmp_path):
        assert find_file_with_extension("xcodeproj", tmp_path / "gone") is None

    def test_has_start_script(self, tmp_path):
        assert not has_start_script(tmp_path)
        (tmp_path / "start").write_text("#!/bin/sh\n", encoding='utf-8')
        assert has_start_script(tmp_path)

    def test_run_start_script_in_project(self, monkeypatch, tmp_path):
        seen = {}

        def _run(args, cwd):
            seen["args"], seen["cwd"] = args, cwd
            return subprocess.CompletedProcess(args, 0)

        monkeypatch.setattr(opener.subprocess, "run", _run)

        assert run_start_script(tmp_path) == 0
        assert seen == {"args": ["./start"], "cwd": str(tmp_path)}

    def test_run_start_script_not_executable(self, monkeypatch, tmp_path):
        def _run(args, cwd):
            raise PermissionError("denied")

        monkeypatch.setattr(opener.subprocess, "run", _run)

        with pytest.raises(LaunchError, match="Failed to execute start script"):
            run_start_script(tmp_path)
