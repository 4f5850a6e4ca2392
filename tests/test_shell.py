"""Tests for kickstart.shell module."""

import subprocess

import pytest

from kickstart.errors import (
    CommandFailedError,
    CommandNotFoundError,
    CommandTimeoutError,
)
from kickstart.shell import run_command


class TestRunCommand:
    """Tests for run_command() with mocked subprocess."""

    def test_captures_stdout(self, fp):
        fp.register(["pnpm", "--version"], stdout="8.6.0\n")
        assert run_command("pnpm", "--version").stdout == "8.6.0\n"

    def test_stringifies_arguments(self, fp, tmp_path):
        fp.register(["echo", str(tmp_path)], stdout="ok\n")
        assert run_command("echo", tmp_path).stdout == "ok\n"

    def test_failure_raises(self, fp):
        fp.register(["npm", "install"], returncode=2, stderr="ERR!")
        with pytest.raises(CommandFailedError) as exc_info:
            run_command("npm", "install")
        assert exc_info.value.returncode == 2
        assert exc_info.value.cmd == ["npm", "install"]

    def test_check_false(self, fp):
        fp.register(["npm", "install"], returncode=2)
        assert run_command("npm", "install", check=False).returncode == 2

    def test_not_installed(self, missing_executable):
        with pytest.raises(CommandNotFoundError, match="not installed"):
            run_command("pnpm", "--version")

    def test_timeout(self, monkeypatch):
        def _run(cmd, *args, **kwargs):
            raise subprocess.TimeoutExpired(cmd, kwargs.get("timeout"))

        monkeypatch.setattr(subprocess, "run", _run)
        with pytest.raises(CommandTimeoutError) as exc_info:
            run_command("pnpm", "--version", timeout=5)
        assert exc_info.value.timeout == 5
