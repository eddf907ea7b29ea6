"""Tests for the shell runner."""

import os

import pytest

from hooksmith.errors import CommandSpawnError
from hooksmith.wrappers import ShellRunner


pytestmark = pytest.mark.skipif(os.name != "posix", reason="requer sh")


def test_success():
    assert ShellRunner().run("true") == 0


def test_exit_code_is_returned():
    assert ShellRunner().run("exit 3") == 3


def test_command_runs_in_cwd(tmp_path):
    ShellRunner(cwd=tmp_path).run("touch marker")

    assert (tmp_path / "marker").exists()


def test_shell_features_are_available(tmp_path):
    """Commands are handed verbatim to the shell."""
    ShellRunner(cwd=tmp_path).run("[ -d . ] && echo ok > out.txt")

    assert (tmp_path / "out.txt").read_text().strip() == "ok"


def test_spawn_failure():
    with pytest.raises(CommandSpawnError):
        ShellRunner(shell="/nonexistent/shell").run("true")
