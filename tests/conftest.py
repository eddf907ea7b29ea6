"""Pytest configuration and fixtures."""

import io
import shutil
import subprocess
from pathlib import Path

import pytest
from rich.console import Console

from hooksmith.core import ConsoleReporter, ExecutionMode, HookLifecycleManager, load_config_from_dict


def pytest_configure(config):
    config.addinivalue_line("markers", "requires_git: teste precisa do executável git")


def pytest_runtest_setup(item):
    if item.get_closest_marker("requires_git") and shutil.which("git") is None:
        pytest.skip("git não encontrado")


class FakeLocator:
    """Locator que aponta para um diretório fixo."""

    def __init__(self, hooks_dir: Path):
        self.hooks_dir = hooks_dir
        self.calls = 0

    def resolve_hooks_path(self) -> Path:
        self.calls += 1
        return self.hooks_dir

    def hooks_directory_exists(self) -> bool:
        return self.hooks_dir.is_dir()


class FakeRunner:
    """Runner que registra os comandos em vez de executá-los."""

    def __init__(self, exit_codes=None):
        self.exit_codes = exit_codes or {}
        self.commands = []

    def run(self, command: str) -> int:
        self.commands.append(command)
        return self.exit_codes.get(command, 0)


@pytest.fixture
def temp_git_repo(tmp_path):
    """Cria repositório git temporário."""
    repo_dir = tmp_path / "test_repo"
    repo_dir.mkdir()

    subprocess.run(["git", "init"], cwd=repo_dir, check=True, capture_output=True)
    subprocess.run(
        ["git", "config", "user.email", "test@example.com"],
        cwd=repo_dir,
        check=True
    )
    subprocess.run(
        ["git", "config", "user.name", "Test User"],
        cwd=repo_dir,
        check=True
    )

    return repo_dir


@pytest.fixture
def outside_repo(tmp_path, monkeypatch):
    """Diretório garantidamente fora de qualquer repositório git."""
    directory = tmp_path / "not_a_repo"
    directory.mkdir()
    monkeypatch.setenv("GIT_CEILING_DIRECTORIES", str(tmp_path))
    monkeypatch.chdir(directory)
    return directory


@pytest.fixture
def hooks_dir(tmp_path):
    """Diretório de hooks (ainda não criado)."""
    return tmp_path / "hooks"


@pytest.fixture
def locator(hooks_dir):
    return FakeLocator(hooks_dir)


@pytest.fixture
def runner():
    return FakeRunner()


@pytest.fixture
def make_runner():
    """Fábrica de FakeRunner com exit codes por comando."""
    return FakeRunner


@pytest.fixture
def output():
    """Buffer onde o reporter escreve."""
    return io.StringIO()


@pytest.fixture
def reporter(output):
    return ConsoleReporter(Console(file=output, width=200), verbose=True)


@pytest.fixture
def make_manager(locator, runner, reporter):
    """Fábrica de HookLifecycleManager com colaboradores falsos."""

    def _make(hooks, dry_run=False, **kwargs):
        config = load_config_from_dict(hooks, source_file="test.yaml")
        kwargs.setdefault("locator", locator)
        kwargs.setdefault("runner", runner)
        kwargs.setdefault("reporter", reporter)
        return HookLifecycleManager(
            config,
            mode=ExecutionMode(dry_run=dry_run, verbose=True),
            **kwargs
        )

    return _make


@pytest.fixture
def write_config(tmp_path):
    """Escreve um hooksmith.yaml e retorna o caminho."""

    def _write(content: str, name: str = "hooksmith.yaml", directory: Path = None) -> Path:
        path = (directory or tmp_path) / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write
