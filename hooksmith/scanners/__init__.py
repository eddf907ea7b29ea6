"""Scanners for the git repository state."""

from .git_hooks import (
    GitHooksLocator,
    check_for_git_hooks,
    get_git_hooks_path,
)

__all__ = [
    "GitHooksLocator",
    "check_for_git_hooks",
    "get_git_hooks_path",
]
