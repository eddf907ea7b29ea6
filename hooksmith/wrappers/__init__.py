"""Shell execution and interactive prompts."""

from .prompts import HookSelector, confirm_overwrite
from .shell_exec import ShellRunner

__all__ = [
    "HookSelector",
    "ShellRunner",
    "confirm_overwrite",
]
