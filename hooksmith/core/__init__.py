"""Core modules for the hooksmith lifecycle manager."""

from .config_loader import DEFAULT_CONFIG_FILE, load_config, load_config_from_dict
from .formatters import ConsoleReporter
from .manager import HookLifecycleManager
from .models import (
    CompareReport,
    ExecutionMode,
    Hook,
    HookRunResult,
    HooksConfig,
    ValidationReport,
)
from .validator import GIT_HOOKS, HookNameValidator

__all__ = [
    # Manager
    "HookLifecycleManager",
    # Reporter
    "ConsoleReporter",
    # Models
    "CompareReport",
    "ExecutionMode",
    "Hook",
    "HookRunResult",
    "HooksConfig",
    "ValidationReport",
    # Validation
    "GIT_HOOKS",
    "HookNameValidator",
    # Loaders
    "DEFAULT_CONFIG_FILE",
    "load_config",
    "load_config_from_dict",
]
