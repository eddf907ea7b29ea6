"""Git hook shim generation and hook file management."""

from .install import (
    DEFAULT_INSTALLER_COMMAND,
    list_installed_hooks,
    remove_hook_file,
    render_hook_script,
    write_hook_file,
)

__all__ = [
    "DEFAULT_INSTALLER_COMMAND",
    "list_installed_hooks",
    "remove_hook_file",
    "render_hook_script",
    "write_hook_file",
]
