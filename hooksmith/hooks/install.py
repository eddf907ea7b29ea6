"""
HOOKSMITH - Hook Files
Gera o shim instalado em .git/hooks e faz o I/O dos arquivos de hook.
"""

import os
from pathlib import Path
from typing import List, Optional

from ..errors import HookFileError
from ..logging import get_logger


logger = get_logger(__name__)


# =============================================================================
# Hook Template
# =============================================================================

DEFAULT_INSTALLER_COMMAND = "cargo install hooksmith"
INSTALLER_COMMAND_ENV = "HOOKSMITH_INSTALLER_COMMAND"

SAMPLE_SUFFIX = ".sample"
HOOK_FILE_MODE = 0o755

# >/dev/null 2>&1 silencia stdout e stderr do teste `hooksmith -h`
HOOK_TEMPLATE = """#!/bin/sh

if hooksmith -h >/dev/null 2>&1
then
  exec hooksmith run {hook_name}
else
  {installer_command}
  exec hooksmith run {hook_name}
fi
"""


def resolve_installer_command(installer_command: Optional[str] = None) -> str:
    """Comando de instalação: argumento explícito > variável de ambiente > default."""
    if installer_command:
        return installer_command
    return os.environ.get(INSTALLER_COMMAND_ENV) or DEFAULT_INSTALLER_COMMAND


def render_hook_script(hook_name: str, installer_command: Optional[str] = None) -> str:
    """
    Gera o conteúdo do shim para um hook.

    O shim chama `hooksmith run <hook>`; se hooksmith não estiver no PATH,
    instala com o comando configurado antes de chamar.

    Args:
        hook_name: Nome do hook
        installer_command: Comando de instalação do fallback

    Returns:
        Conteúdo do script
    """
    return HOOK_TEMPLATE.format(
        hook_name=hook_name,
        installer_command=resolve_installer_command(installer_command),
    )


# =============================================================================
# Hook File I/O
# =============================================================================

def ensure_directory(path: Path) -> None:
    """Cria o diretório recursivamente."""
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise HookFileError(path, "criar o diretório", e)


def write_hook_file(hook_path: Path, content: str) -> bool:
    """
    Escreve o arquivo de hook e o torna executável.

    Returns:
        True se as permissões foram ajustadas (apenas em sistemas POSIX)
    """
    try:
        hook_path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise HookFileError(hook_path, "escrever o hook", e)

    logger.debug("Hook escrito: %s", hook_path)

    if os.name != "posix":
        return False

    try:
        hook_path.chmod(HOOK_FILE_MODE)
    except OSError as e:
        raise HookFileError(hook_path, "ajustar permissões do hook", e)

    return True


def remove_hook_file(hook_path: Path) -> None:
    try:
        hook_path.unlink()
    except OSError as e:
        raise HookFileError(hook_path, "remover o hook", e)

    logger.debug("Hook removido: %s", hook_path)


def list_installed_hooks(hooks_dir: Path) -> List[str]:
    """
    Lista os arquivos de hook presentes no diretório.

    Ignora subdiretórios e os exemplos `*.sample` criados pelo próprio git.
    Diretório inexistente resulta em lista vazia.
    """
    if not hooks_dir.is_dir():
        return []

    try:
        entries = sorted(hooks_dir.iterdir())
    except OSError as e:
        raise HookFileError(hooks_dir, "listar o diretório de hooks", e)

    return [
        entry.name
        for entry in entries
        if entry.is_file() and not entry.name.endswith(SAMPLE_SUFFIX)
    ]


__all__ = [
    "DEFAULT_INSTALLER_COMMAND",
    "INSTALLER_COMMAND_ENV",
    "SAMPLE_SUFFIX",
    "HOOK_FILE_MODE",
    "render_hook_script",
    "resolve_installer_command",
    "ensure_directory",
    "write_hook_file",
    "remove_hook_file",
    "list_installed_hooks",
]
