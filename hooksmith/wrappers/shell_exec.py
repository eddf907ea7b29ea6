"""
HOOKSMITH - Shell Runner
Executa os comandos configurados de um hook através do shell.
"""

import subprocess
from pathlib import Path
from typing import Optional

from ..errors import CommandSpawnError
from ..logging import get_logger


logger = get_logger(__name__)


DEFAULT_SHELL = "sh"


class ShellRunner:
    """
    Entrega cada comando, sem alterações, para `sh -c`.

    Não há sandbox nem timeout: o comando roda até terminar.
    """

    def __init__(self, shell: str = DEFAULT_SHELL, cwd: Optional[Path] = None):
        """
        Args:
            shell: Shell POSIX usado para interpretar os comandos
            cwd: Diretório de trabalho (default: diretório atual)
        """
        self.shell = shell
        self.cwd = cwd

    def run(self, command: str) -> int:
        """
        Executa um comando e retorna o exit code.

        Término por sinal (returncode negativo) é reportado como 1.

        Raises:
            CommandSpawnError: Se o shell não puder ser iniciado
        """
        logger.debug("Executando via %s: %s", self.shell, command)

        try:
            result = subprocess.run(
                [self.shell, "-c", command],
                cwd=self.cwd,
                check=False,
            )
        except OSError as e:
            raise CommandSpawnError(command, str(e))

        if result.returncode < 0:
            return 1

        return result.returncode


__all__ = [
    "DEFAULT_SHELL",
    "ShellRunner",
]
