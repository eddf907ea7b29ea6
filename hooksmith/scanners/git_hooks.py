"""
HOOKSMITH - Git Hooks Locator
Resolve o diretório de hooks ativo do repositório git.
"""

import subprocess
from pathlib import Path
from typing import List, Optional

from ..errors import GitError, HooksDirNotFoundError, NotGitRepositoryError
from ..logging import get_logger


logger = get_logger(__name__)


# =============================================================================
# Git Hooks Locator
# =============================================================================

class GitHooksLocator:
    """
    Localiza o diretório de hooks via `git rev-parse --git-path hooks`.

    O caminho é resolvido a cada chamada (sem cache), refletindo worktrees,
    submódulos e `core.hooksPath` corretamente.
    """

    def __init__(self, repo_path: Optional[Path] = None):
        """
        Args:
            repo_path: Caminho do repositório git (default: diretório atual)
        """
        self._repo_path = Path(repo_path) if repo_path else None

    @property
    def repo_path(self) -> Path:
        return self._repo_path or Path.cwd()

    def resolve_hooks_path(self) -> Path:
        """
        Retorna o caminho absoluto do diretório de hooks.

        Raises:
            NotGitRepositoryError: Se git falhar (fora de repositório ou git ausente)
            HooksDirNotFoundError: Se git não informar nenhum caminho
        """
        output = self._run_git_command(['git', 'rev-parse', '--git-path', 'hooks'])
        path_str = output.strip()

        if not path_str:
            raise HooksDirNotFoundError("git não retornou o diretório de hooks")

        hooks_path = Path(path_str)
        if not hooks_path.is_absolute():
            hooks_path = self.repo_path / hooks_path

        return hooks_path.resolve()

    def hooks_directory_exists(self) -> bool:
        """Verifica se o diretório de hooks existe. Erros viram False."""
        try:
            return self.resolve_hooks_path().is_dir()
        except GitError:
            return False

    def _run_git_command(self, cmd: List[str]) -> str:
        """
        Executa comando git e retorna o stdout.

        Raises:
            NotGitRepositoryError: Se o comando falhar ou git não existir
        """
        logger.debug("Executando: %s (cwd=%s)", ' '.join(cmd), self.repo_path)

        try:
            result = subprocess.run(
                cmd,
                cwd=self.repo_path,
                capture_output=True,
                text=True,
                check=False,
            )
        except OSError as e:
            raise NotGitRepositoryError(f"Não foi possível executar git: {e}")

        if result.returncode != 0:
            logger.debug("git falhou (%s): %s", result.returncode, result.stderr.strip())
            raise NotGitRepositoryError(
                f"Diretório não é um repositório git: {self.repo_path}"
            )

        return result.stdout


# =============================================================================
# Helper Functions
# =============================================================================

def get_git_hooks_path(repo_path: Optional[Path] = None) -> Path:
    """Helper para obter o diretório de hooks."""
    return GitHooksLocator(repo_path).resolve_hooks_path()


def check_for_git_hooks(repo_path: Optional[Path] = None) -> bool:
    """Helper: True se o diretório de hooks existe."""
    return GitHooksLocator(repo_path).hooks_directory_exists()


__all__ = [
    'GitHooksLocator',
    'get_git_hooks_path',
    'check_for_git_hooks',
]
