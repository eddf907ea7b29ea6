"""
HOOKSMITH - Exceções
Taxonomia de erros compartilhada por todos os módulos.

Toda falha que deve encerrar a invocação herda de HooksmithError. O CLI é o
único lugar que converte essas exceções em exit code.
"""

from pathlib import Path
from typing import Iterable, List, Optional, Union


def format_list(items: Iterable[str]) -> str:
    """Formata uma lista de itens, um por linha."""
    return "\n".join(f"  - {item}" for item in items)


# =============================================================================
# Base
# =============================================================================

class HooksmithError(Exception):
    """Erro base do hooksmith."""

    title = "Erro"
    suggestion = ""
    exit_code = 1


# =============================================================================
# Configuração
# =============================================================================

class ConfigError(HooksmithError):
    """Erro ao carregar o arquivo de configuração."""

    title = "Erro de configuração"


class ConfigNotFoundError(ConfigError):
    """Arquivo de configuração ausente."""

    title = "Configuração não encontrada"
    suggestion = (
        "Crie o arquivo com 'hooksmith init' ou informe outro caminho com --config-path."
    )

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        super().__init__(f"Arquivo de configuração não encontrado: {path}")


class ConfigParseError(ConfigError):
    """Documento YAML inválido ou fora do formato esperado."""

    title = "Falha ao parsear configuração"
    suggestion = (
        "Cada hook deve ser um objeto com uma lista 'commands' de strings."
    )

    def __init__(self, path: Union[str, Path], reason: str):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"{path}: {reason}")


# =============================================================================
# Git
# =============================================================================

class GitError(HooksmithError):
    """Erro ao consultar o git."""

    title = "Erro do git"


class NotGitRepositoryError(GitError):
    """Diretório não é um repositório git (ou git não está no PATH)."""

    title = "Não é um repositório git"
    suggestion = "Execute o comando dentro de um repositório ou rode 'git init' primeiro."


class HooksDirNotFoundError(GitError):
    """Git não informou o diretório de hooks."""

    title = "Diretório de hooks não encontrado"


# =============================================================================
# Execução de hooks
# =============================================================================

class HookExecutionError(HooksmithError):
    """Erro ao executar um hook."""

    title = "Erro de execução"


class CommandSpawnError(HookExecutionError):
    """O shell não pôde ser iniciado para o comando."""

    title = "Falha ao executar comando"
    suggestion = "Verifique se o comando existe e é executável."

    def __init__(self, command: str, reason: str):
        self.command = command
        self.reason = reason
        super().__init__(f"Não foi possível executar '{command}': {reason}")


class CommandFailedError(HookExecutionError):
    """Comando terminou com status diferente de zero."""

    title = "Comando falhou"
    suggestion = "Verifique o comando e tente novamente."

    def __init__(self, hook_name: str, command: str, exit_code: int):
        self.hook_name = hook_name
        self.command = command
        self.exit_code = exit_code
        super().__init__(
            f"Hook '{hook_name}': comando '{command}' falhou com status {exit_code}"
        )


class HookNotFoundError(HookExecutionError):
    """Hook não definido na configuração."""

    title = "Hook não encontrado"

    def __init__(self, hook_name: str, available: Optional[List[str]] = None):
        self.hook_name = hook_name
        self.available = list(available or [])
        if self.available:
            self.suggestion = (
                f"Hooks disponíveis:\n{format_list(self.available)}\n\n"
                "Verifique seu arquivo de configuração."
            )
        else:
            self.suggestion = "Nenhum hook definido no arquivo de configuração."
        super().__init__(f"Nenhum comando definido para o hook '{hook_name}'")


class NoHooksSelectedError(HookExecutionError):
    """Nenhum hook escolhido para executar."""

    title = "Nenhum hook selecionado"
    suggestion = "Informe os nomes dos hooks ou use --interactive (-i)."


# =============================================================================
# Validação
# =============================================================================

class ValidationError(HooksmithError):
    """Erro de validação da configuração."""

    title = "Erro de validação"


class InvalidHookNameError(ValidationError):
    """Um ou mais nomes de hook inválidos."""

    title = "Nomes de hook inválidos"

    def __init__(
        self,
        names: Iterable[str],
        reason: str = "Os hooks a seguir não são reconhecidos pelo git",
        suggestion: str = "Use apenas nomes de hooks válidos do git na configuração.",
    ):
        self.names = list(names)
        self.suggestion = suggestion
        super().__init__(f"{reason}:\n{format_list(self.names)}")


class InvalidCommandError(ValidationError):
    """Comando inválido em um hook (reservado)."""

    title = "Comando inválido"


# =============================================================================
# Sistema de arquivos
# =============================================================================

class HookFileError(HooksmithError):
    """Falha de I/O ao manipular o diretório ou arquivos de hook."""

    title = "Erro de sistema de arquivos"

    def __init__(self, path: Union[str, Path], operation: str, reason: object):
        self.path = Path(path)
        self.operation = operation
        super().__init__(f"Falha ao {operation} '{path}': {reason}")


__all__ = [
    "format_list",
    "HooksmithError",
    "ConfigError",
    "ConfigNotFoundError",
    "ConfigParseError",
    "GitError",
    "NotGitRepositoryError",
    "HooksDirNotFoundError",
    "HookExecutionError",
    "CommandSpawnError",
    "CommandFailedError",
    "HookNotFoundError",
    "NoHooksSelectedError",
    "ValidationError",
    "InvalidHookNameError",
    "InvalidCommandError",
    "HookFileError",
]
