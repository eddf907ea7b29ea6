"""
HOOKSMITH - Core Data Models
Estruturas de dados da configuração e dos relatórios do gerenciador.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional


# =============================================================================
# Configuração
# =============================================================================

@dataclass(frozen=True)
class ExecutionMode:
    """Modo de execução de uma invocação."""
    dry_run: bool = False
    verbose: bool = False


@dataclass
class Hook:
    """Um hook configurado: sequência ordenada de comandos shell."""
    commands: List[str] = field(default_factory=list)

    @property
    def is_noop(self) -> bool:
        return not self.commands


@dataclass
class HooksConfig:
    """Configuração completa: nome do hook -> Hook."""
    hooks: Dict[str, Hook] = field(default_factory=dict)
    source_file: Optional[str] = None

    @property
    def hook_names(self) -> List[str]:
        return list(self.hooks.keys())

    @property
    def total_hooks(self) -> int:
        return len(self.hooks)

    def get_hook(self, hook_name: str) -> Optional[Hook]:
        return self.hooks.get(hook_name)

    def __contains__(self, hook_name: object) -> bool:
        return hook_name in self.hooks


# =============================================================================
# Relatórios
# =============================================================================

@dataclass
class ValidationReport:
    """Partição dos nomes configurados em válidos e inválidos."""
    valid_names: List[str] = field(default_factory=list)
    invalid_names: List[str] = field(default_factory=list)

    @property
    def valid_count(self) -> int:
        return len(self.valid_names)

    @property
    def is_valid(self) -> bool:
        return not self.invalid_names


@dataclass
class CompareReport:
    """Diferenças entre a configuração e o diretório de hooks."""
    missing: List[str] = field(default_factory=list)
    extra: List[str] = field(default_factory=list)

    @property
    def in_sync(self) -> bool:
        return not self.missing and not self.extra


@dataclass
class HookRunResult:
    """Resultado da execução (ou simulação) de um hook."""
    hook_name: str
    total: int
    executed: int
    dry_run: bool = False

    @property
    def success(self) -> bool:
        return self.dry_run or self.executed == self.total


__all__ = [
    "ExecutionMode",
    "Hook",
    "HooksConfig",
    "ValidationReport",
    "CompareReport",
    "HookRunResult",
]
