"""
HOOKSMITH - Hook Name Validator
Confere nomes de hooks contra o conjunto padrão de hooks do git.
"""

from typing import Iterable, Tuple

from ..errors import InvalidHookNameError
from .models import HooksConfig, ValidationReport


# Ordem segue a documentação do githooks(5)
GIT_HOOKS: Tuple[str, ...] = (
    "applypatch-msg",
    "pre-applypatch",
    "post-applypatch",
    "pre-commit",
    "pre-merge-commit",
    "prepare-commit-msg",
    "commit-msg",
    "post-commit",
    "pre-rebase",
    "post-checkout",
    "post-merge",
    "pre-push",
    "pre-receive",
    "update",
    "proc-receive",
    "post-receive",
    "post-update",
    "reference-transaction",
    "push-to-checkout",
    "pre-auto-gc",
    "post-rewrite",
    "sendemail-validate",
    "fsmonitor-watchman",
    "p4-changelist",
    "p4-prepare-changelist",
    "p4-post-changelist",
    "p4-pre-submit",
    "post-index-change",
)


class HookNameValidator:
    """
    Valida os nomes de hook de uma configuração.

    O conjunto de nomes conhecidos é injetado, permitindo testar com outros
    conjuntos (ex: versões futuras do git).
    """

    def __init__(self, known_hooks: Iterable[str] = GIT_HOOKS):
        self.known_hooks: Tuple[str, ...] = tuple(dict.fromkeys(known_hooks))

    def is_git_hook(self, hook_name: str) -> bool:
        return hook_name in self.known_hooks

    def validate(self, config: HooksConfig) -> ValidationReport:
        """
        Particiona todos os nomes da configuração em válidos e inválidos.

        Nunca interrompe no primeiro inválido: o relatório é sempre completo.
        """
        report = ValidationReport()

        for hook_name in config.hook_names:
            if self.is_git_hook(hook_name):
                report.valid_names.append(hook_name)
            else:
                report.invalid_names.append(hook_name)

        return report

    def validate_strict(self, config: HooksConfig) -> ValidationReport:
        """
        Igual a validate(), mas falha se houver qualquer nome inválido.

        Raises:
            InvalidHookNameError: Com todos os nomes não reconhecidos
        """
        report = self.validate(config)

        if not report.is_valid:
            raise InvalidHookNameError(
                report.invalid_names,
                suggestion=(
                    "Verifique seu arquivo de configuração e use apenas "
                    "nomes de hooks válidos do git."
                ),
            )

        return report


__all__ = [
    "GIT_HOOKS",
    "HookNameValidator",
]
