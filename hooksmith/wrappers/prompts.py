"""
HOOKSMITH - Prompts
Seleção interativa de hooks e confirmações do usuário.
"""

import re
from pathlib import Path
from typing import List, Optional, Sequence

from rich.console import Console
from rich.markup import escape
from rich.prompt import Confirm, Prompt
from rich.table import Table

from ..errors import NoHooksSelectedError


class HookSelector:
    """
    Seleção múltipla de hooks por número.

    O usuário digita os números separados por vírgula ou espaço
    (ex: `1, 3`). Entrada vazia cancela a seleção.
    """

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def select(self, hooks: Sequence[str], prompt: str = "Selecione os hooks") -> List[str]:
        """
        Pergunta quais hooks usar.

        Returns:
            Hooks selecionados, na ordem da lista apresentada

        Raises:
            NoHooksSelectedError: Se não houver hooks ou nada for selecionado
        """
        if not hooks:
            raise NoHooksSelectedError("Nenhum hook disponível na configuração")

        table = Table(show_header=True)
        table.add_column("#", style="cyan", justify="right")
        table.add_column("Hook")

        for idx, hook_name in enumerate(hooks, start=1):
            table.add_row(str(idx), escape(hook_name))

        self.console.print(table)

        while True:
            answer = Prompt.ask(
                f"{prompt} (números separados por vírgula, Enter para cancelar)",
                console=self.console,
                default="",
                show_default=False,
            )

            if not answer.strip():
                raise NoHooksSelectedError("Seleção cancelada")

            indexes = parse_selection(answer, len(hooks))
            if indexes is None:
                self.console.print(
                    f"❌ Seleção inválida: use números entre 1 e {len(hooks)}",
                    style="red",
                    markup=False,
                )
                continue

            return [hooks[i] for i in indexes]


def parse_selection(answer: str, total: int) -> Optional[List[int]]:
    """
    Converte "1, 3 2" em índices (base 0), ordenados e sem repetição.

    Returns:
        Lista de índices, ou None se algum token for inválido
    """
    indexes = set()

    for token in re.split(r"[,\s]+", answer.strip()):
        if not token:
            continue
        if not token.isdigit():
            return None
        number = int(token)
        if not 1 <= number <= total:
            return None
        indexes.add(number - 1)

    return sorted(indexes) or None


def confirm_overwrite(path: Path, console: Optional[Console] = None) -> bool:
    """Pergunta se um arquivo existente pode ser sobrescrito (default: não)."""
    return Confirm.ask(
        f"O arquivo '{escape(str(path))}' já existe. Sobrescrever?",
        console=console or Console(),
        default=False,
    )


__all__ = [
    "HookSelector",
    "parse_selection",
    "confirm_overwrite",
]
