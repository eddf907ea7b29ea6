"""
HOOKSMITH - Output Formatters
Formatação das mensagens de sucesso, aviso e erro para o terminal.
"""

from typing import Iterable, Optional

from rich.console import Console

from ..errors import HooksmithError, format_list


class ConsoleReporter:
    """
    Renderiza mensagens legíveis para humanos via rich.

    Textos dinâmicos (comandos, caminhos) são impressos sem markup, para que
    algo como `[ -f x ]` apareça literalmente.
    """

    def __init__(self, console: Optional[Console] = None, verbose: bool = False):
        """
        Args:
            console: Console rich (default: stdout)
            verbose: Se True, imprime as mensagens de detalhe
        """
        self.console = console or Console()
        self.verbose = verbose

    def _print(self, text: str = "", style: Optional[str] = None) -> None:
        self.console.print(
            text,
            style=style,
            markup=False,
            emoji=False,
            highlight=False,
            soft_wrap=True,
        )

    def info(self, message: str = "") -> None:
        """Mensagem sempre exibida."""
        self._print(message)

    def detail(self, message: str) -> None:
        """Mensagem exibida apenas no modo verbose."""
        if self.verbose:
            self._print(message, style="dim")

    def success(self, title: str, details: str = "") -> None:
        self._print(f"✅ {title}", style="bold green")
        if details:
            self._print()
            self._print(details)

    def warning(self, title: str, details: str = "") -> None:
        self._print(f"⚠️  {title}", style="bold yellow")
        if details:
            self._print()
            self._print(details)

    def error(self, title: str, details: str = "", suggestion: str = "") -> None:
        self._print(f"❌ ERRO: {title}", style="bold red")
        if details:
            self._print()
            self._print(details)
        if suggestion:
            self._print()
            self._print(suggestion)

    def report_exception(self, error: HooksmithError) -> None:
        """Renderiza uma exceção do hooksmith (título, detalhes, sugestão)."""
        self.error(error.title, str(error), error.suggestion)

    @staticmethod
    def format_list(items: Iterable[str]) -> str:
        return format_list(items)


__all__ = [
    "ConsoleReporter",
]
