"""
HOOKSMITH - Hook Lifecycle Manager
Reconcilia a configuração declarada com o diretório de hooks do git.

Responsabilidades:
- Instalar shims (install_all / install_one)
- Executar os comandos de um hook (run / run_many)
- Remover shims (uninstall_one / uninstall_all)
- Comparar configuração e diretório (compare)
- Relatório de validação (validate)

Nenhuma operação encerra o processo: falhas sobem como HooksmithError até o
CLI, que decide o exit code.
"""

from pathlib import Path
from typing import Iterable, List, Optional

from ..errors import (
    CommandFailedError,
    HookNotFoundError,
    InvalidHookNameError,
    NoHooksSelectedError,
)
from ..hooks.install import (
    ensure_directory,
    list_installed_hooks,
    remove_hook_file,
    render_hook_script,
    resolve_installer_command,
    write_hook_file,
)
from ..logging import get_logger
from ..scanners.git_hooks import GitHooksLocator
from ..wrappers.shell_exec import ShellRunner
from .formatters import ConsoleReporter
from .models import (
    CompareReport,
    ExecutionMode,
    HookRunResult,
    HooksConfig,
    ValidationReport,
)
from .validator import HookNameValidator


logger = get_logger(__name__)


class HookLifecycleManager:
    """
    Gerenciador do ciclo de vida dos hooks.

    O estado (configuração e modo) é fixo após a construção; toda mutação
    acontece no sistema de arquivos.
    """

    def __init__(
        self,
        config: HooksConfig,
        mode: Optional[ExecutionMode] = None,
        locator: Optional[GitHooksLocator] = None,
        validator: Optional[HookNameValidator] = None,
        runner: Optional[ShellRunner] = None,
        reporter: Optional[ConsoleReporter] = None,
        installer_command: Optional[str] = None,
    ):
        """
        Args:
            config: Configuração carregada
            mode: dry_run / verbose
            locator: Resolve o diretório de hooks
            validator: Valida nomes de hooks
            runner: Executa comandos no shell
            reporter: Renderiza mensagens
            installer_command: Comando de instalação usado no fallback do shim
        """
        self.config = config
        self.mode = mode or ExecutionMode()
        self.locator = locator or GitHooksLocator()
        self.validator = validator or HookNameValidator()
        self.runner = runner or ShellRunner()
        self.reporter = reporter or ConsoleReporter(verbose=self.mode.verbose)
        self.installer_command = resolve_installer_command(installer_command)

    @property
    def dry_run(self) -> bool:
        return self.mode.dry_run

    @property
    def verbose(self) -> bool:
        return self.mode.verbose

    def available_hooks(self) -> List[str]:
        """Hooks definidos na configuração."""
        return self.config.hook_names

    # =========================================================================
    # Install
    # =========================================================================

    def install_all(self) -> List[Path]:
        """
        Valida a configuração e instala todos os hooks.

        Returns:
            Caminhos dos hooks instalados (ou que seriam, em dry run)

        Raises:
            InvalidHookNameError: Antes de qualquer escrita, se houver nomes inválidos
        """
        self.reporter.detail("🔍 Validando hooks antes da instalação...")
        self.validator.validate_strict(self.config)

        hooks_path = self.locator.resolve_hooks_path()
        self._ensure_hooks_directory(hooks_path)

        self.reporter.detail("🪝 Instalando hooks...")

        installed = [self.install_one(hook_name) for hook_name in self.config.hook_names]

        if not self.dry_run:
            self.reporter.success(f"{len(installed)} hooks instalados")

        return installed

    def install_one(self, hook_name: str) -> Path:
        """
        Instala o shim de um hook, esteja ele na configuração ou não.

        Reinstalar gera exatamente o mesmo conteúdo.

        Returns:
            Caminho do arquivo de hook
        """
        if not self.dry_run:
            self.reporter.detail(f"🪝 Instalando hook {hook_name}...")

        hooks_path = self.locator.resolve_hooks_path()
        self._ensure_hooks_directory(hooks_path)

        hook_path = hooks_path / hook_name
        content = render_hook_script(hook_name, self.installer_command)

        if self.dry_run:
            self.reporter.info(
                f"🪝 Dry run: instalação do hook {hook_name} ignorada ({hook_path})"
            )
            return hook_path

        self.reporter.detail(f"  - Escrevendo {hook_path}...")
        if write_hook_file(hook_path, content):
            self.reporter.detail("  - Permissões ajustadas (755)")

        self.reporter.detail(f"  ✅ Hook {hook_name} instalado")

        return hook_path

    def _ensure_hooks_directory(self, hooks_path: Path) -> None:
        if hooks_path.is_dir():
            return

        if self.dry_run:
            self.reporter.info(
                f"🪝 Dry run: criação do diretório de hooks ignorada ({hooks_path})"
            )
            return

        self.reporter.detail(f"  - Criando diretório de hooks {hooks_path}...")
        ensure_directory(hooks_path)

    # =========================================================================
    # Run
    # =========================================================================

    def run(self, hook_name: str) -> HookRunResult:
        """
        Executa os comandos de um hook na ordem declarada.

        Para no primeiro comando que falhar. Em dry run nenhum comando é
        executado: cada passo é apenas anunciado e o resultado é sucesso.

        Raises:
            HookNotFoundError: Se o hook não estiver na configuração
            CommandFailedError: Com o exit code do comando que falhou
            CommandSpawnError: Se o shell não puder ser iniciado
        """
        hook = self.config.get_hook(hook_name)
        if hook is None:
            raise HookNotFoundError(hook_name, self.available_hooks())

        total = len(hook.commands)

        if self.dry_run:
            cwd = Path.cwd()
            for idx, command in enumerate(hook.commands, start=1):
                self._announce_step(idx, total, command, cwd)
            self.reporter.info(
                f"🏁 Dry run concluído. {total} comandos seriam executados"
            )
            return HookRunResult(hook_name=hook_name, total=total, executed=0, dry_run=True)

        self.reporter.detail(f"📋 Executando hook: {hook_name}")

        executed = 0
        for command in hook.commands:
            self.reporter.detail(f"  - Executando comando: {command}")

            executed += 1
            exit_code = self.runner.run(command)

            if exit_code != 0:
                logger.debug("Hook %s interrompido no comando %d/%d", hook_name, executed, total)
                raise CommandFailedError(hook_name, command, exit_code)

            self.reporter.detail("  ✅ Comando concluído com sucesso")

        return HookRunResult(hook_name=hook_name, total=total, executed=executed)

    def run_many(self, hook_names: Iterable[str]) -> List[HookRunResult]:
        """
        Executa vários hooks. Nomes repetidos rodam uma única vez.

        A primeira falha interrompe os hooks restantes.
        """
        unique_names = list(dict.fromkeys(hook_names))

        if not unique_names:
            raise NoHooksSelectedError("Nenhum hook especificado")

        return [self.run(hook_name) for hook_name in unique_names]

    def _announce_step(self, idx: int, total: int, command: str, cwd: Path) -> None:
        self.reporter.info(f"Passo {idx} de {total}:")
        self.reporter.info(f"  Comando: {command}")
        self.reporter.info(f"  Diretório de trabalho: {cwd}")
        self.reporter.info()

    # =========================================================================
    # Uninstall
    # =========================================================================

    def uninstall_one(self, hook_name: str) -> bool:
        """
        Remove o arquivo de um hook configurado.

        Returns:
            True se havia arquivo (removido, ou que seria removido em dry run)

        Raises:
            InvalidHookNameError: Se o hook não estiver na configuração
        """
        if hook_name not in self.config:
            raise InvalidHookNameError(
                [hook_name],
                reason="Hook não definido na configuração",
                suggestion=(
                    f"Hooks possíveis:\n{self.reporter.format_list(self.available_hooks())}"
                ),
            )

        if not self.dry_run:
            self.reporter.detail(f"🗑️  Removendo hook: {hook_name}")

        hook_path = self.locator.resolve_hooks_path() / hook_name

        if not hook_path.is_file():
            self.reporter.warning(f"Nenhum arquivo de hook encontrado para {hook_name}")
            return False

        if self.dry_run:
            self.reporter.info(f"  🚧 Dry run: removeria o arquivo {hook_path}")
            return True

        remove_hook_file(hook_path)
        return True

    def uninstall_all(self) -> int:
        """
        Remove todos os hooks configurados. Para no primeiro erro.

        Returns:
            Quantidade de arquivos removidos
        """
        if not self.dry_run:
            self.reporter.detail("🗑️  Removendo todos os hooks")

        removed = sum(1 for hook_name in self.config.hook_names if self.uninstall_one(hook_name))

        if not self.dry_run:
            self.reporter.detail(f"🏁 Remoção concluída: {removed} hooks removidos")

        return removed

    # =========================================================================
    # Compare / Validate
    # =========================================================================

    def compare(self) -> CompareReport:
        """
        Compara a configuração com os arquivos do diretório de hooks.

        Somente leitura; dry run não muda nada aqui.
        """
        self.reporter.detail("🔍 Comparando hooks instalados com a configuração...")

        hooks_path = self.locator.resolve_hooks_path()
        installed = list_installed_hooks(hooks_path)
        configured = self.config.hook_names

        report = CompareReport(
            missing=[name for name in configured if name not in installed],
            extra=[name for name in installed if name not in self.config],
        )

        if report.in_sync:
            self.reporter.success("Todos os hooks correspondem à configuração")
            return report

        self.reporter.info("❌ Diferenças encontradas:")
        for hook_name in report.missing:
            self.reporter.info(f"  - Hook '{hook_name}' está na configuração mas não está instalado")
        for hook_name in report.extra:
            self.reporter.info(f"  - Hook '{hook_name}' está instalado mas não está na configuração")

        return report

    def validate(self) -> ValidationReport:
        """Relatório de nomes reconhecidos / não reconhecidos. Nunca falha."""
        self.reporter.detail("🔍 Validando hooks do arquivo de configuração...")

        report = self.validator.validate(self.config)

        for hook_name in report.valid_names:
            self.reporter.detail(f"  ✅ Hook '{hook_name}' é válido")

        if report.is_valid:
            self.reporter.success(
                "Todos os hooks são válidos",
                f"{report.valid_count} hooks do git encontrados na configuração.",
            )
        else:
            self.reporter.warning(
                "Hooks inválidos detectados",
                "Os hooks a seguir não são reconhecidos pelo git:\n"
                f"{self.reporter.format_list(report.invalid_names)}\n\n"
                "Use apenas nomes de hooks válidos do git na configuração.",
            )

        return report


__all__ = [
    "HookLifecycleManager",
]
