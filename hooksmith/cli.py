"""
HOOKSMITH - Command Line Interface
Entry point principal para todos os comandos do hooksmith.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console

from hooksmith.__version__ import __version__
from hooksmith.core.config_loader import DEFAULT_CONFIG_FILE, load_config
from hooksmith.core.formatters import ConsoleReporter
from hooksmith.core.manager import HookLifecycleManager
from hooksmith.core.models import ExecutionMode
from hooksmith.core.scaffold import render_config
from hooksmith.core.validator import GIT_HOOKS, HookNameValidator
from hooksmith.errors import (
    HooksmithError,
    InvalidHookNameError,
    NoHooksSelectedError,
    format_list,
)
from hooksmith.hooks.install import INSTALLER_COMMAND_ENV
from hooksmith.logging import configure_logging
from hooksmith.wrappers.prompts import HookSelector, confirm_overwrite


# =============================================================================
# Typer App Setup
# =============================================================================

app = typer.Typer(
    name="hooksmith",
    help="🪝 HOOKSMITH - Git hooks a partir de um arquivo YAML",
    add_completion=False,
    no_args_is_help=True,
    # -h é usado pelo shim instalado para detectar o hooksmith
    context_settings={"help_option_names": ["-h", "--help"]},
)

console = Console()


@dataclass
class CliState:
    """Opções globais compartilhadas entre os comandos."""
    config_path: Path
    mode: ExecutionMode
    reporter: ConsoleReporter


# =============================================================================
# Global Options
# =============================================================================

def version_callback(value: bool):
    """Callback para --version."""
    if value:
        console.print(f"🪝 hooksmith version {__version__}", style="bold cyan")
        raise typer.Exit()


@app.callback()
def main_callback(
    ctx: typer.Context,
    config_path: Path = typer.Option(
        Path(DEFAULT_CONFIG_FILE),
        "--config-path",
        "-c",
        help="Caminho para o arquivo hooksmith.yaml"
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Modo verbose"
    ),
    dry_run: bool = typer.Option(
        False,
        "--dry-run",
        help="Simula a operação sem alterar arquivos nem executar comandos"
    ),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Mostra versão do hooksmith"
    ),
):
    """
    🪝 HOOKSMITH - Git hooks a partir de um arquivo YAML
    """
    configure_logging(verbose=verbose)

    ctx.obj = CliState(
        config_path=config_path,
        mode=ExecutionMode(dry_run=dry_run, verbose=verbose),
        reporter=ConsoleReporter(console, verbose=verbose),
    )


# =============================================================================
# Helpers
# =============================================================================

def _build_manager(state: CliState, installer_command: Optional[str] = None) -> HookLifecycleManager:
    """Carrega a configuração e cria o gerenciador."""
    config = load_config(state.config_path)

    if state.mode.dry_run:
        state.reporter.info("🔄 DRY RUN MODE - Nenhum comando será executado")
        state.reporter.info()

    return HookLifecycleManager(
        config,
        mode=state.mode,
        reporter=state.reporter,
        installer_command=installer_command,
    )


def _fail(state: CliState, error: HooksmithError):
    """Reporta o erro e encerra com o exit code correspondente."""
    state.reporter.report_exception(error)
    raise typer.Exit(error.exit_code)


# =============================================================================
# Command: install
# =============================================================================

@app.command()
def install(
    ctx: typer.Context,
    installer_command: Optional[str] = typer.Option(
        None,
        "--installer-command",
        envvar=INSTALLER_COMMAND_ENV,
        help="Comando usado pelo shim para instalar o hooksmith quando ausente"
    ),
):
    """
    🪝 Valida a configuração e instala todos os hooks

    Exemplos:

    \b
    hooksmith install
    hooksmith --dry-run install
    hooksmith install --installer-command "pipx install hooksmith"
    """
    state: CliState = ctx.obj

    try:
        manager = _build_manager(state, installer_command)
        manager.install_all()
    except HooksmithError as e:
        _fail(state, e)


# =============================================================================
# Command: run
# =============================================================================

@app.command()
def run(
    ctx: typer.Context,
    hook_names: Optional[List[str]] = typer.Argument(
        None,
        help="Hooks a executar"
    ),
    interactive: bool = typer.Option(
        False,
        "--interactive",
        "-i",
        help="Seleciona os hooks interativamente"
    ),
):
    """
    ▶️ Executa os comandos de um ou mais hooks

    Exemplos:

    \b
    hooksmith run pre-commit
    hooksmith run pre-commit pre-push
    hooksmith run --interactive
    """
    state: CliState = ctx.obj

    if bool(hook_names) == interactive:
        state.reporter.error(
            "Uso inválido",
            "Informe os nomes dos hooks ou use --interactive (-i), não ambos.",
        )
        raise typer.Exit(1)

    try:
        manager = _build_manager(state)

        if interactive:
            selected = HookSelector(console).select(
                manager.available_hooks(),
                prompt="Selecione os hooks para executar",
            )
        else:
            selected = hook_names

        manager.run_many(selected)
    except HooksmithError as e:
        _fail(state, e)


# =============================================================================
# Command: uninstall
# =============================================================================

@app.command()
def uninstall(
    ctx: typer.Context,
    hook_name: Optional[str] = typer.Argument(
        None,
        help="Hook a remover (default: todos os hooks configurados)"
    ),
):
    """
    🗑️ Remove hooks instalados

    Exemplos:

    \b
    hooksmith uninstall
    hooksmith uninstall pre-commit
    """
    state: CliState = ctx.obj

    try:
        manager = _build_manager(state)

        if hook_name:
            manager.uninstall_one(hook_name)
        else:
            manager.uninstall_all()
    except HooksmithError as e:
        _fail(state, e)


# =============================================================================
# Command: compare
# =============================================================================

@app.command()
def compare(ctx: typer.Context):
    """
    📊 Compara os hooks instalados com a configuração
    """
    state: CliState = ctx.obj

    try:
        manager = _build_manager(state)
        manager.compare()
    except HooksmithError as e:
        _fail(state, e)


# =============================================================================
# Command: validate
# =============================================================================

@app.command()
def validate(ctx: typer.Context):
    """
    ✅ Valida os nomes de hooks contra os hooks padrão do git
    """
    state: CliState = ctx.obj

    try:
        manager = _build_manager(state)
        manager.validate()
    except HooksmithError as e:
        _fail(state, e)


# =============================================================================
# Command: init
# =============================================================================

@app.command()
def init(
    ctx: typer.Context,
    hooks: Optional[List[str]] = typer.Option(
        None,
        "--hook",
        help="Hook a incluir (pode repetir). Sem --hook, a seleção é interativa."
    ),
):
    """
    🚀 Cria um arquivo de configuração inicial

    Exemplos:

    \b
    hooksmith init
    hooksmith init --hook pre-commit --hook pre-push
    """
    state: CliState = ctx.obj
    config_path = state.config_path
    reporter = state.reporter

    if state.mode.dry_run:
        reporter.info("🔄 DRY RUN MODE - Nenhum arquivo será criado")
        reporter.info()

    reporter.detail("🚀 Inicializando configuração do hooksmith...")

    try:
        if hooks:
            selected = list(dict.fromkeys(hooks))
            validator = HookNameValidator()
            unknown = [name for name in selected if not validator.is_git_hook(name)]
            if unknown:
                raise InvalidHookNameError(
                    unknown,
                    suggestion=f"Hooks válidos do git:\n{format_list(GIT_HOOKS)}",
                )

        if config_path.exists() and not state.mode.dry_run:
            if not confirm_overwrite(config_path, console):
                reporter.info("❌ Inicialização cancelada")
                return

        if not hooks:
            try:
                selected = HookSelector(console).select(
                    list(GIT_HOOKS),
                    prompt="Selecione os hooks para configurar",
                )
            except NoHooksSelectedError:
                reporter.warning("Nenhum hook selecionado. Arquivo de configuração não criado.")
                return

        reporter.detail(f"📝 Hooks selecionados: {', '.join(selected)}")

        content = render_config(selected)

        if state.mode.dry_run:
            reporter.info(f"🔍 Criaria o arquivo '{config_path}' com o conteúdo:")
            reporter.info(content)
            return

        try:
            config_path.write_text(content, encoding="utf-8")
        except OSError as e:
            reporter.error("Falha ao escrever configuração", f"{config_path}: {e}")
            raise typer.Exit(1)

        reporter.success(f"Arquivo de configuração '{config_path}' criado!")
        reporter.info("📝 Edite o arquivo para personalizar os comandos dos hooks.")
        reporter.info("🚀 Rode 'hooksmith install' para instalar os hooks configurados.")
    except HooksmithError as e:
        _fail(state, e)


# =============================================================================
# Main Entry Point
# =============================================================================

def main():
    """Entry point principal."""
    app()


if __name__ == "__main__":
    main()
