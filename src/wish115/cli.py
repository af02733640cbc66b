"""Ponto de entrada da Interface de Linha de Comando (CLI) do Wish115."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from wish115.config import get_config
from wish115.config.loader import ConfigLoader
from wish115.container import create_injector
from wish115.core.domain.accounts import mascarar_cookie
from wish115.core.exceptions import ConfigNotFoundException, ConfigurationException, LoggingException
from wish115.core.interfaces import AccountRepository
from wish115.core.services.executor_service import ExecutorEmLote
from wish115.infrastructure.logging import configurar_logging
from wish115.ui.console import get_console, print_error, print_info, print_success, print_warning
from wish115.ui.tables import show_accounts_table, show_execution_summary

# --- Configuração da Aplicação CLI ---
app = typer.Typer(
    name="wish115",
    help="Automação do evento de desejos do 115: desejar, ajudar e adotar.",
    add_completion=False,
    rich_markup_mode="rich",
)

console = get_console()

ConfigOption = Annotated[
    Optional[Path],
    typer.Option("--config", "-c", help="Caminho do arquivo de configuração (padrão: config.yaml)."),
]


def _carregar_config(config_path: Optional[Path]):
    """Carrega a configuração; qualquer problema encerra com código 1."""
    try:
        return get_config(reload=True, config_path=config_path)
    except ConfigNotFoundException as e:
        print_warning(f"Arquivo de configuração criado em {e.path}.")
        console.print("Preencha [b]aid_cookie[/b] e [b]wish_cookies[/b] e execute novamente.")
        raise typer.Exit(code=1)
    except ConfigurationException as e:
        print_error(f"Configuração inválida: {e}")
        raise typer.Exit(code=1)


# --- Comando Principal: run ---
@app.command(help="[bold green]Executa o ciclo completo para todas as contas.[/bold green]")
def run(
    config_path: ConfigOption = None,
    debug: Annotated[
        bool,
        typer.Option("--debug", help="Ativa logs em nível DEBUG."),
    ] = False,
) -> None:
    app_config = _carregar_config(config_path)

    if debug:
        app_config.debug = True
        app_config.logging.nivel_minimo = "DEBUG"

    try:
        app_config.validar_credenciais()
    except ConfigurationException as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    try:
        logger = configurar_logging(app_config.logging)
    except LoggingException as e:
        print_error(f"Falha ao iniciar o log: {e}")
        raise typer.Exit(code=1)

    if logger.arquivo_atual is not None:
        logger.debug(f"Log em arquivo: {logger.arquivo_atual}")

    injector = create_injector(app_config)
    contas = injector.get(AccountRepository).listar()
    executor = injector.get(ExecutorEmLote)

    print_info(f"Iniciando execução para {len(contas)} conta(s)...")
    resultado = executor.executar(contas)

    show_execution_summary(resultado.get_resumo(), console=console)
    print_success("Execução concluída.")


@app.command("init-config", help="Gera o arquivo de configuração padrão.")
def init_config(
    config_path: ConfigOption = None,
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Sobrescreve o arquivo se ele já existir."),
    ] = False,
) -> None:
    try:
        caminho = ConfigLoader.create_default(config_path, sobrescrever=force)
    except ConfigurationException as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    print_success(f"Configuração criada em {caminho}")


@app.command("accounts", help="Lista as contas configuradas (cookies mascarados).")
def list_accounts(config_path: ConfigOption = None) -> None:
    app_config = _carregar_config(config_path)
    contas = create_injector(app_config).get(AccountRepository).listar()

    if not contas:
        print_warning("Nenhuma conta configurada.")
        return

    show_accounts_table(
        [
            {
                "numero": conta.numero,
                "wish_cookie": mascarar_cookie(conta.wish_cookie),
                "aid_cookie": mascarar_cookie(conta.aid_cookie),
            }
            for conta in contas
        ],
        console=console,
    )


@app.callback()
def main() -> None:
    """Carrega variáveis do ``.env`` antes de qualquer comando."""
    load_dotenv()


if __name__ == "__main__":
    app()
