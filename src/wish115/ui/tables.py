"""
Componentes de Tabela para a UI.
"""

from typing import Any, Dict, List, Optional

from rich import box
from rich.console import Console
from rich.table import Table

from wish115.ui.console import get_console


def create_table(title: str, columns: List[str]) -> Table:
    """Cria uma tabela padronizada."""
    table = Table(title=title, box=box.ROUNDED, header_style="bold cyan")
    for col in columns:
        table.add_column(col)
    return table


def show_execution_summary(stats: Dict[str, Any], console: Optional[Console] = None) -> None:
    """Exibe o resumo de execução e o detalhe por conta."""
    console = console or get_console()

    table = create_table("📋 Resumo da Execução", ["Métrica", "Valor"])
    table.add_row("Contas", str(stats.get("total", 0)))
    table.add_row("Concluídas", f"[green]{stats.get('sucesso', 0)}[/green]")
    table.add_row("Com erro fatal", f"[red]{stats.get('falha', 0)}[/red]")
    table.add_row("Ajudas adotadas", f"[yellow]{stats.get('adotados', 0)}[/yellow]")

    console.print("\n")
    console.print(table)

    resultados = stats.get("resultados") or []
    if not resultados:
        return

    detalhe = create_table("Contas", ["Conta", "Desejo criado", "Pendentes", "Adotados", "Erro"])
    for r in resultados:
        erro = r.get("erro_fatal") or "-"
        criado = r.get("desejo_criado") or ("sem id" if r.get("desejo_aceito") else "[red]não[/red]")
        detalhe.add_row(
            str(r["conta"]),
            criado,
            str(r.get("pendentes", 0)),
            str(r.get("adotados", 0)),
            str(erro),
        )
    console.print(detalhe)


def show_accounts_table(accounts: List[Dict[str, Any]], console: Optional[Console] = None) -> None:
    """Exibe lista de contas."""
    table = create_table("Contas Carregadas", ["#", "Cookie de desejo", "Cookie de ajuda"])
    for acc in accounts:
        table.add_row(str(acc["numero"]), acc["wish_cookie"], acc["aid_cookie"])
    (console or get_console()).print(table)
