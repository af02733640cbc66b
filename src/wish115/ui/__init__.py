"""Saída de terminal (Rich)."""

from wish115.ui.console import get_console, print_error, print_info, print_success, print_warning
from wish115.ui.tables import create_table, show_accounts_table, show_execution_summary

__all__ = [
    "get_console",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
    "create_table",
    "show_accounts_table",
    "show_execution_summary",
]
