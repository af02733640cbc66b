"""Repositórios de dados."""

from wish115.adapters.repositories.config_account_repository import ConfigContaRepository

__all__ = ["ConfigContaRepository"]
