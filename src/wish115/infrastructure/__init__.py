"""
Infrastructure Module

Contains:
- logging: Logging system (rich console + arquivo diário)
- clock: Agendador real das esperas do fluxo
"""

from wish115.infrastructure.logging import get_logger, configurar_logging
from wish115.infrastructure.clock import RelogioSistema

__all__ = [
    "get_logger",
    "configurar_logging",
    "RelogioSistema",
]
