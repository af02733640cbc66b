"""
Sistema de logging do Wish115.

Expõe um logger global (``log``) e a função ``configurar_logging`` usada
na inicialização da CLI.
"""

from typing import Optional

from wish115.config.models import LoggerConfig
from .logger import ScopedLogger, WishLogger

# Singleton do logger principal
_logger_instance: Optional[WishLogger] = None


def get_logger() -> WishLogger:
    """Retorna a instância singleton do logger."""
    global _logger_instance
    if _logger_instance is None:
        _logger_instance = WishLogger()
    return _logger_instance


def configurar_logging(config: Optional[LoggerConfig] = None) -> WishLogger:
    """Configura o logger global e o retorna para encadeamento.

    Raises:
        LoggingException: Se o arquivo de log não puder ser aberto.
    """
    logger = get_logger()
    logger.configure(config or LoggerConfig())
    return logger


# Exporta a instância global
log = get_logger()

__all__ = [
    "LoggerConfig",
    "WishLogger",
    "ScopedLogger",
    "configurar_logging",
    "get_logger",
    "log",
]
