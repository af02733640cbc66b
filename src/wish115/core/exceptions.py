"""Sistema centralizado de exceções customizadas do Wish115."""

from __future__ import annotations

from typing import Any, Optional, Type


class Wish115Exception(Exception):
    """Exceção base para todas as exceções customizadas do Wish115."""

    def __init__(self, message: str, *, details: Optional[dict[str, Any]] = None, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.cause = cause

    def __str__(self) -> str:
        base = self.message
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            base = f"{base} ({details_str})"
        if self.cause:
            base = f"{base} | Causa: {self.cause}"
        return base

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message={self.message!r}, details={self.details!r})"


# ==================== Exceções de Rede ====================

class NetworkException(Wish115Exception):
    """Exceção base para erros relacionados à rede."""
    pass


class RequestException(NetworkException):
    """Erro em requisição HTTP (conexão, DNS, status >= 400)."""
    pass


class RequestTimeoutException(RequestException):
    """Timeout em requisição HTTP."""
    pass


# ==================== Exceções de API ====================

class APIException(Wish115Exception):
    """Exceção base para erros de API."""
    pass


class InvalidAPIResponseException(APIException):
    """Resposta de API com formato inesperado."""
    pass


# ==================== Exceções de Parsing ====================

class ParsingException(Wish115Exception):
    """Exceção base para erros de parsing."""
    pass


class JSONParsingException(ParsingException):
    """Corpo da resposta não é um JSON válido."""
    pass


# ==================== Exceções de Configuração ====================

class ConfigurationException(Wish115Exception):
    """Exceção base para erros de configuração."""
    pass


class ConfigNotFoundException(ConfigurationException):
    """Arquivo de configuração inexistente (um padrão foi criado no lugar)."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(
            f"Arquivo de configuração não encontrado; um modelo foi criado em {path}",
            details={"path": path},
        )


class MissingCredentialsException(ConfigurationException):
    """Nenhuma conta ou cookie de ajuda configurado."""
    pass


# ==================== Exceções de Logging ====================

class LoggingException(Wish115Exception):
    """Falha ao inicializar o destino dos logs (ex.: diretório sem permissão)."""
    pass


# ==================== Helpers ====================

def wrap_exception(
    exc: BaseException,
    exception_class: Type[Wish115Exception],
    message: str,
    **details: Any,
) -> Wish115Exception:
    """
    Envolve uma exceção genérica em uma exceção do domínio.

    Args:
        exc: Exceção original
        exception_class: Classe de destino
        message: Mensagem descritiva
        **details: Detalhes adicionais

    Returns:
        Wish115Exception: Exceção convertida (use com ``raise ... from exc``)
    """
    if isinstance(exc, exception_class):
        return exc
    return exception_class(message, details=details or None, cause=exc)


__all__ = [
    "Wish115Exception",
    "NetworkException",
    "RequestException",
    "RequestTimeoutException",
    "APIException",
    "InvalidAPIResponseException",
    "ParsingException",
    "JSONParsingException",
    "ConfigurationException",
    "ConfigNotFoundException",
    "MissingCredentialsException",
    "LoggingException",
    "wrap_exception",
]
