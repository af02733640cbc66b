"""
Entidades relacionadas a contas.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Conta:
    """Par de credenciais de uma conta (Imutável durante a execução)."""

    wish_cookie: str
    aid_cookie: str
    indice: int = 0

    @property
    def numero(self) -> int:
        """Ordinal exibido nos logs (começa em 1)."""
        return self.indice + 1

    def __repr__(self) -> str:
        # Cookies nunca aparecem em logs ou tracebacks
        return f"Conta(indice={self.indice}, wish_cookie={mascarar_cookie(self.wish_cookie)!r})"


def mascarar_cookie(cookie: str, visiveis: int = 6) -> str:
    """Oculta o valor de um cookie, mantendo só o início para identificação."""
    if not cookie:
        return ""
    if len(cookie) <= visiveis:
        return "*" * len(cookie)
    return cookie[:visiveis] + "…" + f"({len(cookie)} chars)"
