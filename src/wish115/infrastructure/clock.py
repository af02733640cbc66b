"""
Implementações do ``Agendador`` usado pelo fluxo.

Toda espera da automação passa por aqui, para que os testes possam
trocar o relógio real por um que apenas registra os pedidos.
"""

from __future__ import annotations

import time
from typing import Any, Callable, Optional


class RelogioSistema:
    """Agendador real: bloqueia a thread com ``time.sleep``."""

    def __init__(self, logger: Optional[Any] = None, dormir: Callable[[float], None] = time.sleep) -> None:
        self._logger = logger
        self._dormir = dormir

    def aguardar(self, segundos: float, motivo: str) -> None:
        if segundos <= 0:
            return
        if self._logger is not None:
            self._logger.debug(f"Aguardando {segundos:g}s", motivo=motivo)
        self._dormir(segundos)
