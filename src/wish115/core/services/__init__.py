"""Serviços do núcleo."""

from wish115.core.services.executor_service import ExecutorEmLote
from wish115.core.services.workflow_service import EstadoFluxo, FluxoConta

__all__ = ["EstadoFluxo", "ExecutorEmLote", "FluxoConta"]
