"""Container de injeção de dependências inspirado em Ninject."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Type, TypeVar

from wish115.adapters.api.base_api import Transporte
from wish115.adapters.api.wish_api import WishAPI
from wish115.adapters.repositories.config_account_repository import ConfigContaRepository
from wish115.config.models import AppConfig
from wish115.core.interfaces import AccountRepository, Agendador, LoggingService, WishGateway
from wish115.core.services.executor_service import ExecutorEmLote
from wish115.infrastructure.clock import RelogioSistema
from wish115.infrastructure.logging import get_logger


_T = TypeVar("_T")


@dataclass
class _Binding:
    factory: Callable[["SimpleInjector"], Any]
    instance: Any = None
    has_instance: bool = False


class SimpleInjector:
    """Container leve que oferece API similar ao Injector/Ninject."""

    def __init__(self, config: AppConfig, transporte: Optional[Transporte] = None) -> None:
        self._bindings: Dict[Any, _Binding] = {}
        self._config = config
        self._transporte = transporte
        self._registrar_bindings_padrao()

    def _registrar_bindings_padrao(self) -> None:
        self.bind_instance(AppConfig, self._config)
        self.bind_singleton(LoggingService, lambda inj: get_logger())
        self.bind_singleton(Agendador, lambda inj: RelogioSistema(logger=inj.get(LoggingService)))

        # Um único gateway (e transporte) para todas as contas da execução
        self.bind_singleton(
            WishGateway,
            lambda inj: WishAPI(
                config=inj.get(AppConfig).api,
                logger=inj.get(LoggingService),
                transporte=self._transporte,
            ),
        )
        self.bind_singleton(
            AccountRepository,
            lambda inj: ConfigContaRepository(inj.get(AppConfig), logger=inj.get(LoggingService)),
        )
        self.bind_singleton(
            ExecutorEmLote,
            lambda inj: ExecutorEmLote(
                gateway=inj.get(WishGateway),
                agendador=inj.get(Agendador),
                config=inj.get(AppConfig).executor,
                logger=inj.get(LoggingService),
            ),
        )

    def bind_instance(self, chave: Type[_T], instancia: _T) -> None:
        self._bindings[chave] = _Binding(factory=lambda _: instancia, instance=instancia, has_instance=True)

    def bind_singleton(self, chave: Type[_T], fabrica: Callable[["SimpleInjector"], _T]) -> None:
        self._bindings[chave] = _Binding(factory=fabrica)

    def get(self, chave: Type[_T]) -> _T:
        if chave not in self._bindings:
            raise KeyError(f"Nenhum binding registrado para {chave!r}")
        binding = self._bindings[chave]
        if not binding.has_instance:
            binding.instance = binding.factory(self)
            binding.has_instance = True
        return binding.instance


def create_injector(config: AppConfig, transporte: Optional[Transporte] = None) -> SimpleInjector:
    """Cria o container padrão da aplicação."""
    return SimpleInjector(config, transporte=transporte)


__all__ = ["SimpleInjector", "create_injector"]
