"""Tests for the dependency container wiring."""

import unittest

from wish115.adapters.api.wish_api import WishAPI
from wish115.config.models import AppConfig
from wish115.container import create_injector
from wish115.core.interfaces import AccountRepository, Agendador, WishGateway
from wish115.core.services.executor_service import ExecutorEmLote


class ContainerTests(unittest.TestCase):
    def test_gateway_is_shared_singleton(self) -> None:
        injector = create_injector(AppConfig(aid_cookie="aid", wish_cookies=["w1"]), transporte=lambda data: None)

        gateway = injector.get(WishGateway)
        executor = injector.get(ExecutorEmLote)

        self.assertIsInstance(gateway, WishAPI)
        self.assertIs(gateway, injector.get(WishGateway))
        self.assertIs(executor.gateway, gateway)
        self.assertIs(executor.agendador, injector.get(Agendador))

    def test_repository_builds_accounts_from_config(self) -> None:
        config = AppConfig(aid_cookie="aid", wish_cookies=["w1", "w2"])

        contas = create_injector(config).get(AccountRepository).listar()

        self.assertEqual([(c.indice, c.wish_cookie, c.aid_cookie) for c in contas], [(0, "w1", "aid"), (1, "w2", "aid")])

    def test_unknown_binding(self) -> None:
        with self.assertRaises(KeyError):
            create_injector(AppConfig()).get(str)

    def test_bind_instance_overrides_default(self) -> None:
        injector = create_injector(AppConfig())
        relogio = object()
        injector.bind_instance(Agendador, relogio)

        self.assertIs(injector.get(Agendador), relogio)


if __name__ == "__main__":
    unittest.main()
