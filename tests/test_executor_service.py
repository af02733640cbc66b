"""Tests covering the sequential orchestration performed by :class:`ExecutorEmLote`."""

from __future__ import annotations

import unittest

from wish115.config.models import ExecutorConfig
from wish115.core.domain.accounts import Conta
from wish115.core.domain.execution import ContaResult
from wish115.core.domain.outcome import FalhaTransporte, Sucesso
from wish115.core.services.executor_service import ExecutorEmLote

from test_workflow_service import FakeClock, FakeGateway, FakeLogger


def contas(*wish_cookies: str) -> list[Conta]:
    return [Conta(wish_cookie=c, aid_cookie="aid-shared", indice=i) for i, c in enumerate(wish_cookies)]


class PerAccountGateway(FakeGateway):
    """Falha a criação apenas para os cookies indicados."""

    def __init__(self, eventos: list, falhar_criacao: set[str]) -> None:
        super().__init__(eventos)
        self.falhar_criacao = falhar_criacao

    def criar_desejo(self, wish_cookie, **contexto):
        self.eventos.append(("criar", wish_cookie))
        if wish_cookie in self.falhar_criacao:
            return FalhaTransporte("reset")
        return Sucesso(f"W-{wish_cookie}")


class ExecutorEmLoteTests(unittest.TestCase):
    def setUp(self) -> None:
        self.eventos: list = []
        self.clock = FakeClock(self.eventos)
        self.logger = FakeLogger()

    def make_executor(self, gateway, **kwargs) -> ExecutorEmLote:
        return ExecutorEmLote(gateway, self.clock, ExecutorConfig(), self.logger, **kwargs)

    def test_accounts_run_in_order_with_cooldown_between(self) -> None:
        gateway = FakeGateway(self.eventos)

        resultado = self.make_executor(gateway).executar(contas("A", "B", "C"))

        self.assertEqual(
            self.eventos,
            [
                ("criar", "A"), ("aguardar", 60), ("listar", "A"),
                ("aguardar", 30),
                ("criar", "B"), ("aguardar", 60), ("listar", "B"),
                ("aguardar", 30),
                ("criar", "C"), ("aguardar", 60), ("listar", "C"),
            ],
        )
        self.assertEqual(resultado.total_contas, 3)
        self.assertEqual(resultado.sucessos, 3)

    def test_single_account_has_no_cooldown(self) -> None:
        self.make_executor(FakeGateway(self.eventos)).executar(contas("A"))

        self.assertNotIn(("aguardar", 30), self.eventos)

    def test_second_account_wish_failure_does_not_abort(self) -> None:
        gateway = PerAccountGateway(self.eventos, falhar_criacao={"B"})

        resultado = self.make_executor(gateway).executar(contas("A", "B"))

        self.assertEqual(
            self.eventos,
            [
                ("criar", "A"), ("aguardar", 60), ("listar", "A"),
                ("aguardar", 30),
                ("criar", "B"), ("listar", "B"),
            ],
        )
        self.assertEqual([r.indice for r in resultado.detalhes], [0, 1])
        self.assertEqual(resultado.detalhes[0].id_desejo_criado, "W-A")
        self.assertIsNone(resultado.detalhes[1].id_desejo_criado)

    def test_unexpected_exception_is_isolated(self) -> None:
        chamadas: list[int] = []

        class Explode:
            def executar(self) -> ContaResult:
                raise RuntimeError("boom")

        class Normal:
            def __init__(self, conta: Conta) -> None:
                self.conta = conta

            def executar(self) -> ContaResult:
                return ContaResult(indice=self.conta.indice)

        def factory(conta: Conta):
            chamadas.append(conta.indice)
            return Explode() if conta.indice == 0 else Normal(conta)

        executor = self.make_executor(FakeGateway(self.eventos), fluxo_factory=factory)
        resultado = executor.executar(contas("A", "B"))

        self.assertEqual(chamadas, [0, 1])
        self.assertEqual(resultado.falhas, 1)
        self.assertEqual(resultado.sucessos, 1)
        self.assertEqual(resultado.detalhes[0].erro_fatal, "boom")
        self.assertEqual(self.clock.esperas, [30])

    def test_cooldown_log_states_the_real_delay(self) -> None:
        self.make_executor(FakeGateway(self.eventos)).executar(contas("A", "B"))

        mensagens = [m for _, m, _ in self.logger.registros]
        self.assertIn("Aguardando 30s antes da próxima conta...", mensagens)

    def test_empty_account_list(self) -> None:
        resultado = self.make_executor(FakeGateway(self.eventos)).executar([])

        self.assertEqual(resultado.total_contas, 0)
        self.assertEqual(self.eventos, [])

    def test_summary_counts_adoptions(self) -> None:
        gateway = FakeGateway(self.eventos)
        gateway.listar = Sucesso({"X1"})
        gateway.codigos = {"X1": Sucesso("C1")}
        gateway.ajudas = {"C1": Sucesso("A1")}

        resultado = self.make_executor(gateway).executar(contas("A", "B"))

        resumo = resultado.get_resumo()
        self.assertEqual(resumo["adotados"], 2)
        self.assertEqual(resumo["taxa_sucesso"], "100.0%")


if __name__ == "__main__":
    unittest.main()
