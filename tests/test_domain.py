"""Tests for domain entities and outcome variants."""

import unittest

from wish115.core.domain import (
    CampoAusente,
    Conta,
    ContaResult,
    Envelope,
    ExecucaoResult,
    FalhaDecodificacao,
    FalhaTransporte,
    ItemDesejo,
    PayloadNaoReconhecido,
    PayloadReconhecido,
    ProcessamentoDesejo,
    Rejeitado,
    Sucesso,
    interpretar_payload_ajuda,
    mascarar_cookie,
)


class OutcomeTests(unittest.TestCase):
    def test_only_success_is_ok(self) -> None:
        self.assertTrue(Sucesso("x").ok)
        for falha in (Rejeitado("m", 0, 1), FalhaTransporte("e"), FalhaDecodificacao("e"), CampoAusente("c")):
            with self.subTest(falha=falha):
                self.assertFalse(falha.ok)

    def test_rejection_description_has_state_and_code(self) -> None:
        self.assertIn("código: 1001", Rejeitado("limite", state=0, code=1001).descricao())


class WishEntitiesTests(unittest.TestCase):
    def test_envelope_success_rule(self) -> None:
        self.assertTrue(Envelope(state=1, code=0).sucesso)
        self.assertFalse(Envelope(state=1, code=5).sucesso)
        self.assertFalse(Envelope(state=0, code=0).sucesso)

    def test_item_pending_only_without_assists(self) -> None:
        self.assertTrue(ItemDesejo("X1", 0).pendente)
        self.assertFalse(ItemDesejo("X2", 2).pendente)

    def test_assist_payload_interpretation(self) -> None:
        self.assertEqual(interpretar_payload_ajuda({"aid_id": "A1"}), PayloadReconhecido("A1"))
        self.assertEqual(interpretar_payload_ajuda({"aid_id": ""}), PayloadReconhecido(None))
        self.assertEqual(interpretar_payload_ajuda({}), PayloadReconhecido(None))
        self.assertIsInstance(interpretar_payload_ajuda("texto"), PayloadNaoReconhecido)
        self.assertIsInstance(interpretar_payload_ajuda(None), PayloadNaoReconhecido)


class AccountTests(unittest.TestCase):
    def test_repr_never_shows_full_cookie(self) -> None:
        conta = Conta(wish_cookie="UID=123456789; CID=abcdef", aid_cookie="segredo", indice=1)
        self.assertNotIn("123456789", repr(conta))
        self.assertNotIn("segredo", repr(conta))
        self.assertEqual(conta.numero, 2)

    def test_mask(self) -> None:
        self.assertEqual(mascarar_cookie(""), "")
        self.assertEqual(mascarar_cookie("abc"), "***")
        self.assertTrue(mascarar_cookie("UID=123456789").startswith("UID=12"))


class ExecutionResultTests(unittest.TestCase):
    def test_aggregation(self) -> None:
        ok = ContaResult(indice=0, desejos=[ProcessamentoDesejo("X1", adotado=True), ProcessamentoDesejo("X2")])
        falha = ContaResult(indice=1, erro_fatal="boom")
        execucao = ExecucaoResult(total_contas=2)

        execucao.registrar(ok)
        execucao.registrar(falha)

        resumo = execucao.get_resumo()
        self.assertEqual((resumo["sucesso"], resumo["falha"], resumo["adotados"]), (1, 1, 1))
        self.assertEqual(resumo["taxa_sucesso"], "50.0%")
        self.assertEqual(resumo["resultados"][0]["pendentes"], 2)


if __name__ == "__main__":
    unittest.main()
