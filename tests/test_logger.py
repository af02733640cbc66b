"""Tests for :class:`WishLogger` console and file output."""

from __future__ import annotations

import io
import tempfile
import unittest
from pathlib import Path

from rich.console import Console

from wish115.config.models import LoggerConfig
from wish115.core.exceptions import LoggingException
from wish115.infrastructure.logging.logger import WishLogger


class WishLoggerTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp = Path(self._tmp.name)
        self.saida = io.StringIO()
        self.logger = WishLogger(console=Console(file=self.saida, no_color=True, width=200))

    def tearDown(self) -> None:
        self.logger.close()
        self._tmp.cleanup()

    def test_writes_daily_file_with_context(self) -> None:
        self.logger.configure(LoggerConfig(diretorio_logs=self.tmp / "logs"))

        self.logger.com_contexto(conta=2).sucesso("Desejo criado", desejo="W1")

        arquivo = self.logger.arquivo_atual
        self.assertIsNotNone(arquivo)
        self.assertTrue(arquivo.name.startswith("wish115_"))
        linha = arquivo.read_text(encoding="utf-8").strip()
        self.assertIn("SUCESSO | Desejo criado", linha)
        self.assertIn("contexto=conta=2", linha)
        self.assertIn("dados=desejo=W1", linha)
        self.assertIn("Desejo criado", self.saida.getvalue())

    def test_level_filtering(self) -> None:
        self.logger.configure(LoggerConfig(nivel_minimo="WARNING", salvar_arquivo=False))

        self.logger.info("invisivel")
        self.logger.aviso("visivel")

        texto = self.saida.getvalue()
        self.assertNotIn("invisivel", texto)
        self.assertIn("visivel", texto)

    def test_debug_level_shows_debug_messages(self) -> None:
        self.logger.configure(LoggerConfig(nivel_minimo="DEBUG", salvar_arquivo=False))

        self.logger.debug("detalhe")

        self.assertIn("detalhe", self.saida.getvalue())

    def test_unwritable_log_path_is_fatal(self) -> None:
        bloqueio = self.tmp / "arquivo"
        bloqueio.write_text("x", encoding="utf-8")

        with self.assertRaises(LoggingException):
            self.logger.configure(LoggerConfig(diretorio_logs=bloqueio / "sub"))

    def test_etapa_logs_failure_and_reraises(self) -> None:
        self.logger.configure(LoggerConfig(salvar_arquivo=False))

        with self.assertRaises(ValueError):
            with self.logger.etapa("descoberta"):
                raise ValueError("x")

        self.assertIn("Falha na etapa: descoberta", self.saida.getvalue())


if __name__ == "__main__":
    unittest.main()
