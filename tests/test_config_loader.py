"""Tests for configuration loading, env overrides and default file creation."""

from __future__ import annotations

import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

import yaml

from wish115.config.loader import ConfigLoader, ConfigLoaderException
from wish115.config.models import AppConfig, ExecutorConfig, LoggerConfig
from wish115.core.exceptions import ConfigNotFoundException, MissingCredentialsException
from wish115.config.validators import ValidationException


class ConfigLoaderTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp = Path(self._tmp.name)
        self.path = self.tmp / "config.yaml"
        env = {k: v for k, v in os.environ.items() if not k.startswith("WISH115_")}
        self._env = mock.patch.dict(os.environ, env, clear=True)
        self._env.start()

    def tearDown(self) -> None:
        self._env.stop()
        self._tmp.cleanup()

    def write(self, data) -> None:
        self.path.write_text(yaml.safe_dump(data), encoding="utf-8")

    def test_missing_file_creates_default_and_raises(self) -> None:
        with self.assertRaises(ConfigNotFoundException) as ctx:
            ConfigLoader.load(self.path)

        self.assertEqual(ctx.exception.path, str(self.path))
        self.assertEqual(yaml.safe_load(self.path.read_text(encoding="utf-8")), AppConfig.dados_padrao())

    def test_default_file_has_no_usable_credentials(self) -> None:
        ConfigLoader.create_default(self.path)
        config = ConfigLoader.load(self.path)

        self.assertEqual(config.wish_cookies, [])
        with self.assertRaises(MissingCredentialsException):
            config.validar_credenciais()

    def test_loads_cookies_in_declared_order(self) -> None:
        self.write({"aid_cookie": " aid=1 ", "wish_cookies": ["w=3", "", "w=1", "  "]})

        config = ConfigLoader.load(self.path)

        self.assertEqual(config.aid_cookie, "aid=1")
        self.assertEqual(config.wish_cookies, ["w=3", "w=1"])
        config.validar_credenciais()

    def test_missing_aid_cookie_is_rejected(self) -> None:
        self.write({"aid_cookie": "", "wish_cookies": ["w=1"]})

        with self.assertRaises(MissingCredentialsException):
            ConfigLoader.load(self.path).validar_credenciais()

    def test_env_overrides_file(self) -> None:
        self.write({"aid_cookie": "aid=file", "wish_cookies": ["w=file"]})
        overrides = {
            "WISH115_AID_COOKIE": "aid=env",
            "WISH115_WISH_COOKIES": "a=1; b=2 | c=3",
            "WISH115_DEBUG": "true",
        }

        with mock.patch.dict(os.environ, overrides):
            config = ConfigLoader.load(self.path)

        self.assertEqual(config.aid_cookie, "aid=env")
        self.assertEqual(config.wish_cookies, ["a=1; b=2", "c=3"])
        self.assertTrue(config.debug)
        self.assertEqual(config.logging.nivel_minimo, "DEBUG")

    def test_nested_sections(self) -> None:
        self.write({
            "aid_cookie": "aid=1",
            "wish_cookies": ["w=1"],
            "executor": {"atraso_entre_contas": 5, "atraso_moderacao": 1.5},
            "api": {"timeout": 10, "recompensa": 5},
            "logging": {"nivel_minimo": "warning", "salvar_arquivo": False},
        })

        config = ConfigLoader.load(self.path)

        self.assertEqual(config.executor.atraso_entre_contas, 5)
        self.assertEqual(config.executor.atraso_moderacao, 1.5)
        self.assertEqual(config.executor.atraso_entre_desejos, 60)
        self.assertEqual(config.api.timeout, 10)
        self.assertEqual(config.api.recompensa, "5")
        self.assertEqual(config.logging.nivel_minimo, "WARNING")
        self.assertIsNone(config.logging.caminho_arquivo())

    def test_invalid_yaml_shape(self) -> None:
        self.path.write_text("- apenas\n- uma lista\n", encoding="utf-8")

        with self.assertRaises(ConfigLoaderException):
            ConfigLoader.load(self.path)

    def test_negative_delay_is_rejected(self) -> None:
        self.write({"aid_cookie": "a", "wish_cookies": ["w"], "executor": {"atraso_entre_contas": -1}})

        with self.assertRaises(ValidationException):
            ConfigLoader.load(self.path)

    def test_create_default_refuses_to_overwrite(self) -> None:
        self.write({"aid_cookie": "keep"})

        with self.assertRaises(ConfigLoaderException):
            ConfigLoader.create_default(self.path)
        ConfigLoader.create_default(self.path, sobrescrever=True)
        self.assertEqual(yaml.safe_load(self.path.read_text(encoding="utf-8"))["aid_cookie"], "")


class ModelDefaultsTests(unittest.TestCase):
    def test_delay_defaults(self) -> None:
        config = ExecutorConfig()
        self.assertEqual(
            (
                config.atraso_moderacao,
                config.atraso_resfriamento_ajuda,
                config.atraso_antes_adocao,
                config.atraso_entre_desejos,
                config.atraso_entre_contas,
            ),
            (60, 10, 3, 60, 30),
        )

    def test_log_file_name(self) -> None:
        from datetime import date

        config = LoggerConfig()
        self.assertEqual(config.caminho_arquivo(date(2024, 12, 25)), Path("logs") / "wish115_2024-12-25.log")


if __name__ == "__main__":
    unittest.main()
