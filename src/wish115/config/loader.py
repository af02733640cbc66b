"""
Carregador de configuração (Loader).

Responsável por ler o arquivo de configuração (YAML), criar o modelo
padrão na primeira execução e aplicar overrides via variáveis de ambiente,
retornando uma instância válida de AppConfig.
"""

import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from wish115.config.constants import COOKIE_LIST_SEPARATOR, DEFAULTS, ENV_PREFIX
from wish115.config.models import AppConfig
from wish115.core.exceptions import ConfigNotFoundException, ConfigurationException


class ConfigLoaderException(ConfigurationException):
    """Erro ao carregar configurações."""
    pass


class ConfigLoader:
    """Carregador de configurações."""

    DEFAULT_FILENAME = DEFAULTS["config_file"]

    @classmethod
    def resolve_path(cls, path: Optional[Path | str] = None) -> Path:
        return Path(path) if path else Path(cls.DEFAULT_FILENAME)

    @classmethod
    def load(cls, path: Optional[Path | str] = None, *, criar_se_ausente: bool = True) -> AppConfig:
        """
        Carrega a configuração completa.

        Ordem de precedência:
        1. Defaults do código
        2. Arquivo YAML
        3. Variáveis de Ambiente (WISH115_*)

        Args:
            path: Caminho opcional para o arquivo config.yaml
            criar_se_ausente: Gera o arquivo modelo quando ele não existe

        Returns:
            AppConfig: Configuração validada e carregada.

        Raises:
            ConfigNotFoundException: Arquivo ausente (o modelo acabou de ser criado).
            ConfigLoaderException: Se houver erro de parsing, IO ou validação.
        """
        config_path = cls.resolve_path(path)

        if not config_path.exists():
            if criar_se_ausente:
                cls.create_default(config_path)
                raise ConfigNotFoundException(str(config_path))
            file_data: Dict[str, Any] = {}
        else:
            file_data = cls._read_yaml(config_path)

        merged_data = cls._apply_env_overrides(file_data)

        try:
            return AppConfig.from_dict(merged_data)
        except ConfigurationException:
            raise
        except Exception as e:
            raise ConfigLoaderException(f"Erro ao validar configuração: {e}") from e

    @classmethod
    def create_default(cls, path: Optional[Path | str] = None, *, sobrescrever: bool = False) -> Path:
        """
        Escreve o arquivo de configuração padrão.

        Raises:
            ConfigLoaderException: Se o arquivo já existir (sem ``sobrescrever``) ou não puder ser escrito.
        """
        config_path = cls.resolve_path(path)
        if config_path.exists() and not sobrescrever:
            raise ConfigLoaderException(f"Arquivo {config_path} já existe", details={"path": str(config_path)})

        try:
            config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(config_path, "w", encoding="utf-8") as f:
                yaml.safe_dump(AppConfig.dados_padrao(), f, allow_unicode=True, sort_keys=False)
        except OSError as e:
            raise ConfigLoaderException(f"Erro ao escrever arquivo {config_path}: {e}") from e
        return config_path

    @staticmethod
    def _read_yaml(path: Path) -> Dict[str, Any]:
        """Lê arquivo YAML com segurança."""
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigLoaderException(f"Erro ao ler arquivo {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigLoaderException(
                f"Formato inválido em {path}: esperado um mapeamento",
                details={"tipo": type(data).__name__},
            )
        return data

    @classmethod
    def _apply_env_overrides(cls, data: Dict[str, Any]) -> Dict[str, Any]:
        """Aplica overrides via variáveis de ambiente (WISH115_...)."""
        # Cópia para não mutar o original
        out = dict(data)

        # Mapeamento: ENV_VAR -> (path.no.dict, type_func)
        overrides = {
            f"{ENV_PREFIX}AID_COOKIE": (["aid_cookie"], str),
            f"{ENV_PREFIX}WISH_COOKIES": (["wish_cookies"], cls._parse_list),
            f"{ENV_PREFIX}DEBUG": (["debug"], cls._parse_bool),
            f"{ENV_PREFIX}LOG_LEVEL": (["logging", "nivel_minimo"], str),
            f"{ENV_PREFIX}LOGS_DIR": (["logging", "diretorio_logs"], str),
        }

        for env_var, (keys, type_func) in overrides.items():
            val = os.getenv(env_var)
            if val is not None:
                cls._set_nested(out, keys, type_func(val))

        return out

    @staticmethod
    def _set_nested(data: Dict[str, Any], keys: list, value: Any) -> None:
        """Helper para setar valor em dict aninhado sem mutar sub-dicts do chamador."""
        current = data
        for key in keys[:-1]:
            current[key] = dict(current.get(key) or {})
            current = current[key]
        current[keys[-1]] = value

    @staticmethod
    def _parse_bool(val: str) -> bool:
        """Parse seguro de boolean."""
        return val.strip().lower() in ("true", "1", "yes", "on")

    @staticmethod
    def _parse_list(val: str) -> list:
        """Cookies contêm ';', então a lista usa '|' como separador."""
        return [parte.strip() for parte in val.split(COOKIE_LIST_SEPARATOR) if parte.strip()]
