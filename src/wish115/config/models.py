"""
Modelos de dados de configuração.

Define a estrutura tipada das configurações usando Dataclasses.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import Any, Dict, List, Optional

from wish115.config.constants import API_BASE_URL, DEFAULTS, DELAYS, LEVEL_VALUES
from wish115.config.validators import (
    clean_cookie_list,
    validate_choice,
    validate_non_negative_number,
    validate_positive_int,
    validate_type,
)
from wish115.core.exceptions import MissingCredentialsException


@dataclass
class LoggerConfig:
    """Configuração para o sistema de logging."""

    nome: str = DEFAULTS["log_file_prefix"]
    nivel_minimo: str = "INFO"
    diretorio_logs: Optional[Path] = None
    arquivo_log: Optional[Path] = None
    salvar_arquivo: bool = True
    sobrescrever_arquivo: bool = False
    mostrar_tempo: bool = True
    usar_cores: bool = True

    def __post_init__(self):
        self.nivel_minimo = str(self.nivel_minimo).upper()
        validate_choice(self.nivel_minimo, set(LEVEL_VALUES.keys()), "nivel_minimo")
        if self.diretorio_logs is None:
            self.diretorio_logs = Path(DEFAULTS["logs_dir"])

    def caminho_arquivo(self, dia: Optional[date] = None) -> Optional[Path]:
        """
        Resolve o arquivo de log efetivo.

        Quando ``arquivo_log`` não é informado, usa ``<diretorio>/<nome>_<AAAA-MM-DD>.log``.
        """
        if not self.salvar_arquivo:
            return None
        if self.arquivo_log:
            return Path(self.arquivo_log)
        dia = dia or date.today()
        return Path(self.diretorio_logs) / f"{self.nome}_{dia.isoformat()}.log"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> LoggerConfig:
        clean_data = {k: v for k, v in data.items() if k in cls.__annotations__}

        if "nivel_minimo" in clean_data: validate_type(clean_data["nivel_minimo"], str, "logging.nivel_minimo")
        if "usar_cores" in clean_data: validate_type(clean_data["usar_cores"], bool, "logging.usar_cores")
        if "salvar_arquivo" in clean_data: validate_type(clean_data["salvar_arquivo"], bool, "logging.salvar_arquivo")

        # Conversão de paths
        for chave in ("diretorio_logs", "arquivo_log"):
            if clean_data.get(chave):
                clean_data[chave] = Path(clean_data[chave])

        return cls(**clean_data)


@dataclass
class ExecutorConfig:
    """Cadência do fluxo (em segundos) e parâmetros do executor."""

    atraso_moderacao: float = DELAYS["moderacao"]
    atraso_resfriamento_ajuda: float = DELAYS["resfriamento_ajuda"]
    atraso_antes_adocao: float = DELAYS["antes_adocao"]
    atraso_entre_desejos: float = DELAYS["entre_desejos"]
    atraso_entre_contas: float = DELAYS["entre_contas"]

    def __post_init__(self):
        for nome in self.__annotations__:
            validate_non_negative_number(getattr(self, nome), f"executor.{nome}")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> ExecutorConfig:
        clean = {k: v for k, v in data.items() if k in cls.__annotations__}
        for chave, valor in clean.items():
            validate_type(valor, float, f"executor.{chave}")
        return cls(**clean)


@dataclass
class APIConfig:
    """Parâmetros da API remota e conteúdo fixo das requisições."""

    base_url: str = API_BASE_URL
    timeout: int = DEFAULTS["timeout_api"]
    conteudo_desejo: str = DEFAULTS["wish_content"]
    recompensa: str = DEFAULTS["reward_space"]
    conteudo_ajuda: str = DEFAULTS["aid_content"]
    pasta_destino: str = DEFAULTS["adopt_to_cid"]

    def __post_init__(self):
        validate_positive_int(self.timeout, "api.timeout")
        # YAML pode trazer números; a API espera texto no formulário
        self.recompensa = str(self.recompensa)
        self.pasta_destino = str(self.pasta_destino)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> APIConfig:
        clean = {k: v for k, v in data.items() if k in cls.__annotations__}
        if "timeout" in clean: validate_type(clean["timeout"], int, "api.timeout")
        if "base_url" in clean: validate_type(clean["base_url"], str, "api.base_url")
        return cls(**clean)


@dataclass
class AppConfig:
    """
    Configuração raiz da aplicação.
    Agrega as credenciais e todas as outras configurações.
    """

    aid_cookie: str = ""
    wish_cookies: List[str] = field(default_factory=list)
    debug: bool = False

    executor: Optional[ExecutorConfig] = None
    api: Optional[APIConfig] = None
    logging: Optional[LoggerConfig] = None

    def __post_init__(self):
        self.aid_cookie = (self.aid_cookie or "").strip()
        self.wish_cookies = clean_cookie_list(self.wish_cookies)

        if self.executor is None: self.executor = ExecutorConfig()
        if self.api is None: self.api = APIConfig()
        if self.logging is None: self.logging = LoggerConfig()

        if self.debug:
            self.logging.nivel_minimo = "DEBUG"

    def validar_credenciais(self) -> None:
        """
        Garante que há trabalho a fazer antes de qualquer chamada remota.

        Raises:
            MissingCredentialsException: Sem cookies de desejo ou sem cookie de ajuda.
        """
        if not self.wish_cookies:
            raise MissingCredentialsException("Nenhum wish cookie configurado")
        if not self.aid_cookie:
            raise MissingCredentialsException("aid cookie não configurado")

    @staticmethod
    def dados_padrao() -> Dict[str, Any]:
        """Conteúdo do arquivo de configuração gerado na primeira execução."""
        return {"aid_cookie": "", "wish_cookies": [""]}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> AppConfig:
        executor = ExecutorConfig.from_dict(data.get("executor") or {})
        api = APIConfig.from_dict(data.get("api") or {})
        logging = LoggerConfig.from_dict(data.get("logging") or {})

        nested_keys = {"executor", "api", "logging"}
        root_args = {k: v for k, v in data.items() if k in cls.__annotations__ and k not in nested_keys}

        if "debug" in root_args: validate_type(root_args["debug"], bool, "debug")
        if "aid_cookie" in root_args: validate_type(root_args["aid_cookie"], str, "aid_cookie")
        if "wish_cookies" in root_args: validate_type(root_args["wish_cookies"], list, "wish_cookies")

        return cls(
            **root_args,
            executor=executor,
            api=api,
            logging=logging,
        )
