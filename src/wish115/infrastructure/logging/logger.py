"""Camada de logging opinativa para o fluxo de desejos.

A ideia e oferecer uma interface simples, toda em portugues, que cubra o
que a automacao precisa: logs coloridos no terminal, escrita em arquivo
diario e contexto fixo por conta/desejo.

Uso tipico::

    from wish115.infrastructure.logging import configurar_logging, log

    configurar_logging(config.logging)
    log.info("Aplicacao iniciada", contas=3)

    conta_logger = log.com_contexto(conta=1)
    conta_logger.sucesso("Desejo criado", desejo="abc")
"""

from __future__ import annotations

import atexit
import threading
from contextlib import contextmanager
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, TextIO

from rich.console import Console
from rich.text import Text
from rich.theme import Theme

from wish115.config.constants import DEFAULTS
from wish115.config.models import LoggerConfig
from wish115.core.exceptions import LoggingException

# Mapas auxiliares ---------------------------------------------------------

_LEVEL_MAP: Dict[str, int] = {
    "debug": 10,
    "info": 20,
    "sucesso": 25,
    "success": 25,
    "aviso": 30,
    "warning": 30,
    "erro": 40,
    "error": 40,
    "critico": 50,
    "critical": 50,
}

_NORMALIZED_NAMES = {
    "debug": "debug",
    "info": "info",
    "sucesso": "sucesso",
    "success": "sucesso",
    "aviso": "aviso",
    "warning": "aviso",
    "erro": "erro",
    "error": "erro",
    "critico": "critico",
    "critical": "critico",
}

_DEFAULT_THEME = Theme(
    {
        "log.time": "cyan dim",
        "log.debug": "dim",
        "log.info": "white",
        "log.sucesso": "bold green",
        "log.aviso": "yellow",
        "log.erro": "bold red",
        "log.critico": "white on red",
        "log.contexto": "bright_black",
    }
)


def _nivel_para_valor(nivel: str | int) -> int:
    if isinstance(nivel, int):
        return nivel
    return _LEVEL_MAP.get(str(nivel).lower(), _LEVEL_MAP["info"])


class WishLogger:
    """Implementacao principal do logger com API em portugues."""

    def __init__(self, config: Optional[LoggerConfig] = None, console: Optional[Console] = None) -> None:
        self._config = config or LoggerConfig(salvar_arquivo=False)
        self._console = console or Console(theme=_DEFAULT_THEME, highlight=False)
        self._console_fixo = console is not None
        self._nivel_minimo = _nivel_para_valor(self._config.nivel_minimo)
        self._arquivo_handle: Optional[TextIO] = None
        self._arquivo_path: Optional[Path] = None
        self._atexit_registrado = False
        self._lock = threading.RLock()

    # ------------------------------------------------------------------
    # Configuracao e contexto
    # ------------------------------------------------------------------

    @property
    def config(self) -> LoggerConfig:
        """Retorna a configuracao ativa para fins de inspecao."""
        return self._config

    @property
    def arquivo_atual(self) -> Optional[Path]:
        return self._arquivo_path

    def configure(self, config: LoggerConfig) -> None:
        """Aplica uma nova configuração ao logger.

        O arquivo de log é aberto aqui para que problemas de permissão
        apareçam na inicialização, antes de qualquer trabalho remoto.

        Raises:
            LoggingException: Se o arquivo de log não puder ser aberto.
        """
        with self._lock:
            self._config = config
            self._nivel_minimo = _nivel_para_valor(config.nivel_minimo)

            if not self._console_fixo:
                if config.usar_cores:
                    self._console = Console(theme=_DEFAULT_THEME, highlight=False)
                else:
                    self._console = Console(highlight=False, no_color=True)

            self.close()

            caminho = config.caminho_arquivo()
            if caminho is not None:
                try:
                    caminho.parent.mkdir(parents=True, exist_ok=True)
                    modo = "w" if config.sobrescrever_arquivo else "a"
                    self._arquivo_handle = caminho.open(modo, encoding="utf-8")
                except OSError as e:
                    raise LoggingException(
                        f"Não foi possível abrir o arquivo de log {caminho}",
                        details={"path": str(caminho)},
                        cause=e,
                    ) from e
                self._arquivo_path = caminho
                if not self._atexit_registrado:
                    atexit.register(self.close)
                    self._atexit_registrado = True

    def com_contexto(self, **dados: Any) -> "ScopedLogger":
        """Retorna um logger derivado com contexto adicional.

        Ideal para anexar informacoes fixas (ex.: conta, desejo) sem
        repetir kwargs em todas as chamadas.
        """
        contexto = {k: v for k, v in dados.items() if v is not None}
        return ScopedLogger(self, contexto)

    # ------------------------------------------------------------------
    # API publica de logging
    # ------------------------------------------------------------------

    def debug(self, mensagem: str, **dados: Any) -> None:
        self.registrar_evento("debug", mensagem, dados, None)

    def info(self, mensagem: str, **dados: Any) -> None:
        self.registrar_evento("info", mensagem, dados, None)

    def sucesso(self, mensagem: str, **dados: Any) -> None:
        """Emite log nível SUCESSO (25)."""
        self.registrar_evento("sucesso", mensagem, dados, None)

    def aviso(self, mensagem: str, **dados: Any) -> None:
        self.registrar_evento("aviso", mensagem, dados, None)

    def erro(self, mensagem: str, **dados: Any) -> None:
        self.registrar_evento("erro", mensagem, dados, None)

    def critico(self, mensagem: str, **dados: Any) -> None:
        self.registrar_evento("critico", mensagem, dados, None)

    @contextmanager
    def etapa(self, titulo: str, **dados: Any):
        """Context manager que registra início, sucesso e falha de uma etapa."""
        with _etapa(self, titulo, dados, None):
            yield

    # ------------------------------------------------------------------
    # Implementacao interna
    # ------------------------------------------------------------------

    def deve_emitir(self, nivel: str | int) -> bool:
        """Indica se o nível solicitado deve ser emitido."""
        return _nivel_para_valor(nivel) >= self._nivel_minimo

    def registrar_evento(
        self,
        nivel: str | int,
        mensagem: str,
        dados: Mapping[str, Any],
        contexto_extra: Optional[Mapping[str, Any]],
    ) -> None:
        """Consolida dados, contexto e emissões em console/arquivo."""

        if not self.deve_emitir(nivel):
            return

        dados_limpos = {k: v for k, v in (dados or {}).items() if v is not None}

        if isinstance(nivel, int):
            chave_referencia = next(
                (nome for nome, valor in _LEVEL_MAP.items() if valor == nivel),
                "info",
            )
        else:
            chave_referencia = _NORMALIZED_NAMES.get(str(nivel).lower(), "info")

        instante = datetime.now()

        with self._lock:
            contexto = {k: v for k, v in (contexto_extra or {}).items() if v is not None}

            extras_partes = self.formatar_dict(contexto) + self.formatar_dict(dados_limpos)
            extras_texto = " ".join(extras_partes)

            texto = Text()
            if self._config.mostrar_tempo:
                texto.append(instante.strftime("%H:%M:%S"), style="log.time")
                texto.append("  ")

            estilo = f"log.{chave_referencia}"
            texto.append(f"[{chave_referencia.upper()}]", style=estilo)
            texto.append("  ")
            texto.append(mensagem, style=estilo)

            if extras_texto:
                texto.append("  ")
                texto.append(extras_texto, style="log.contexto")

            self._console.print(texto)

            if self._arquivo_handle is not None:
                partes_arquivo = [instante.strftime(DEFAULTS["log_format_date"]), chave_referencia.upper(), mensagem]
                if contexto:
                    partes_arquivo.append("contexto=" + ",".join(self.formatar_dict(contexto)))
                if dados_limpos:
                    partes_arquivo.append("dados=" + ",".join(self.formatar_dict(dados_limpos)))
                self._arquivo_handle.write(" | ".join(partes_arquivo) + "\n")
                self._arquivo_handle.flush()

    def close(self) -> None:
        """Fecha o arquivo de log (quando houver)."""
        with self._lock:
            if self._arquivo_handle is not None:
                self._arquivo_handle.close()
                self._arquivo_handle = None
                self._arquivo_path = None

    @staticmethod
    def formatar_valor(valor: Any) -> str:
        """Transforma valores em representação amigável para logs."""
        if isinstance(valor, (int, float)):
            return str(valor)
        if isinstance(valor, str):
            if valor.strip() == valor and " " not in valor:
                return valor
            return repr(valor)
        return repr(valor)

    @classmethod
    def formatar_dict(cls, valores: Mapping[str, Any]) -> list[str]:
        """Converte dicionários em pares ``chave=valor`` ordenados."""
        return [f"{chave}={cls.formatar_valor(valores[chave])}" for chave in sorted(valores)]


class ScopedLogger:
    """Wrapper leve para adicionar contexto fixo em um logger existente."""

    def __init__(self, base: WishLogger, contexto: Mapping[str, Any]) -> None:
        self._base = base
        self._contexto = dict(contexto)

    def com_contexto(self, **dados: Any) -> "ScopedLogger":
        novo = dict(self._contexto)
        for chave, valor in dados.items():
            if valor is not None:
                novo[chave] = valor
        return ScopedLogger(self._base, novo)

    def debug(self, mensagem: str, **dados: Any) -> None:
        self._base.registrar_evento("debug", mensagem, dados, self._contexto)

    def info(self, mensagem: str, **dados: Any) -> None:
        self._base.registrar_evento("info", mensagem, dados, self._contexto)

    def sucesso(self, mensagem: str, **dados: Any) -> None:
        self._base.registrar_evento("sucesso", mensagem, dados, self._contexto)

    def aviso(self, mensagem: str, **dados: Any) -> None:
        self._base.registrar_evento("aviso", mensagem, dados, self._contexto)

    def erro(self, mensagem: str, **dados: Any) -> None:
        self._base.registrar_evento("erro", mensagem, dados, self._contexto)

    def critico(self, mensagem: str, **dados: Any) -> None:
        self._base.registrar_evento("critico", mensagem, dados, self._contexto)

    @contextmanager
    def etapa(self, titulo: str, **dados: Any):
        with _etapa(self._base, titulo, dados, self._contexto):
            yield


@contextmanager
def _etapa(base: WishLogger, titulo: str, dados: Dict[str, Any], contexto: Optional[Mapping[str, Any]]):
    dados_limpos = {k: v for k, v in dados.items() if v is not None}
    inicio = dados_limpos.pop("mensagem_inicial", f"Iniciando etapa: {titulo}")
    sucesso_msg = dados_limpos.pop("mensagem_sucesso", f"Etapa concluida: {titulo}")
    falha_msg = dados_limpos.pop("mensagem_falha", f"Falha na etapa: {titulo}")

    base.registrar_evento("info", inicio, dados_limpos, contexto)
    try:
        yield
    except Exception:
        base.registrar_evento("erro", falha_msg, dados_limpos, contexto)
        raise
    else:
        base.registrar_evento("sucesso", sucesso_msg, dados_limpos, contexto)
