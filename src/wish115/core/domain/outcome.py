"""
Resultado de uma chamada remota.

Toda operação do gateway devolve exatamente uma destas variantes; nenhuma
falha de negócio, rede ou parsing escapa como exceção para o fluxo.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Sucesso(Generic[T]):
    valor: T

    ok = True
    tipo = "sucesso"

    def descricao(self) -> str:
        return "ok"


@dataclass(frozen=True)
class SucessoSemCampo:
    """Envelope de sucesso sem o campo esperado; o servidor aceitou a operação."""

    campo: str

    ok = True
    tipo = "sucesso_sem_campo"

    def descricao(self) -> str:
        return f"aceito sem {self.campo}"


@dataclass(frozen=True)
class Rejeitado:
    """Resposta bem formada, mas com ``state``/``code`` indicando falha."""

    mensagem: str
    state: Optional[int] = None
    code: Optional[int] = None

    ok = False
    tipo = "rejeitado"

    def descricao(self) -> str:
        return f"{self.mensagem} (estado: {self.state}, código: {self.code})"


@dataclass(frozen=True)
class FalhaTransporte:
    """Conexão, timeout ou status HTTP de erro."""

    erro: str

    ok = False
    tipo = "transporte"

    def descricao(self) -> str:
        return self.erro


@dataclass(frozen=True)
class FalhaDecodificacao:
    """Corpo da resposta não pôde ser interpretado."""

    erro: str
    conteudo: str = ""

    ok = False
    tipo = "decodificacao"

    def descricao(self) -> str:
        return self.erro


@dataclass(frozen=True)
class CampoAusente:
    """Envelope de sucesso sem o campo esperado."""

    campo: str

    ok = False
    tipo = "campo_ausente"

    def descricao(self) -> str:
        return f"campo ausente: {self.campo}"


Falha = Union[Rejeitado, FalhaTransporte, FalhaDecodificacao, CampoAusente]
Resultado = Union[Sucesso[T], SucessoSemCampo, Falha]

