"""
Entidades de Desejo e Ajuda.

Um desejo listado em ``my_desire`` tem um identificador que NÃO serve para
enviar ajuda: ele precisa ser trocado pelo código canônico retornado por
``get_desire_info``. Os dois campos são mantidos separados aqui.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Union


@dataclass(frozen=True)
class Envelope:
    """Envelope comum a todas as respostas: ``{state, code, message, data}``."""

    state: int
    code: int
    message: str = ""
    data: Any = None

    @property
    def sucesso(self) -> bool:
        return self.state == 1 and self.code == 0


@dataclass(frozen=True)
class ItemDesejo:
    """Item da listagem de desejos da conta."""

    id_desejo: str
    ajudas: int = 0

    @property
    def pendente(self) -> bool:
        return self.ajudas == 0


@dataclass(frozen=True)
class TentativaAjuda:
    """Ajuda enviada com sucesso; entrada obrigatória para a adoção."""

    id_desejo: str
    id_ajuda: str


# --- Payload permissivo de ajuda/adoção -------------------------------------

@dataclass(frozen=True)
class PayloadReconhecido:
    """``data`` é um objeto; ``id_ajuda`` só existe se o campo veio preenchido."""

    id_ajuda: Optional[str] = None


@dataclass(frozen=True)
class PayloadNaoReconhecido:
    """``data`` veio em um formato desconhecido (lista, texto, null...)."""

    bruto: Any = None


PayloadAjuda = Union[PayloadReconhecido, PayloadNaoReconhecido]


def interpretar_payload_ajuda(data: Any) -> PayloadAjuda:
    """
    Classifica o ``data`` de uma resposta de ajuda/adoção.

    Apenas verifica presença de chaves, sem exigir esquema.
    """
    if not isinstance(data, dict):
        return PayloadNaoReconhecido(bruto=data)

    valor = data.get("aid_id")
    if isinstance(valor, (int, float)) and not isinstance(valor, bool):
        valor = str(int(valor))
    if isinstance(valor, str) and valor.strip():
        return PayloadReconhecido(id_ajuda=valor)
    return PayloadReconhecido(id_ajuda=None)
