"""Domain entities for the Wish115 project."""

from wish115.core.domain.accounts import Conta, mascarar_cookie
from wish115.core.domain.wish import (
    Envelope,
    ItemDesejo,
    TentativaAjuda,
    PayloadAjuda,
    PayloadReconhecido,
    PayloadNaoReconhecido,
    interpretar_payload_ajuda,
)
from wish115.core.domain.outcome import (
    Sucesso,
    SucessoSemCampo,
    Rejeitado,
    FalhaTransporte,
    FalhaDecodificacao,
    CampoAusente,
    Resultado,
)
from wish115.core.domain.execution import EtapaResult, ProcessamentoDesejo, ContaResult, ExecucaoResult

__all__ = [
    "Conta",
    "mascarar_cookie",
    "Envelope",
    "ItemDesejo",
    "TentativaAjuda",
    "PayloadAjuda",
    "PayloadReconhecido",
    "PayloadNaoReconhecido",
    "interpretar_payload_ajuda",
    "Sucesso",
    "SucessoSemCampo",
    "Rejeitado",
    "FalhaTransporte",
    "FalhaDecodificacao",
    "CampoAusente",
    "Resultado",
    "EtapaResult",
    "ProcessamentoDesejo",
    "ContaResult",
    "ExecucaoResult",
]
