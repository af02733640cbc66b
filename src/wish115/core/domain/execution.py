"""Entidades de Resultado de Execução."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class EtapaResult:
    """Resultado de uma etapa individual."""
    nome: str
    sucesso: bool
    erro: Optional[str] = None
    dados: Optional[Dict[str, Any]] = None


@dataclass
class ProcessamentoDesejo:
    """O que aconteceu com um desejo pendente durante a execução."""
    id_desejo: str
    codigo_canonico: Optional[str] = None
    id_ajuda: Optional[str] = None
    adotado: bool = False
    erro: Optional[str] = None


@dataclass
class ContaResult:
    """Resultado detalhado do processamento de uma conta."""
    indice: int
    id_desejo_criado: Optional[str] = None
    desejo_aceito: bool = False
    desejos: List[ProcessamentoDesejo] = field(default_factory=list)
    etapas: List[EtapaResult] = field(default_factory=list)
    erro_fatal: Optional[str] = None

    @property
    def numero(self) -> int:
        return self.indice + 1

    @property
    def sucesso_geral(self) -> bool:
        """A conta percorreu o fluxo até o fim (falhas pontuais não contam)."""
        return self.erro_fatal is None

    @property
    def adotados(self) -> int:
        return sum(1 for d in self.desejos if d.adotado)

    def adicionar_etapa(self, nome: str, sucesso: bool, erro: Optional[str] = None, dados: Optional[Dict[str, Any]] = None) -> None:
        """Adiciona resultado de uma etapa."""
        self.etapas.append(EtapaResult(
            nome=nome,
            sucesso=sucesso,
            erro=erro,
            dados=dados
        ))

    def get_resumo(self) -> Dict[str, Any]:
        """Retorna resumo do resultado."""
        etapas_ok = sum(1 for e in self.etapas if e.sucesso)

        return {
            "conta": self.numero,
            "sucesso": self.sucesso_geral,
            "desejo_criado": self.id_desejo_criado,
            "desejo_aceito": self.desejo_aceito,
            "pendentes": len(self.desejos),
            "adotados": self.adotados,
            "etapas_ok": etapas_ok,
            "etapas_falha": len(self.etapas) - etapas_ok,
            "erro_fatal": self.erro_fatal,
            "detalhes_desejos": [
                {
                    "id": d.id_desejo,
                    "adotado": d.adotado,
                    "erro": d.erro,
                }
                for d in self.desejos
            ],
        }


@dataclass
class ExecucaoResult:
    """Resultado de uma execução em lote."""

    total_contas: int = 0
    sucessos: int = 0
    falhas: int = 0
    total_adotados: int = 0
    detalhes: List[ContaResult] = field(default_factory=list)

    def registrar(self, resultado: ContaResult) -> None:
        self.detalhes.append(resultado)
        if resultado.sucesso_geral:
            self.sucessos += 1
        else:
            self.falhas += 1
        self.total_adotados += resultado.adotados

    def get_resumo(self) -> Dict[str, Any]:
        total = self.total_contas
        return {
            "total": total,
            "sucesso": self.sucessos,
            "falha": self.falhas,
            "adotados": self.total_adotados,
            "taxa_sucesso": f"{(self.sucessos / total * 100):.1f}%" if total > 0 else "0%",
            "resultados": [r.get_resumo() for r in self.detalhes],
        }
