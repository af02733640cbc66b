"""
Fluxo de uma conta: desejar, descobrir pendentes, ajudar e adotar.

O fluxo é uma máquina de estados explícita. Cada espera está presa a uma
transição e é pedida ao ``Agendador`` injetado, o que permite aos testes
verificar a sequência exata de atrasos sem dormir de verdade.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, List, Optional

from wish115.config.models import ExecutorConfig
from wish115.core.domain.accounts import Conta
from wish115.core.domain.execution import ContaResult, ProcessamentoDesejo
from wish115.core.domain.outcome import Sucesso
from wish115.core.domain.wish import TentativaAjuda
from wish115.core.interfaces import Agendador, WishGateway


class EstadoFluxo(str, Enum):
    INICIO = "inicio"
    DESEJANDO = "desejando"
    AGUARDANDO_MODERACAO = "aguardando_moderacao"
    DESCOBRINDO = "descobrindo"
    RESOLVENDO_CODIGO = "resolvendo_codigo"
    AJUDANDO = "ajudando"
    RESFRIANDO = "resfriando"
    ADOTANDO = "adotando"
    CONCLUIDO = "concluido"


class FluxoConta:
    """
    Conduz uma única conta pelo ciclo completo.

    Nenhuma chamada é repetida: uma falha encerra apenas a etapa (ou o
    desejo) em que ocorreu e o fluxo segue para a próxima unidade de
    trabalho.

    Uso:
        fluxo = FluxoConta(conta, gateway, relogio, config.executor, logger)
        resultado = fluxo.executar()
    """

    def __init__(
        self,
        conta: Conta,
        gateway: WishGateway,
        agendador: Agendador,
        config: Optional[ExecutorConfig] = None,
        logger: Optional[Any] = None,
    ) -> None:
        self.conta = conta
        self.gateway = gateway
        self.agendador = agendador
        self.config = config or ExecutorConfig()
        if logger is None:
            from wish115.infrastructure.logging import get_logger
            logger = get_logger()
        self.logger = logger.com_contexto(conta=conta.numero)
        self.estado = EstadoFluxo.INICIO
        self.historico: List[EstadoFluxo] = [EstadoFluxo.INICIO]

    def executar(self) -> ContaResult:
        resultado = ContaResult(indice=self.conta.indice)

        self._desejar(resultado)
        pendentes = self._descobrir(resultado)

        for id_desejo in pendentes:
            resultado.desejos.append(self._processar_desejo(id_desejo))
            self.agendador.aguardar(self.config.atraso_entre_desejos, "intervalo entre desejos")

        self._transicionar(EstadoFluxo.CONCLUIDO)
        self.logger.info(
            "Conta concluída",
            pendentes=len(resultado.desejos),
            adotados=resultado.adotados,
        )
        return resultado

    # ------------------------------------------------------------------
    # Etapas
    # ------------------------------------------------------------------

    def _desejar(self, resultado: ContaResult) -> None:
        self._transicionar(EstadoFluxo.DESEJANDO)
        criado = self.gateway.criar_desejo(self.conta.wish_cookie, conta=self.conta.numero)

        if criado.ok:
            # Aceito sem xys_id ainda conta como desejo criado
            id_desejo = criado.valor if isinstance(criado, Sucesso) else None
            resultado.id_desejo_criado = id_desejo
            resultado.desejo_aceito = True
            resultado.adicionar_etapa("desejo", True, dados={"id": id_desejo})
            self._transicionar(EstadoFluxo.AGUARDANDO_MODERACAO)
            self.logger.info(f"Aguardando moderação por {self.config.atraso_moderacao:g}s...")
            self.agendador.aguardar(self.config.atraso_moderacao, "moderação do desejo")
        else:
            # Desejos antigos ainda podem ser atendidos
            resultado.adicionar_etapa("desejo", False, erro=criado.descricao())
            self.logger.aviso("Desejo não criado; seguindo para os pendentes", motivo=criado.tipo)

    def _descobrir(self, resultado: ContaResult) -> List[str]:
        self._transicionar(EstadoFluxo.DESCOBRINDO)
        listagem = self.gateway.listar_desejos_pendentes(self.conta.wish_cookie, conta=self.conta.numero)

        if not isinstance(listagem, Sucesso):
            resultado.adicionar_etapa("descoberta", False, erro=listagem.descricao())
            return []

        pendentes = sorted(listagem.valor)
        resultado.adicionar_etapa("descoberta", True, dados={"pendentes": len(pendentes)})
        if not pendentes:
            self.logger.info("Nenhum desejo pendente")
        return pendentes

    def _processar_desejo(self, id_desejo: str) -> ProcessamentoDesejo:
        processamento = ProcessamentoDesejo(id_desejo=id_desejo)
        logger = self.logger.com_contexto(desejo=id_desejo)

        self._transicionar(EstadoFluxo.RESOLVENDO_CODIGO)
        codigo = self.gateway.obter_codigo_canonico(
            self.conta.aid_cookie, id_desejo, conta=self.conta.numero
        )
        if not isinstance(codigo, Sucesso):
            processamento.erro = f"código: {codigo.descricao()}"
            logger.erro("Código canônico indisponível; desejo ignorado")
            return processamento
        processamento.codigo_canonico = codigo.valor

        self._transicionar(EstadoFluxo.AJUDANDO)
        ajuda = self.gateway.enviar_ajuda(
            self.conta.aid_cookie, codigo.valor, conta=self.conta.numero, desejo=id_desejo
        )
        if not isinstance(ajuda, Sucesso):
            processamento.erro = f"ajuda: {ajuda.descricao()}"
            return processamento
        processamento.id_ajuda = ajuda.valor
        tentativa = TentativaAjuda(id_desejo=id_desejo, id_ajuda=ajuda.valor)

        self._transicionar(EstadoFluxo.RESFRIANDO)
        self.agendador.aguardar(self.config.atraso_resfriamento_ajuda, "resfriamento após ajuda")

        self._transicionar(EstadoFluxo.ADOTANDO)
        self.agendador.aguardar(self.config.atraso_antes_adocao, "antes da adoção")
        adocao = self._adotar(tentativa)
        if not isinstance(adocao, Sucesso):
            processamento.erro = f"adoção: {adocao.descricao()}"
            return processamento

        processamento.adotado = True
        return processamento

    def _adotar(self, tentativa: TentativaAjuda):
        # Só existe tentativa quando o envio da ajuda devolveu um id
        return self.gateway.adotar_ajuda(
            self.conta.wish_cookie, tentativa.id_desejo, tentativa.id_ajuda, conta=self.conta.numero
        )

    def _transicionar(self, estado: EstadoFluxo) -> None:
        self.estado = estado
        self.historico.append(estado)
        self.logger.debug("Transição de estado", estado=estado.value)
