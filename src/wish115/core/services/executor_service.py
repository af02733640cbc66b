"""
Serviço de execução em lote.

Processa as contas estritamente uma de cada vez, na ordem declarada,
compartilhando um único gateway. A falha de uma conta é registrada e
nunca interrompe as seguintes.
"""

from __future__ import annotations

from typing import Any, Callable, Optional, Sequence

from wish115.config.models import ExecutorConfig
from wish115.core.domain.accounts import Conta
from wish115.core.domain.execution import ContaResult, ExecucaoResult
from wish115.core.interfaces import Agendador, WishGateway
from wish115.core.services.workflow_service import FluxoConta

FluxoFactory = Callable[[Conta], FluxoConta]


class ExecutorEmLote:
    """
    Executor sequencial de contas.

    Uso simples:
        executor = ExecutorEmLote(gateway, RelogioSistema())
        resultado = executor.executar(contas)
    """

    def __init__(
        self,
        gateway: WishGateway,
        agendador: Agendador,
        config: Optional[ExecutorConfig] = None,
        logger: Optional[Any] = None,
        fluxo_factory: Optional[FluxoFactory] = None,
    ) -> None:
        if logger is None:
            from wish115.infrastructure.logging import get_logger
            logger = get_logger()
        self.logger = logger
        self.gateway = gateway
        self.agendador = agendador
        self.config = config or ExecutorConfig()
        self._fluxo_factory = fluxo_factory or self._criar_fluxo

    def executar(self, contas: Sequence[Conta]) -> ExecucaoResult:
        """
        Executa o processamento em lote.

        Args:
            contas: Contas a processar, na ordem em que devem rodar

        Returns:
            ExecucaoResult com o resultado de cada conta
        """
        execucao = ExecucaoResult(total_contas=len(contas))

        if not contas:
            self.logger.aviso("Nenhuma conta para processar")
            return execucao

        self.logger.info(f"Iniciando execução: {len(contas)} conta(s)")

        for posicao, conta in enumerate(contas):
            if posicao > 0:
                atraso = self.config.atraso_entre_contas
                self.logger.info(f"Aguardando {atraso:g}s antes da próxima conta...")
                self.agendador.aguardar(atraso, "intervalo entre contas")

            execucao.registrar(self._processar_conta(conta))

        self.logger.info(
            "Execução finalizada",
            sucesso=execucao.sucessos,
            falha=execucao.falhas,
            adotados=execucao.total_adotados,
        )
        return execucao

    def _processar_conta(self, conta: Conta) -> ContaResult:
        logger = self.logger.com_contexto(conta=conta.numero)
        logger.info("Processando conta...")
        try:
            return self._fluxo_factory(conta).executar()
        except Exception as e:
            logger.erro(f"Erro inesperado no fluxo da conta: {e}")
            return ContaResult(indice=conta.indice, erro_fatal=str(e))

    def _criar_fluxo(self, conta: Conta) -> FluxoConta:
        return FluxoConta(
            conta=conta,
            gateway=self.gateway,
            agendador=self.agendador,
            config=self.config,
            logger=self.logger,
        )
