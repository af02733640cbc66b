"""
Interfaces do Núcleo (Core Interfaces).

Define os contratos (Ports) que os Adapters devem implementar.
Segue o princípio de Inversão de Dependência (DIP).
"""

from abc import ABC, abstractmethod
from typing import Any, Protocol, Sequence, Set

from wish115.core.domain.accounts import Conta
from wish115.core.domain.outcome import Resultado


class AccountRepository(ABC):
    """Interface para a origem das contas."""

    @abstractmethod
    def listar(self) -> Sequence[Conta]:
        """Lista as contas na ordem declarada."""
        ...


class WishGateway(ABC):
    """
    Operações remotas do evento de desejos.

    Cada método faz uma única requisição e nunca lança exceção:
    o retorno é sempre uma variante de ``Resultado``.
    """

    @abstractmethod
    def criar_desejo(self, wish_cookie: str, **contexto: Any) -> Resultado[str]:
        """Cria um desejo; sucesso traz o id, ``SucessoSemCampo`` quando o servidor aceita sem devolvê-lo."""
        ...

    @abstractmethod
    def listar_desejos_pendentes(self, wish_cookie: str, **contexto: Any) -> Resultado[Set[str]]:
        """Ids dos desejos da conta que ainda não receberam ajuda."""
        ...

    @abstractmethod
    def obter_codigo_canonico(self, aid_cookie: str, id_desejo: str, **contexto: Any) -> Resultado[str]:
        """Troca o id da listagem pelo código aceito no envio de ajuda."""
        ...

    @abstractmethod
    def enviar_ajuda(self, aid_cookie: str, codigo_canonico: str, **contexto: Any) -> Resultado[str]:
        """Envia ajuda; sucesso traz o id da ajuda."""
        ...

    @abstractmethod
    def adotar_ajuda(self, wish_cookie: str, id_desejo: str, id_ajuda: str, **contexto: Any) -> Resultado[None]:
        """O dono do desejo aceita a ajuda recebida."""
        ...


class Agendador(Protocol):
    """Ponto único de espera do fluxo (substituível por um relógio falso)."""

    def aguardar(self, segundos: float, motivo: str) -> None: ...


class LoggingService(Protocol):
    """Capacidades mínimas de logging usadas pelo núcleo."""

    def debug(self, mensagem: str, **dados: Any) -> None: ...
    def info(self, mensagem: str, **dados: Any) -> None: ...
    def sucesso(self, mensagem: str, **dados: Any) -> None: ...
    def aviso(self, mensagem: str, **dados: Any) -> None: ...
    def erro(self, mensagem: str, **dados: Any) -> None: ...
    def com_contexto(self, **dados: Any) -> "LoggingService": ...
