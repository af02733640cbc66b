"""
Repositório de contas a partir da configuração.
"""

from typing import List, Sequence

from wish115.config.models import AppConfig
from wish115.core.domain.accounts import Conta
from wish115.core.interfaces import AccountRepository
from wish115.infrastructure.logging import get_logger


class ConfigContaRepository(AccountRepository):
    """Monta uma ``Conta`` por cookie de desejo, todas com o mesmo cookie de ajuda."""

    def __init__(self, config: AppConfig, logger=None):
        self.config = config
        self.logger = logger or get_logger()

    def listar(self) -> Sequence[Conta]:
        contas: List[Conta] = [
            Conta(wish_cookie=cookie, aid_cookie=self.config.aid_cookie, indice=indice)
            for indice, cookie in enumerate(self.config.wish_cookies)
        ]
        self.logger.debug(f"Carregadas {len(contas)} contas da configuração")
        return contas

