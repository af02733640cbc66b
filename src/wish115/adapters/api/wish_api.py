"""
Cliente da API do evento de desejos do 115.

Implementa as cinco operações remotas do ``WishGateway``. Cada operação
faz uma única requisição e converte qualquer falha (rede, parsing,
rejeição de negócio, campo ausente) em uma variante de ``Resultado``,
registrando o erro com o contexto da conta e do desejo.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Set

from wish115.config.constants import (
    DESKTOP_HEADERS,
    ENDPOINTS,
    FORM_CONTENT_TYPE,
    LISTING_PARAMS,
    MOBILE_HEADERS,
)
from wish115.config.models import APIConfig
from wish115.core.domain.outcome import (
    CampoAusente,
    FalhaDecodificacao,
    FalhaTransporte,
    Rejeitado,
    Resultado,
    Sucesso,
    SucessoSemCampo,
)
from wish115.core.domain.wish import (
    Envelope,
    ItemDesejo,
    PayloadReconhecido,
    interpretar_payload_ajuda,
)
from wish115.core.exceptions import (
    InvalidAPIResponseException,
    ParsingException,
    RequestException,
)
from wish115.core.interfaces import WishGateway
from .base_api import BaseAPIClient, Transporte


class WishResponseParser:
    """Parser para as respostas do evento de desejos."""

    @staticmethod
    def ler_envelope(payload: Any) -> Envelope:
        """
        Valida o envelope ``{state, code, message, data}``.

        Raises:
            InvalidAPIResponseException: Se faltar ``state``/``code`` inteiros.
        """
        if not isinstance(payload, dict):
            raise InvalidAPIResponseException(
                "Formato de resposta inesperado",
                details={"tipo": type(payload).__name__},
            )

        state = WishResponseParser._to_int(payload.get("state"))
        code = WishResponseParser._to_int(payload.get("code"))
        if state is None or code is None:
            raise InvalidAPIResponseException(
                "Envelope sem state/code",
                details={"state": payload.get("state"), "code": payload.get("code")},
            )

        message = payload.get("message")
        return Envelope(
            state=state,
            code=code,
            message=message if isinstance(message, str) else "",
            data=payload.get("data"),
        )

    @staticmethod
    def extrair_campo_texto(data: Any, campo: str) -> Optional[str]:
        """Lê ``data[campo]`` como texto não vazio, ou ``None``."""
        if not isinstance(data, dict):
            return None
        valor = data.get(campo)
        if isinstance(valor, (int, float)) and not isinstance(valor, bool):
            valor = str(int(valor))
        if isinstance(valor, str) and valor.strip():
            return valor
        return None

    @staticmethod
    def extrair_itens(data: Any) -> List[Dict[str, Any]]:
        """
        Lê ``data.list`` da listagem de desejos.

        Raises:
            InvalidAPIResponseException: Se ``data.list`` não for uma lista.
        """
        itens = data.get("list") if isinstance(data, dict) else None
        if not isinstance(itens, list):
            raise InvalidAPIResponseException(
                "Listagem sem data.list",
                details={"tipo": type(itens).__name__},
            )
        return itens

    @staticmethod
    def parse_item(item: Any) -> Optional[ItemDesejo]:
        """Monta um ``ItemDesejo``; itens sem ``code`` ou ``aid_num`` numérico são descartados."""
        if not isinstance(item, dict):
            return None
        id_desejo = WishResponseParser.extrair_campo_texto(item, "code")
        ajudas = WishResponseParser._to_int(item.get("aid_num"))
        if id_desejo is None or ajudas is None:
            return None
        return ItemDesejo(id_desejo=id_desejo, ajudas=ajudas)

    @staticmethod
    def _to_int(value: Any) -> Optional[int]:
        """Converte valor para inteiro (aceita texto numérico)."""
        if isinstance(value, bool):
            return None
        if isinstance(value, int):
            return value
        if isinstance(value, float) and value.is_integer():
            return int(value)
        if isinstance(value, str):
            texto = value.strip()
            if texto.lstrip("-").isdigit():
                return int(texto)
        return None


class WishAPI(BaseAPIClient, WishGateway):
    """
    Gateway das cinco operações remotas.

    Uso:
        api = WishAPI(config.api)
        resultado = api.criar_desejo(conta.wish_cookie, conta=1)
        if isinstance(resultado, Sucesso):
            id_desejo = resultado.valor
    """

    def __init__(
        self,
        config: Optional[APIConfig] = None,
        logger: Optional[Any] = None,
        transporte: Optional[Transporte] = None,
    ) -> None:
        self.config = config or APIConfig()
        super().__init__(
            base_url=self.config.base_url,
            logger=logger,
            timeout=self.config.timeout,
            transporte=transporte,
        )
        self.parser = WishResponseParser()

    # ==================== Operações ====================

    def criar_desejo(self, wish_cookie: str, **contexto: Any) -> Resultado[str]:
        logger = self.logger.com_contexto(**contexto)
        logger.info("Enviando pedido de desejo...")

        resultado = self._chamar(
            "criar desejo",
            "POST",
            ENDPOINTS["wish"],
            cookie=wish_cookie,
            headers=self._headers_formulario(DESKTOP_HEADERS),
            data={
                "content": self.config.conteudo_desejo,
                "images": "",
                "rewardSpace": self.config.recompensa,
            },
            logger=logger,
        )
        if not isinstance(resultado, Sucesso):
            return resultado

        id_desejo = self.parser.extrair_campo_texto(resultado.valor.data, "xys_id")
        if id_desejo is None:
            logger.aviso("Desejo aceito, mas a resposta não trouxe xys_id")
            return SucessoSemCampo("xys_id")

        logger.sucesso("Desejo criado", desejo=id_desejo)
        return Sucesso(id_desejo)

    def listar_desejos_pendentes(self, wish_cookie: str, **contexto: Any) -> Resultado[Set[str]]:
        logger = self.logger.com_contexto(**contexto)
        logger.info("Buscando lista de desejos pendentes...")

        resultado = self._chamar(
            "listar desejos",
            "GET",
            ENDPOINTS["my_desire"],
            cookie=wish_cookie,
            headers=dict(DESKTOP_HEADERS),
            params=dict(LISTING_PARAMS),
            logger=logger,
        )
        if not isinstance(resultado, Sucesso):
            return resultado

        try:
            itens = self.parser.extrair_itens(resultado.valor.data)
        except InvalidAPIResponseException as e:
            logger.erro(f"Falha ao interpretar lista de desejos: {e}")
            return FalhaDecodificacao(str(e))

        pendentes: Set[str] = set()
        for bruto in itens:
            item = self.parser.parse_item(bruto)
            if item is None:
                logger.aviso("Item da listagem ignorado (sem code/aid_num)", item=str(bruto)[:100])
                continue
            if item.pendente:
                pendentes.add(item.id_desejo)

        logger.info(f"{len(pendentes)} desejo(s) pendente(s) encontrado(s)")
        return Sucesso(pendentes)

    def obter_codigo_canonico(self, aid_cookie: str, id_desejo: str, **contexto: Any) -> Resultado[str]:
        logger = self.logger.com_contexto(desejo=id_desejo, **contexto)
        logger.info("Obtendo detalhes do desejo...")

        resultado = self._chamar(
            "obter detalhes do desejo",
            "GET",
            ENDPOINTS["get_desire_info"],
            cookie=aid_cookie,
            headers=dict(DESKTOP_HEADERS),
            params={"id": id_desejo},
            logger=logger,
            registrar_corpo=True,
        )
        if not isinstance(resultado, Sucesso):
            return resultado

        codigo = self.parser.extrair_campo_texto(resultado.valor.data, "code")
        if codigo is None:
            logger.erro("Detalhes do desejo sem código canônico")
            return CampoAusente("code")

        logger.info("Código canônico obtido", codigo=codigo)
        return Sucesso(codigo)

    def enviar_ajuda(self, aid_cookie: str, codigo_canonico: str, **contexto: Any) -> Resultado[str]:
        logger = self.logger.com_contexto(codigo=codigo_canonico, **contexto)
        logger.info("Enviando ajuda...")

        resultado = self._chamar(
            "enviar ajuda",
            "POST",
            ENDPOINTS["aid_desire"],
            cookie=aid_cookie,
            headers=self._headers_formulario(MOBILE_HEADERS),
            data={
                "id": codigo_canonico,
                "content": self.config.conteudo_ajuda,
                "images": "",
                "file_ids": "",
            },
            logger=logger,
            registrar_corpo=True,
        )
        if not isinstance(resultado, Sucesso):
            return resultado

        payload = interpretar_payload_ajuda(resultado.valor.data)
        if isinstance(payload, PayloadReconhecido) and payload.id_ajuda:
            logger.sucesso("Ajuda enviada", ajuda=payload.id_ajuda)
            return Sucesso(payload.id_ajuda)

        logger.aviso("Ajuda aceita, mas a resposta não trouxe aid_id", data=str(resultado.valor.data)[:200])
        return CampoAusente("aid_id")

    def adotar_ajuda(self, wish_cookie: str, id_desejo: str, id_ajuda: str, **contexto: Any) -> Resultado[None]:
        logger = self.logger.com_contexto(desejo=id_desejo, ajuda=id_ajuda, **contexto)
        logger.info("Adotando ajuda...")

        resultado = self._chamar(
            "adotar ajuda",
            "POST",
            ENDPOINTS["adopt"],
            cookie=wish_cookie,
            headers=self._headers_formulario(DESKTOP_HEADERS),
            data={
                "did": id_desejo,
                "aid": id_ajuda,
                "to_cid": self.config.pasta_destino,
            },
            logger=logger,
        )
        if not isinstance(resultado, Sucesso):
            return resultado

        logger.sucesso("Ajuda adotada")
        return Sucesso(None)

    # ==================== Internos ====================

    @staticmethod
    def _headers_formulario(base: Dict[str, str]) -> Dict[str, str]:
        headers = dict(base)
        headers["Content-Type"] = FORM_CONTENT_TYPE
        return headers

    def _chamar(
        self,
        operacao: str,
        method: str,
        endpoint: str,
        *,
        cookie: str,
        headers: Dict[str, str],
        logger: Any,
        params: Optional[Dict[str, Any]] = None,
        data: Optional[Dict[str, Any]] = None,
        registrar_corpo: bool = False,
    ) -> Resultado[Envelope]:
        """Executa a requisição e classifica o resultado na taxonomia de falhas."""
        try:
            response = self.executar(method, endpoint, cookie=cookie, headers=headers, params=params, data=data)
        except RequestException as e:
            logger.erro(f"Falha de transporte ao {operacao}: {e}")
            return FalhaTransporte(str(e))

        if registrar_corpo:
            logger.debug(
                "Resposta do servidor",
                status=getattr(response, "status_code", None),
                corpo=self.response_text(response)[:500],
            )

        try:
            envelope = self.parser.ler_envelope(self.safe_json_parse(response))
        except (ParsingException, InvalidAPIResponseException) as e:
            conteudo = self.response_text(response)[:200]
            logger.erro(f"Falha ao interpretar resposta ao {operacao}: {e}", conteudo=conteudo)
            return FalhaDecodificacao(str(e), conteudo=conteudo)

        if not envelope.sucesso:
            logger.aviso(
                f"Servidor recusou {operacao}: {envelope.message}",
                state=envelope.state,
                code=envelope.code,
            )
            return Rejeitado(envelope.message, state=envelope.state, code=envelope.code)

        return Sucesso(envelope)
