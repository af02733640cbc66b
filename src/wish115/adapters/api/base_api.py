"""
Base API Client com suporte integrado a Botasaurus.

Fornece método `executar()` para requisições HTTP com:
- Cookie e headers por chamada
- Timeout único para todas as chamadas
- Conversão de erros de transporte em exceções do domínio
- Transporte substituível (testes injetam um falso)
"""

from __future__ import annotations

import json
from functools import lru_cache
from typing import Any, Callable, Dict, Optional

from wish115.core.exceptions import (
    JSONParsingException,
    RequestException,
    RequestTimeoutException,
    wrap_exception,
)

Transporte = Callable[[Dict[str, Any]], Any]


class BaseAPIClient:
    """
    Base class for API clients with built-in Botasaurus HTTP support.

    Uso simples:
        api = MyAPI(base_url="https://example.com")
        response = api.executar("GET", "/endpoint", cookie="uid=1")

    Um único cliente (e portanto um único transporte) é compartilhado
    por todas as contas de uma execução.
    """

    def __init__(
        self,
        base_url: str = "",
        logger: Optional[Any] = None,
        timeout: int = 30,
        transporte: Optional[Transporte] = None,
    ):
        self.base_url = base_url.rstrip('/') if base_url else ""
        self._logger = logger or self._get_default_logger()
        self.timeout = timeout
        self._transporte = transporte or enviar_requisicao

    def _get_default_logger(self) -> Any:
        from wish115.infrastructure.logging import get_logger
        return get_logger()

    @property
    def logger(self) -> Any:
        return self._logger

    # ==================== Main Request Method ====================

    def executar(
        self,
        method: str,
        endpoint: str,
        *,
        cookie: Optional[str] = None,
        headers: Optional[Dict[str, str]] = None,
        params: Optional[Dict[str, Any]] = None,
        data: Optional[Any] = None,
    ) -> Any:
        """
        Executa uma requisição HTTP e devolve a resposta crua.

        Args:
            method: Método HTTP (GET, POST)
            endpoint: Endpoint ou URL completa
            cookie: Valor do header Cookie
            headers: Headers da requisição
            params: Query parameters
            data: Dados do corpo (form-urlencoded)

        Returns:
            Objeto de resposta com ``status_code`` e ``text``

        Raises:
            RequestTimeoutException: Timeout
            RequestException: Falha de conexão ou status HTTP >= 400
        """
        if endpoint.startswith("http"):
            url = endpoint
        else:
            url = f"{self.base_url}{endpoint}"

        final_headers = dict(headers or {})
        if cookie:
            final_headers["Cookie"] = cookie

        request_data = {
            "method": method.lower(),
            "url": url,
            "headers": final_headers,
            "params": params,
            "data": data,
            "timeout": self.timeout,
        }

        try:
            response = self._transporte(request_data)
        except Exception as e:
            if _is_timeout(e):
                raise wrap_exception(e, RequestTimeoutException, f"Timeout ao acessar {url}", url=url) from e
            raise wrap_exception(e, RequestException, f"Falha ao acessar {url}: {e}", url=url) from e

        self._validate_response(response, url=url)
        return response

    def _validate_response(self, response: Any, url: str = "") -> None:
        """Valida a resposta HTTP."""
        if response is None:
            raise RequestException("Resposta nula da API", details={"url": url})

        status = getattr(response, "status_code", None)
        if isinstance(status, int) and status >= 400:
            raise RequestException(
                f"Requisição falhou com status {status}",
                details={"url": url, "status_code": status},
            )

    # ==================== Helpers ====================

    @staticmethod
    def response_text(response: Any) -> str:
        """Extrai o corpo textual de uma resposta."""
        text = getattr(response, "text", None)
        if isinstance(text, str):
            return text
        content = getattr(response, "content", None)
        if isinstance(content, bytes):
            return content.decode("utf-8", errors="replace")
        if isinstance(response, str):
            return response
        return ""

    def safe_json_parse(self, response: Any) -> Any:
        """
        Parse JSON de resposta.

        Raises:
            JSONParsingException: Se o corpo não for JSON válido.
        """
        if isinstance(response, (dict, list)):
            return response
        text = self.response_text(response)
        try:
            return json.loads(text)
        except (TypeError, ValueError) as e:
            raise JSONParsingException(
                f"Resposta não é JSON válido: {e}",
                details={"conteudo": text[:200]},
                cause=e,
            ) from e


def _is_timeout(exc: BaseException) -> bool:
    if isinstance(exc, TimeoutError):
        return True
    return "timeout" in type(exc).__name__.lower()


# ==================== Botasaurus Request Function ====================

@lru_cache(maxsize=1)
def _botasaurus_sender() -> Callable[..., Any]:
    """Cria (uma única vez) a função decorada pelo Botasaurus."""
    from botasaurus.request import Request, request as botasaurus_request

    @botasaurus_request(cache=False, raise_exception=True, create_error_logs=False, output=None)
    def _send(req: Request, data: dict):
        method = data["method"]
        url = data["url"]

        kwargs = {}
        if data.get("headers"):
            kwargs["headers"] = data["headers"]
        if data.get("params"):
            kwargs["params"] = data["params"]
        if data.get("data"):
            kwargs["data"] = data["data"]
        if data.get("timeout"):
            kwargs["timeout"] = data["timeout"]

        request_method = getattr(req, method)
        return request_method(url, **kwargs)

    return _send


def enviar_requisicao(data: Dict[str, Any]) -> Any:
    """Transporte padrão: uma tentativa, sem retry, via Botasaurus."""
    return _botasaurus_sender()(data)
