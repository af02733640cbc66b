"""Clientes das APIs remotas."""

from wish115.adapters.api.base_api import BaseAPIClient, enviar_requisicao
from wish115.adapters.api.wish_api import WishAPI, WishResponseParser

__all__ = ["BaseAPIClient", "enviar_requisicao", "WishAPI", "WishResponseParser"]
