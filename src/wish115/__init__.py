"""Wish115: automação do ciclo desejo, ajuda e adoção do 115."""

__version__ = "0.1.0"
