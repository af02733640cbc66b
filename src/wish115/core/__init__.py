"""Núcleo: domínio, contratos e serviços."""
