"""
Funções de validação reutilizáveis.

Este módulo contém funções puras para validar dados de configuração,
garantindo integridade dos dados antes da utilização.
"""

from typing import Any, Iterable, List, Optional, Set

from wish115.core.exceptions import ConfigurationException


class ValidationException(ConfigurationException):
    """Erro base para falhas de validação."""
    pass


def validate_positive_int(value: int, field_name: str, min_value: int = 1) -> None:
    """
    Valida se um número inteiro é maior ou igual a um mínimo.

    Args:
        value: O valor a ser validado.
        field_name: Nome do campo para mensagem de erro.
        min_value: Valor mínimo aceitável (default: 1).

    Raises:
        ValidationException: Se o valor não for inteiro ou for menor que min_value.
    """
    if not isinstance(value, int) or isinstance(value, bool):
        raise ValidationException(
            f"{field_name} deve ser um número inteiro.",
            details={"value": value, "type": type(value).__name__}
        )

    if value < min_value:
        raise ValidationException(
            f"{field_name} deve ser >= {min_value}",
            details={"value": value, "min_value": min_value}
        )


def validate_non_negative_number(value: float, field_name: str) -> None:
    """
    Valida se um número (int ou float) é >= 0.

    Usado para os atrasos de cadência, onde zero é aceitável.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationException(
            f"{field_name} deve ser um número.",
            details={"value": value, "type": type(value).__name__}
        )

    if value < 0:
        raise ValidationException(
            f"{field_name} não pode ser negativo",
            details={"value": value}
        )


def validate_choice(value: str, valid_choices: Set[str], field_name: str) -> None:
    """
    Valida se um valor único está dentro das opções permitidas.

    Args:
        value: Valor a validar.
        valid_choices: Conjunto de escolhas permitidas.
        field_name: Nome do campo.
    """
    if value not in valid_choices:
        raise ValidationException(
            f"{field_name} inválido: {value}. Use um dos: {', '.join(sorted(valid_choices))}",
            details={"value": value, "valid_choices": sorted(valid_choices)}
        )


def validate_type(value: Any, expected_type: type, field_name: str) -> None:
    """
    Valida estritamente se o valor corresponde ao tipo esperado.
    Não aceita conversão implícita (ex: "true" para bool).

    Args:
        value: Valor a validar.
        expected_type: Tipo esperado (int, bool, str, float, list, dict).
        field_name: Nome do campo.

    Raises:
        ValidationException: Se o tipo estiver incorreto.
    """
    if value is None:
        return

    # bool é subclasse de int, mas queremos diferenciar
    if expected_type in (int, float) and isinstance(value, bool):
        raise ValidationException(
            f"{field_name} deve ser numérico, não booleano.",
            details={"value": value, "expected": expected_type.__name__, "got": "bool"}
        )

    if expected_type is float and isinstance(value, int):
        return

    if not isinstance(value, expected_type):
        raise ValidationException(
            f"{field_name} deve ser do tipo {expected_type.__name__}.",
            details={
                "value": value,
                "expected": expected_type.__name__,
                "got": type(value).__name__
            }
        )


def clean_cookie_list(values: Optional[Iterable[Any]]) -> List[str]:
    """
    Normaliza a lista de cookies de desejo.

    Remove entradas vazias e espaços nas bordas, preservando a ordem declarada.
    """
    if values is None:
        return []
    if isinstance(values, str):
        values = [values]
    return [str(v).strip() for v in values if v is not None and str(v).strip()]

