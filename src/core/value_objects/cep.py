"""
CEP - Código de Endereçamento Postal.
"""

from typing import Any, Mapping

from src.core.shared.result import Result
from src.core.shared.value_object import ValueObject

from .check_digits import is_digit_string, only_digits


class CEP(ValueObject):
    """Value Object: CEP com 8 dígitos."""

    LENGTH = 8
    INVALID_MESSAGE = "CEP inválido"

    @classmethod
    def create(cls, cep: Any) -> Result["CEP"]:
        if not isinstance(cep, str):
            return Result.fail(cls.INVALID_MESSAGE)

        cleaned = only_digits(cep)
        if not cls.is_valid(cleaned):
            return Result.fail(cls.INVALID_MESSAGE)

        return Result.ok(cls({"value": cleaned}))

    @classmethod
    def _validate(cls, props: Mapping[str, Any]) -> Result[None]:
        if not cls.is_valid(props.get("value")):
            return Result.fail(cls.INVALID_MESSAGE)
        return Result.ok()

    @classmethod
    def is_valid(cls, cep: Any) -> bool:
        return is_digit_string(cep, cls.LENGTH)

    @property
    def value(self) -> str:
        return self.props["value"]

    def format(self) -> str:
        """Formato NNNNN-NNN."""
        return f"{self.value[:5]}-{self.value[5:8]}"

    def __str__(self) -> str:
        return self.format()
