"""
Phone - Telefone brasileiro com DDD.

10 dígitos: fixo, (DD) NNNN-NNNN
11 dígitos: celular, (DD) NNNNN-NNNN
"""

from typing import Any, Mapping

from src.core.shared.result import Result
from src.core.shared.value_object import ValueObject

from .check_digits import only_digits


LANDLINE_LENGTH = 10
MOBILE_LENGTH = 11


class Phone(ValueObject):
    """Value Object: Telefone."""

    INVALID_MESSAGE = "Número de telefone inválido"

    @classmethod
    def create(cls, phone: Any) -> Result["Phone"]:
        if not isinstance(phone, str):
            return Result.fail(cls.INVALID_MESSAGE)

        cleaned = only_digits(phone)
        if not cls.is_valid(cleaned):
            return Result.fail(cls.INVALID_MESSAGE)

        return Result.ok(cls({"value": cleaned}))

    @classmethod
    def _validate(cls, props: Mapping[str, Any]) -> Result[None]:
        if not cls.is_valid(props.get("value")):
            return Result.fail(cls.INVALID_MESSAGE)
        return Result.ok()

    @classmethod
    def is_valid(cls, phone: Any) -> bool:
        if not isinstance(phone, str) or not (phone.isascii() and phone.isdigit()):
            return False
        return len(phone) in (LANDLINE_LENGTH, MOBILE_LENGTH)

    @property
    def value(self) -> str:
        return self.props["value"]

    @property
    def area_code(self) -> str:
        """DDD (dois primeiros dígitos)."""
        return self.value[:2]

    def format(self) -> str:
        v = self.value
        if len(v) == MOBILE_LENGTH:
            return f"({v[:2]}) {v[2:7]}-{v[7:]}"
        return f"({v[:2]}) {v[2:6]}-{v[6:]}"

    def is_whatsapp(self) -> bool:
        """Apenas celulares (11 dígitos) são elegíveis ao WhatsApp."""
        return len(self.value) == MOBILE_LENGTH

    def __str__(self) -> str:
        return self.format()
