"""
CNPJ - Cadastro Nacional da Pessoa Jurídica.

Armazena apenas os 14 dígitos; os verificadores seguem módulo 11
com os pesos oficiais.
"""

from typing import Any, Mapping

from src.core.shared.result import Result
from src.core.shared.value_object import ValueObject

from .check_digits import all_same_digit, is_digit_string, mod11_check_digit, only_digits


FIRST_WEIGHTS = (5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)
SECOND_WEIGHTS = (6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)


class CNPJ(ValueObject):
    """
    Value Object: CNPJ.

    Example:
        cnpj = CNPJ.create("11.222.333/0001-81").get_value()
        cnpj.format()  # "11.222.333/0001-81"
    """

    LENGTH = 14
    INVALID_MESSAGE = "CNPJ inválido"

    @classmethod
    def create(cls, cnpj: Any) -> Result["CNPJ"]:
        if not isinstance(cnpj, str):
            return Result.fail(cls.INVALID_MESSAGE)

        cleaned = only_digits(cnpj)
        if not cls.is_valid(cleaned):
            return Result.fail(cls.INVALID_MESSAGE)

        return Result.ok(cls({"value": cleaned}))

    @classmethod
    def _validate(cls, props: Mapping[str, Any]) -> Result[None]:
        if not cls.is_valid(props.get("value")):
            return Result.fail(cls.INVALID_MESSAGE)
        return Result.ok()

    @classmethod
    def is_valid(cls, cnpj: Any) -> bool:
        """Valida um CNPJ já normalizado (somente dígitos)."""
        if not is_digit_string(cnpj, cls.LENGTH):
            return False

        if all_same_digit(cnpj):
            return False

        digits = [int(char) for char in cnpj]

        if mod11_check_digit(digits[:12], FIRST_WEIGHTS) != digits[12]:
            return False

        return mod11_check_digit(digits[:13], SECOND_WEIGHTS) == digits[13]

    @property
    def value(self) -> str:
        return self.props["value"]

    def format(self) -> str:
        """Formato NN.NNN.NNN/NNNN-NN."""
        v = self.value
        return f"{v[:2]}.{v[2:5]}.{v[5:8]}/{v[8:12]}-{v[12:14]}"

    def mask(self) -> str:
        return f"**.***.***/****-{self.value[-2:]}"

    def __str__(self) -> str:
        return self.format()
