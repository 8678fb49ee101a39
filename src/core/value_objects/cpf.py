"""
CPF - Cadastro de Pessoas Físicas.

Armazena apenas os 11 dígitos. Validação:
- 11 dígitos, não todos iguais
- 1º verificador: pesos 10..2 sobre os dígitos 0..8
- 2º verificador: pesos 11..2 sobre os dígitos 0..9
"""

from typing import Any, Mapping

from src.core.shared.result import Result
from src.core.shared.value_object import ValueObject

from .check_digits import all_same_digit, is_digit_string, mod11_check_digit, only_digits


class CPF(ValueObject):
    """
    Value Object: CPF.

    Example:
        result = CPF.create("111.444.777-35")
        cpf = result.get_value()
        cpf.value     # "11144477735"
        cpf.format()  # "111.444.777-35"
        cpf.mask()    # "***.***.***-35"
    """

    LENGTH = 11
    INVALID_MESSAGE = "CPF inválido"

    @classmethod
    def create(cls, cpf: Any) -> Result["CPF"]:
        if not isinstance(cpf, str):
            return Result.fail(cls.INVALID_MESSAGE)

        cleaned = only_digits(cpf)
        if not cls.is_valid(cleaned):
            return Result.fail(cls.INVALID_MESSAGE)

        return Result.ok(cls({"value": cleaned}))

    @classmethod
    def _validate(cls, props: Mapping[str, Any]) -> Result[None]:
        if not cls.is_valid(props.get("value")):
            return Result.fail(cls.INVALID_MESSAGE)
        return Result.ok()

    @classmethod
    def is_valid(cls, cpf: Any) -> bool:
        """Valida um CPF já normalizado (somente dígitos)."""
        if not is_digit_string(cpf, cls.LENGTH):
            return False

        # Padrões conhecidos como inválidos (000..., 111..., ...)
        if all_same_digit(cpf):
            return False

        digits = [int(char) for char in cpf]

        first = mod11_check_digit(digits[:9], range(10, 1, -1))
        if first != digits[9]:
            return False

        second = mod11_check_digit(digits[:10], range(11, 1, -1))
        return second == digits[10]

    @property
    def value(self) -> str:
        return self.props["value"]

    def format(self) -> str:
        """Formato NNN.NNN.NNN-NN."""
        v = self.value
        return f"{v[:3]}.{v[3:6]}.{v[6:9]}-{v[9:11]}"

    def mask(self) -> str:
        """Exibe apenas os dígitos verificadores."""
        return f"***.***.***-{self.value[-2:]}"

    def __str__(self) -> str:
        return self.format()
