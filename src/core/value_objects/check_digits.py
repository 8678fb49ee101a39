"""
Aritmética de dígitos verificadores (módulo 11) usada por CPF e CNPJ.
"""

import re
from typing import Sequence


_NON_DIGITS = re.compile(r"[^0-9]")


def only_digits(value: str) -> str:
    """Remove tudo que não for dígito ASCII."""
    return _NON_DIGITS.sub("", value)


def all_same_digit(digits: str) -> bool:
    return len(set(digits)) == 1


def mod11_check_digit(digits: Sequence[int], weights: Sequence[int]) -> int:
    """
    Calcula um dígito verificador módulo 11.

    Resto menor que 2 vira 0; caso contrário o dígito é 11 - resto.
    """
    remainder = sum(digit * weight for digit, weight in zip(digits, weights)) % 11
    return 0 if remainder < 2 else 11 - remainder


def is_digit_string(value, length: int) -> bool:
    """True se ``value`` for texto com exatamente ``length`` dígitos ASCII."""
    return isinstance(value, str) and len(value) == length and value.isascii() and value.isdigit()
