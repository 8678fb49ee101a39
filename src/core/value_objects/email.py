"""
Email - Endereço de e-mail normalizado.

Normalização: trim + minúsculas, antes da validação.
"""

import re
from typing import Any, Mapping

from src.core.shared.result import Result
from src.core.shared.value_object import ValueObject


EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


class Email(ValueObject):
    """
    Value Object: Email.

    Example:
        email = Email.create(" Joao@Exemplo.COM ").get_value()
        email.value       # "joao@exemplo.com"
        email.domain      # "exemplo.com"
        email.mask()      # "j**o@exemplo.com"
    """

    INVALID_MESSAGE = "Endereço de e-mail inválido"

    @classmethod
    def create(cls, email: Any) -> Result["Email"]:
        if not isinstance(email, str):
            return Result.fail(cls.INVALID_MESSAGE)

        normalized = email.strip().lower()
        if not cls.is_valid(normalized):
            return Result.fail(cls.INVALID_MESSAGE)

        return Result.ok(cls({"value": normalized}))

    @classmethod
    def _validate(cls, props: Mapping[str, Any]) -> Result[None]:
        value = props.get("value")
        if not cls.is_valid(value):
            return Result.fail(cls.INVALID_MESSAGE)
        # Só aceita a forma já normalizada (vale também para copy_with)
        if value != value.strip().lower():
            return Result.fail(cls.INVALID_MESSAGE)
        return Result.ok()

    @classmethod
    def is_valid(cls, email: Any) -> bool:
        return isinstance(email, str) and EMAIL_PATTERN.fullmatch(email) is not None

    @property
    def value(self) -> str:
        return self.props["value"]

    @property
    def local_part(self) -> str:
        return self.value.split("@")[0]

    @property
    def domain(self) -> str:
        return self.value.split("@")[1]

    def mask(self) -> str:
        """
        Mascara a parte local, preservando o domínio.

        Com mais de 2 caracteres mantém o primeiro e o último;
        caso contrário mascara tudo.
        """
        local = self.local_part
        if len(local) > 2:
            masked = local[0] + "*" * (len(local) - 2) + local[-1]
        else:
            masked = "*" * len(local)
        return f"{masked}@{self.domain}"

    def __str__(self) -> str:
        return self.value
