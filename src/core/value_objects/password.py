"""
Password - Senha com política de força.

A análise de força é uma política de domínio pura: pontuação e
motivos textuais. Como exibir esses motivos é decisão da camada
de apresentação.
"""

import re
from dataclasses import dataclass
from typing import Any, Mapping, Tuple

from src.core.shared.result import Result
from src.core.shared.value_object import ValueObject


MIN_LENGTH = 8
SPECIAL_CHARS = re.compile(r"[!@#$%^&*(),.?\":{}|<>]")


@dataclass(frozen=True)
class PasswordStrength:
    """Resultado da análise de força (score de 0 a 5)."""

    is_valid: bool
    score: int
    reasons: Tuple[str, ...]


class Password(ValueObject):
    """
    Value Object: Senha.

    Senhas já com hash são aceitas sem análise de força.

    Example:
        Password.create("fraca").error
        # "Senha deve ter pelo menos 8 caracteres; ..."
    """

    @classmethod
    def create(cls, password: Any, is_hashed: bool = False) -> Result["Password"]:
        if not isinstance(password, str) or not password:
            return Result.fail("Senha é obrigatória")

        if is_hashed:
            return cls.create_hashed(password)

        analysis = cls.analyze_strength(password)
        if not analysis.is_valid:
            return Result.fail("; ".join(analysis.reasons))

        return Result.ok(cls({"value": password, "is_hashed": False}))

    @classmethod
    def create_hashed(cls, hashed_password: Any) -> Result["Password"]:
        if not isinstance(hashed_password, str) or not hashed_password:
            return Result.fail("Hash de senha é obrigatório")
        return Result.ok(cls({"value": hashed_password, "is_hashed": True}))

    @classmethod
    def _validate(cls, props: Mapping[str, Any]) -> Result[None]:
        value = props.get("value")
        if not isinstance(value, str) or not value:
            return Result.fail("Senha é obrigatória")
        if props.get("is_hashed"):
            return Result.ok()

        analysis = cls.analyze_strength(value)
        if not analysis.is_valid:
            return Result.fail("; ".join(analysis.reasons))
        return Result.ok()

    @staticmethod
    def analyze_strength(password: str) -> PasswordStrength:
        """
        Avalia a senha contra as cinco regras da política.

        Cada regra atendida soma 1 ponto; cada regra violada gera um motivo.
        """
        checks = (
            (len(password) >= MIN_LENGTH, f"Senha deve ter pelo menos {MIN_LENGTH} caracteres"),
            (re.search(r"[a-z]", password) is not None, "Senha deve conter ao menos uma letra minúscula"),
            (re.search(r"[A-Z]", password) is not None, "Senha deve conter ao menos uma letra maiúscula"),
            (re.search(r"[0-9]", password) is not None, "Senha deve conter ao menos um número"),
            (SPECIAL_CHARS.search(password) is not None, "Senha deve conter ao menos um caractere especial"),
        )
        reasons = tuple(reason for passed, reason in checks if not passed)
        score = sum(1 for passed, _ in checks if passed)
        return PasswordStrength(is_valid=not reasons, score=score, reasons=reasons)

    @property
    def value(self) -> str:
        return self.props["value"]

    @property
    def is_hashed(self) -> bool:
        return self.props["is_hashed"]

    def __repr__(self) -> str:
        return f"Password(is_hashed={self.is_hashed})"
