"""
Specification Pattern - Regras de negócio combináveis.

Uma especificação é um predicado sobre um candidato. Especificações
combinam com AND/OR/NOT (métodos ``and_``, ``or_``, ``not_`` ou os
operadores ``&``, ``|``, ``~``) gerando novos objetos compostos; os
operandos nunca são alterados.

Example:
    maior_de_idade = PredicateSpecification(
        lambda c: c.idade >= 18, "Cliente deve ser maior de idade"
    )
    com_email = PredicateSpecification(
        lambda c: c.email is not None, "Cliente deve ter e-mail"
    )

    regra = maior_de_idade & com_email
    if not regra.is_satisfied_by(cliente):
        return Result.fail(regra.reason_for_dissatisfaction())
"""

from abc import ABC, abstractmethod
from typing import Callable, Generic, Optional, TypeVar

from .result import Result


T = TypeVar("T")

DEFAULT_REASON = "Especificação não satisfeita"


class Specification(ABC, Generic[T]):
    """Classe base para especificações."""

    @abstractmethod
    def is_satisfied_by(self, candidate: T) -> bool:
        """Verifica se o candidato satisfaz a especificação."""
        raise NotImplementedError

    def and_(self, other: "Specification[T]") -> "Specification[T]":
        return AndSpecification(self, other)

    def or_(self, other: "Specification[T]") -> "Specification[T]":
        return OrSpecification(self, other)

    def not_(self) -> "Specification[T]":
        return NotSpecification(self)

    __and__ = and_
    __or__ = or_
    __invert__ = not_

    def reason_for_dissatisfaction(self) -> str:
        """
        Explica por que a especificação não foi satisfeita.

        Sobrescreva para mensagens significativas.
        """
        return DEFAULT_REASON

    def check(self, candidate: T) -> Result[T]:
        """Devolve o candidato em um Result, ou a falha com o motivo."""
        if self.is_satisfied_by(candidate):
            return Result.ok(candidate)
        return Result.fail(self.reason_for_dissatisfaction())


class AndSpecification(Specification[T]):
    """Satisfeita quando ambas as especificações são satisfeitas."""

    def __init__(self, left: Specification[T], right: Specification[T]):
        self._left = left
        self._right = right

    def is_satisfied_by(self, candidate: T) -> bool:
        return self._left.is_satisfied_by(candidate) and self._right.is_satisfied_by(candidate)

    def reason_for_dissatisfaction(self) -> str:
        return (
            f"{self._left.reason_for_dissatisfaction()} AND "
            f"{self._right.reason_for_dissatisfaction()}"
        )


class OrSpecification(Specification[T]):
    """Satisfeita quando ao menos uma das especificações é satisfeita."""

    def __init__(self, left: Specification[T], right: Specification[T]):
        self._left = left
        self._right = right

    def is_satisfied_by(self, candidate: T) -> bool:
        return self._left.is_satisfied_by(candidate) or self._right.is_satisfied_by(candidate)

    def reason_for_dissatisfaction(self) -> str:
        return (
            f"{self._left.reason_for_dissatisfaction()} OR "
            f"{self._right.reason_for_dissatisfaction()}"
        )


class NotSpecification(Specification[T]):
    """Satisfeita quando a especificação envolvida não é."""

    def __init__(self, wrapped: Specification[T]):
        self._wrapped = wrapped

    def is_satisfied_by(self, candidate: T) -> bool:
        return not self._wrapped.is_satisfied_by(candidate)

    def reason_for_dissatisfaction(self) -> str:
        return f"NOT {self._wrapped.reason_for_dissatisfaction()}"


class PredicateSpecification(Specification[T]):
    """Especificação genérica a partir de uma função predicado."""

    def __init__(self, predicate: Callable[[T], bool], reason: Optional[str] = None):
        self._predicate = predicate
        self._reason = reason

    def is_satisfied_by(self, candidate: T) -> bool:
        return bool(self._predicate(candidate))

    def reason_for_dissatisfaction(self) -> str:
        return self._reason or super().reason_for_dissatisfaction()
