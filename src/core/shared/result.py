"""
Result - Computações falíveis sem exceções.

Um Result é sempre sucesso (com valor opcional) ou falha (com uma
mensagem de erro). Falhas de negócio esperadas trafegam como Result;
apenas violações de invariantes internas viram exceção.

Example:
    result = CPF.create("111.444.777-35")
    if result.is_failure:
        return Result.fail(result.error)
    cpf = result.get_value()
"""

import asyncio
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Generic, Iterable, Optional, TypeVar

from .exceptions import InvalidOperationError


T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Result(Generic[T]):
    """
    Resultado de uma operação que pode falhar.

    Use as factories ``Result.ok`` e ``Result.fail``; o construtor
    rejeita combinações malformadas (sucesso com erro ou falha sem erro).

    Attributes:
        is_success: True se a operação teve sucesso
        error: Mensagem de erro (apenas em falhas)
    """

    is_success: bool
    error: Optional[str] = None
    _value: Optional[T] = None

    def __post_init__(self):
        if self.is_success and self.error is not None:
            raise InvalidOperationError(
                "Um Result de sucesso não pode conter erro"
            )
        if not self.is_success and not self.error:
            raise InvalidOperationError(
                "Um Result de falha precisa de uma mensagem de erro"
            )
        if not self.is_success and self._value is not None:
            raise InvalidOperationError(
                "Um Result de falha não pode conter valor"
            )

    @property
    def is_failure(self) -> bool:
        return not self.is_success

    @classmethod
    def ok(cls, value: Optional[T] = None) -> "Result[T]":
        """Cria um Result de sucesso."""
        return cls(True, None, value)

    @classmethod
    def fail(cls, error: str) -> "Result[T]":
        """Cria um Result de falha."""
        return cls(False, error)

    def get_value(self) -> T:
        """
        Retorna o valor de um Result de sucesso.

        Raises:
            InvalidOperationError: Se o Result for uma falha
        """
        if not self.is_success:
            raise InvalidOperationError(
                "Não é possível obter o valor de um Result de falha. "
                "Use 'get_error_value' no lugar."
            )
        return self._value

    def get_error_value(self) -> Optional[str]:
        return self.error

    def map(self, fn: Callable[[T], U]) -> "Result[U]":
        """Aplica ``fn`` ao valor em caso de sucesso; repassa a falha."""
        if self.is_failure:
            return Result.fail(self.error)
        return Result.ok(fn(self._value))

    def flat_map(self, fn: Callable[[T], "Result[U]"]) -> "Result[U]":
        """Encadeia uma operação que também retorna Result."""
        if self.is_failure:
            return Result.fail(self.error)
        return fn(self._value)

    def map_error(self, fn: Callable[[str], str]) -> "Result[T]":
        """Transforma apenas a mensagem de erro."""
        if self.is_success:
            return self
        return Result.fail(fn(self.error))

    @staticmethod
    def combine(results: Iterable["Result[Any]"]) -> "Result[Any]":
        """
        Retorna a primeira falha encontrada, ou sucesso.

        A ordem de entrada define qual falha "vence".
        """
        for result in results:
            if result.is_failure:
                return result
        return Result.ok()

    @staticmethod
    async def combine_async(pending: Iterable[Awaitable["Result[Any]"]]) -> "Result[Any]":
        """
        Aguarda todos os Results concorrentemente e combina em ordem.

        Não há timeout nem cancelamento; quem fornece as operações
        pendentes é responsável por isso.
        """
        resolved = await asyncio.gather(*pending)
        return Result.combine(resolved)

    def __repr__(self) -> str:
        if self.is_success:
            return f"Result.ok({self._value!r})"
        return f"Result.fail({self.error!r})"
