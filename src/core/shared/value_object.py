"""
Value Objects - Objetos sem identidade, definidos pelos seus atributos.

Características:
- Imutáveis após a construção
- Igualdade estrutural (recursiva) entre propriedades
- Validados sempre na construção (nunca existe instância inválida)
- ``copy_with`` devolve uma nova instância dentro de um Result
"""

from abc import ABC, abstractmethod
from datetime import date, datetime
from types import MappingProxyType
from typing import Any, Dict, Generic, Mapping, TypeVar

from .exceptions import ValidationError
from .result import Result


V = TypeVar("V", bound="ValueObject")
P = TypeVar("P", bound=Mapping[str, Any])


def _values_equal(left: Any, right: Any) -> bool:
    """
    Compara dois valores de propriedade.

    Formas suportadas, em ordem: data/hora (por instante), value object
    aninhado, sequência, mapeamento e, por fim, valor simples.
    """
    if isinstance(left, (datetime, date)) and isinstance(right, (datetime, date)):
        return left == right
    if isinstance(left, ValueObject) and isinstance(right, ValueObject):
        return left.equals(right)
    if isinstance(left, (list, tuple)) and isinstance(right, (list, tuple)):
        return _sequences_equal(left, right)
    if isinstance(left, Mapping) and isinstance(right, Mapping):
        return _mappings_equal(left, right)
    return left == right


def _sequences_equal(left, right) -> bool:
    if len(left) != len(right):
        return False
    for item_left, item_right in zip(left, right):
        if isinstance(item_left, ValueObject) and isinstance(item_right, ValueObject):
            if not item_left.equals(item_right):
                return False
        elif item_left != item_right:
            return False
    return True


def _mappings_equal(left: Mapping[str, Any], right: Mapping[str, Any]) -> bool:
    if len(left) != len(right):
        return False
    for key, value in left.items():
        if key not in right:
            return False
        if not _values_equal(value, right[key]):
            return False
    return True


def _hashable(value: Any) -> Any:
    if isinstance(value, ValueObject):
        return hash(value)
    if isinstance(value, (list, tuple)):
        return tuple(_hashable(item) for item in value)
    if isinstance(value, Mapping):
        return tuple(sorted((key, _hashable(item)) for key, item in value.items()))
    if isinstance(value, (set, frozenset)):
        return frozenset(_hashable(item) for item in value)
    return value


class ValueObject(ABC, Generic[P]):
    """
    Classe base para Value Objects.

    Subclasses implementam ``_validate`` (classmethod) e normalmente
    expõem uma factory ``create`` que devolve Result. O construtor
    valida e lança ``ValidationError`` se as propriedades forem inválidas.

    Example:
        class Dinheiro(ValueObject):
            @classmethod
            def _validate(cls, props):
                if props["valor"] < 0:
                    return Result.fail("Valor não pode ser negativo")
                return Result.ok()

        preco = Dinheiro({"valor": 10, "moeda": "BRL"})
        novo = preco.copy_with(valor=12).get_value()
    """

    __slots__ = ("_props",)

    def __init__(self, props: P):
        guard = type(self)._validate(props)
        if guard.is_failure:
            raise ValidationError(type(self).__name__, props, guard.error)
        object.__setattr__(self, "_props", MappingProxyType(dict(props)))

    @classmethod
    @abstractmethod
    def _validate(cls, props: P) -> Result[None]:
        """Regra de validação do value object concreto."""
        raise NotImplementedError

    @classmethod
    def _rebuild(cls, props: Dict[str, Any]):
        """
        Reconstrói uma instância a partir de propriedades já validadas.

        Subclasses com construtor diferente de ``(props)`` devem sobrescrever.
        """
        return cls(props)

    @property
    def props(self) -> Mapping[str, Any]:
        """Visão somente leitura das propriedades."""
        return self._props

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} é imutável")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} é imutável")

    def equals(self, other: Any) -> bool:
        """
        Igualdade estrutural.

        Dois value objects da mesma classe são iguais se todas as
        propriedades forem recursivamente iguais.
        """
        if other is None or not isinstance(other, ValueObject):
            return False
        if other is self:
            return True
        if type(other) is not type(self):
            return False
        return _mappings_equal(self._props, other._props)

    def copy_with(self: V, **changes: Any) -> Result[V]:
        """
        Cria uma cópia com algumas propriedades alteradas.

        A nova combinação passa pela mesma validação; em caso de falha
        devolve Result de falha e a instância original segue intacta.
        """
        new_props = {**self._props, **changes}
        guard = type(self)._validate(new_props)
        if guard.is_failure:
            return Result.fail(guard.error)
        return Result.ok(type(self)._rebuild(new_props))

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __reduce__(self):
        return (type(self)._rebuild, (dict(self._props),))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValueObject):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return hash((type(self).__name__, _hashable(self._props)))

    def __repr__(self) -> str:
        fields = ", ".join(f"{key}={value!r}" for key, value in self._props.items())
        return f"{type(self).__name__}({fields})"
