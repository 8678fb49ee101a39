"""
Entidades - Objetos com identidade própria.

Uma entidade é identificada pelo seu ID (ULID), não pelos seus
atributos. As propriedades são validadas na construção e em toda
atualização; uma atualização inválida é rejeitada e o estado
anterior permanece.
"""

from abc import ABC, abstractmethod
from types import MappingProxyType
from typing import Any, Dict, Generic, Mapping, Optional, TypeVar

from .exceptions import InvalidEntityError
from .identifiers import generate_id
from .result import Result


P = TypeVar("P", bound=Mapping[str, Any])


class Entity(ABC, Generic[P]):
    """
    Classe base para entidades de domínio.

    Invariantes:
    - Toda instância tem ID (gerado se não informado)
    - Propriedades sempre válidas segundo ``_validate``
    - Igualdade apenas por ID, dentro da mesma hierarquia

    Example:
        class Cliente(Entity):
            @classmethod
            def _validate(cls, props):
                if not props.get("nome"):
                    return Result.fail("Nome é obrigatório")
                return Result.ok()

            @classmethod
            def create(cls, nome, email):
                return cls._build({"nome": nome, "email": email})

            def renomear(self, nome):
                return self._update(nome=nome)
    """

    def __init__(self, props: P, entity_id: Optional[str] = None):
        guard = type(self)._validate(props)
        if guard.is_failure:
            raise InvalidEntityError(type(self).__name__, guard.error)

        self._id = entity_id or generate_id()
        self._props: Dict[str, Any] = dict(props)

    @classmethod
    @abstractmethod
    def _validate(cls, props: Mapping[str, Any]) -> Result[None]:
        """Regra de validação da entidade concreta."""
        raise NotImplementedError

    @classmethod
    def _build(cls, props: P, entity_id: Optional[str] = None) -> Result:
        """
        Factory falível usada pelos ``create`` das subclasses.

        Valida antes de construir, devolvendo Result em vez de lançar.
        """
        guard = cls._validate(props)
        if guard.is_failure:
            return Result.fail(guard.error)
        return Result.ok(cls(props, entity_id))

    @property
    def id(self) -> str:
        return self._id

    @property
    def props(self) -> Mapping[str, Any]:
        """Visão somente leitura das propriedades atuais."""
        return MappingProxyType(self._props)

    def _update(self, **changes: Any) -> Result[None]:
        """
        Atualiza propriedades com validação.

        Se a nova combinação for inválida, nada é alterado.
        """
        new_props = {**self._props, **changes}
        guard = type(self)._validate(new_props)
        if guard.is_failure:
            return guard
        self._props = new_props
        return Result.ok()

    def equals(self, other: Any) -> bool:
        """
        Compara entidades pela identidade (ID).

        Entidades de hierarquias não relacionadas nunca são iguais,
        mesmo que os IDs coincidam.
        """
        if other is None:
            return False
        if other is self:
            return True
        if not isinstance(other, Entity):
            return False
        if not (isinstance(other, type(self)) or isinstance(self, type(other))):
            return False
        return self._id == other._id

    def __eq__(self, other: object) -> bool:
        """Comparação por ID (identidade de entidade)."""
        if not isinstance(other, Entity):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        """Hash baseado em ID."""
        return hash(self._id)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self._id})"
