"""
Mappers - Conversão entre domínio, DTOs e persistência.
"""

from abc import ABC, abstractmethod
from typing import Dict, Generic, List, Sequence, TypeVar

from .exceptions import InvalidOperationError


D = TypeVar("D")
DTO = TypeVar("DTO")
M = TypeVar("M")


class BaseMapper(ABC, Generic[D, DTO, M]):
    """
    Mapper base com helpers para listas.

    Type Parameters:
        D: Tipo de domínio
        DTO: Representação para a camada de apresentação
        M: Modelo de persistência
    """

    @abstractmethod
    def to_dto(self, domain: D) -> DTO:
        raise NotImplementedError

    @abstractmethod
    def to_domain(self, dto: DTO) -> D:
        raise NotImplementedError

    @abstractmethod
    def to_persistence(self, domain: D) -> M:
        raise NotImplementedError

    @abstractmethod
    def from_persistence(self, model: M) -> D:
        raise NotImplementedError

    def to_dto_list(self, domains: Sequence[D]) -> List[DTO]:
        return [self.to_dto(domain) for domain in domains]

    def to_domain_list(self, dtos: Sequence[DTO]) -> List[D]:
        return [self.to_domain(dto) for dto in dtos]

    def to_persistence_list(self, domains: Sequence[D]) -> List[M]:
        return [self.to_persistence(domain) for domain in domains]

    def from_persistence_list(self, models: Sequence[M]) -> List[D]:
        return [self.from_persistence(model) for model in models]


class MapperRegistry:
    """Registro de mappers por nome de tipo."""

    def __init__(self):
        self._mappers: Dict[str, BaseMapper] = {}

    def register(self, type_name: str, mapper: BaseMapper) -> None:
        self._mappers[type_name] = mapper

    def get_mapper(self, type_name: str) -> BaseMapper:
        """
        Raises:
            InvalidOperationError: Se nenhum mapper foi registrado
        """
        mapper = self._mappers.get(type_name)
        if mapper is None:
            raise InvalidOperationError(f"Nenhum mapper registrado para o tipo: {type_name}")
        return mapper

    def has_mapper(self, type_name: str) -> bool:
        return type_name in self._mappers

    def clear(self) -> None:
        self._mappers.clear()
