"""
Ports - contratos que os adapters implementam.

Tipos de Ports:
- Repository: persistência de agregados
- UnitOfWork: transação + despacho de eventos após commit
- EventPublisher: entrega de eventos a consumidores
- EventStore: histórico de eventos (event sourcing)
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Generic, List, Sequence, TypeVar

from .aggregate_root import AggregateRoot
from .events import DomainEvent, DomainEventHandler
from .result import Result
from .specification import Specification


T = TypeVar("T", bound=AggregateRoot)


@dataclass(frozen=True)
class PaginationParams:
    """Parâmetros de paginação."""

    page: int = 1
    page_size: int = 20
    sort_by: str = ""
    sort_order: str = "asc"

    @property
    def offset(self) -> int:
        """Calcula offset para a consulta."""
        return (self.page - 1) * self.page_size


@dataclass
class PaginatedResult(Generic[T]):
    """Resultado paginado."""

    items: List[T]
    total: int
    page: int
    page_size: int

    @property
    def total_pages(self) -> int:
        """Calcula total de páginas."""
        return (self.total + self.page_size - 1) // self.page_size

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    def to_dict(self) -> Dict[str, Any]:
        return {
            "items": list(self.items),
            "total": self.total,
            "page": self.page,
            "page_size": self.page_size,
            "total_pages": self.total_pages,
            "has_next": self.has_next,
            "has_previous": self.has_previous,
        }


class Repository(ABC, Generic[T]):
    """
    Interface genérica para repositórios de agregados.

    Falhas esperadas (não encontrado, conflito de versão) retornam
    Result de falha em vez de lançar exceção.

    Type Parameters:
        T: Tipo do agregado gerenciado pelo repositório
    """

    @abstractmethod
    def exists(self, entity_id: str) -> bool:
        raise NotImplementedError

    @abstractmethod
    def get_by_id(self, entity_id: str) -> Result[T]:
        """
        Busca agregado por ID.

        Returns:
            Result com o agregado, ou falha de EntityNotFound
        """
        raise NotImplementedError

    @abstractmethod
    def list_all(self) -> Result[List[T]]:
        raise NotImplementedError

    @abstractmethod
    def save(self, entity: T) -> Result[None]:
        """Persiste agregado (create ou update)."""
        raise NotImplementedError

    @abstractmethod
    def delete(self, entity_id: str) -> Result[None]:
        raise NotImplementedError

    @abstractmethod
    def find_by_specification(self, spec: Specification[T]) -> Result[List[T]]:
        raise NotImplementedError

    @abstractmethod
    def count(self) -> Result[int]:
        raise NotImplementedError

    @abstractmethod
    def count_by_specification(self, spec: Specification[T]) -> Result[int]:
        raise NotImplementedError

    @abstractmethod
    def list_paginated(self, params: PaginationParams) -> Result[PaginatedResult[T]]:
        raise NotImplementedError

    def save_many(self, entities: Sequence[T]) -> Result[None]:
        """Salva vários agregados; para na primeira falha."""
        for entity in entities:
            result = self.save(entity)
            if result.is_failure:
                return result
        return Result.ok()

    def delete_many(self, entity_ids: Sequence[str]) -> Result[None]:
        """Remove vários agregados; para na primeira falha."""
        for entity_id in entity_ids:
            result = self.delete(entity_id)
            if result.is_failure:
                return result
        return Result.ok()


class UnitOfWork(ABC):
    """
    Agrupa os agregados alterados em uma operação e os grava juntos.

    Como context manager, sair do bloco sem exceção faz commit e
    sair com exceção faz rollback (a exceção segue propagando):

        with uow:
            uow.register_new(conta)
            uow.register_modified(cliente)

    Eventos dos agregados registrados só saem do buffer no commit.
    """

    def __init__(self):
        self._events: List[DomainEvent] = []
        self._new: List[AggregateRoot] = []
        self._modified: List[AggregateRoot] = []
        self._deleted: List[AggregateRoot] = []

    def __enter__(self) -> "UnitOfWork":
        self.begin()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        if exc_type is not None:
            self.rollback()
        else:
            self.commit()
        return False

    @abstractmethod
    def begin(self) -> None:
        """Inicia uma nova transação."""
        raise NotImplementedError

    @abstractmethod
    def commit(self) -> None:
        """
        Grava os agregados registrados e libera seus eventos.

        Depois de gravar, chama ``mark_as_committed()`` em cada agregado
        e só então publica os eventos coletados.
        """
        raise NotImplementedError

    @abstractmethod
    def rollback(self) -> None:
        """Desfaz as mudanças e descarta eventos."""
        raise NotImplementedError

    @abstractmethod
    def get_repository(self, aggregate_type: str) -> Repository:
        """Repositório do tipo de agregado informado."""
        raise NotImplementedError

    def register_new(self, aggregate: AggregateRoot) -> None:
        if aggregate in self._new:
            return
        if aggregate in self._modified:
            self._modified.remove(aggregate)
        self._new.append(aggregate)

    def register_modified(self, aggregate: AggregateRoot) -> None:
        if aggregate not in self._modified and aggregate not in self._new:
            self._modified.append(aggregate)

    def register_deleted(self, aggregate: AggregateRoot) -> None:
        self._deleted.append(aggregate)

    def publish_event(self, event: DomainEvent) -> None:
        """
        Enfileira evento avulso para publicação após commit.

        Eventos de agregados registrados são coletados automaticamente.
        """
        self._events.append(event)

    def collect_events(self) -> List[DomainEvent]:
        """Eventos enfileirados + pendentes dos agregados registrados."""
        events = list(self._events)
        for aggregate in self._new + self._modified:
            events.extend(aggregate.get_uncommitted_events())
        return events

    def clear_events(self) -> None:
        self._events.clear()

    def _clear_tracking(self) -> None:
        self._new.clear()
        self._modified.clear()
        self._deleted.clear()


class EventPublisher(ABC):
    """Entrega eventos aos handlers inscritos."""

    @abstractmethod
    def publish(self, event: DomainEvent) -> None:
        raise NotImplementedError

    def publish_batch(self, events: Sequence[DomainEvent]) -> None:
        """Publica múltiplos eventos, na ordem."""
        for event in events:
            self.publish(event)

    @abstractmethod
    def subscribe(self, handler: DomainEventHandler) -> None:
        raise NotImplementedError

    @abstractmethod
    def unsubscribe(self, handler: DomainEventHandler) -> None:
        raise NotImplementedError


class EventStore(ABC):
    """
    Streams append-only de eventos por agregado.

    O histórico alimenta ``AggregateRoot.load_from_history``.
    """

    @abstractmethod
    def append(
        self,
        event: DomainEvent,
        aggregate_id: str,
        expected_version: int,
    ) -> Result[None]:
        """
        Anexa o evento ao stream do agregado.

        Returns:
            Falha de concorrência se a versão não corresponder
        """
        raise NotImplementedError

    @abstractmethod
    def get_events_for_aggregate(
        self,
        aggregate_id: str,
        since_version: int = 0,
    ) -> List[DomainEvent]:
        """Eventos do agregado, ordenados por versão."""
        raise NotImplementedError
