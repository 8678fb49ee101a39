"""
Unit of Work em memória.

Coordena os agregados registrados durante uma operação:
1. Verifica conflitos de versão (antes de escrever qualquer coisa)
2. Persiste novos/modificados e remove os excluídos
3. Coleta os eventos pendentes e reconhece o commit nos agregados
4. Grava os eventos no Event Store (opcional)
5. Publica os eventos

Eventos só são publicados após commit bem-sucedido; rollback
descarta eventos e registros.
"""

import logging
from typing import Dict, List, Optional

from src.core.shared.aggregate_root import AggregateRoot
from src.core.shared.events import DomainEvent
from src.core.shared.exceptions import ConcurrencyError
from src.core.shared.interfaces import EventPublisher, EventStore, UnitOfWork

from .repository import InMemoryRepository


logger = logging.getLogger(__name__)


class InMemoryUnitOfWork(UnitOfWork):
    """
    Unit of Work em memória.

    Example:
        uow = InMemoryUnitOfWork(event_publisher=publisher)
        with uow:
            uow.register_new(cliente)

        assert uow.committed
        assert cliente.version == 1
    """

    def __init__(
        self,
        event_publisher: Optional[EventPublisher] = None,
        event_store: Optional[EventStore] = None,
        repositories: Optional[Dict[str, InMemoryRepository]] = None,
    ):
        super().__init__()
        self._event_publisher = event_publisher
        self._event_store = event_store
        self._repositories = repositories if repositories is not None else {}
        self._committed = False
        self._rolled_back = False
        self._published_events: List[DomainEvent] = []

    def begin(self) -> None:
        self._committed = False
        self._rolled_back = False
        logger.debug("Transação iniciada")

    def get_repository(self, aggregate_type: str) -> InMemoryRepository:
        if aggregate_type not in self._repositories:
            self._repositories[aggregate_type] = InMemoryRepository(aggregate_type)
        return self._repositories[aggregate_type]

    def _repository_for(self, aggregate: AggregateRoot) -> InMemoryRepository:
        return self.get_repository(type(aggregate).__name__)

    def commit(self) -> None:
        """
        Persiste os agregados registrados e publica eventos.

        Raises:
            ConcurrencyError: Se algum agregado foi alterado por outro
                processo; nada é gravado nesse caso.
        """
        if self._committed or self._rolled_back:
            logger.debug("Transação já finalizada")
            return

        to_save = self._new + self._modified
        for aggregate in to_save:
            if self._repository_for(aggregate).has_version_conflict(aggregate):
                self.rollback()
                raise ConcurrencyError(type(aggregate).__name__, aggregate.id)

        for aggregate in to_save:
            result = self._repository_for(aggregate).save(aggregate)
            if result.is_failure:
                logger.error(f"Falha ao gravar {type(aggregate).__name__} {aggregate.id}: {result.error}")
                self.rollback()
                raise ConcurrencyError(type(aggregate).__name__, aggregate.id)

        for aggregate in self._deleted:
            result = self._repository_for(aggregate).delete(aggregate.id)
            if result.is_failure:
                logger.warning(f"Remoção ignorada: {result.error}")

        events = self.collect_events()
        streams = {aggregate.id: aggregate.get_uncommitted_events() for aggregate in to_save}

        for aggregate in to_save:
            aggregate.mark_as_committed()

        self._committed = True
        logger.debug(f"Transação comitada ({len(to_save)} agregados, {len(events)} eventos)")

        if self._event_store is not None:
            self._persist_events(streams)

        if events:
            self._published_events.extend(events)
            if self._event_publisher is not None:
                self._event_publisher.publish_batch(events)

        self.clear_events()
        self._clear_tracking()

    def _persist_events(self, streams: Dict[str, tuple]) -> None:
        for aggregate_id, events in streams.items():
            expected = len(self._event_store.get_events_for_aggregate(aggregate_id))
            for event in events:
                result = self._event_store.append(event, aggregate_id, expected)
                if result.is_failure:
                    logger.error(f"Falha ao gravar evento {event.event_name}: {result.error}")
                    break
                expected += 1

    def rollback(self) -> None:
        if self._committed or self._rolled_back:
            logger.debug("Transação já finalizada")
            return

        self._rolled_back = True
        self.clear_events()
        self._clear_tracking()
        logger.debug("Transação revertida")

    @property
    def committed(self) -> bool:
        return self._committed

    @property
    def rolled_back(self) -> bool:
        return self._rolled_back

    @property
    def published_events(self) -> List[DomainEvent]:
        """Eventos liberados pelos commits desta instância."""
        return list(self._published_events)
