"""
Event Store em memória.

Cada agregado tem um stream append-only; a posição no stream é a
versão usada no controle de concorrência.
"""

import logging
from typing import Dict, List

from src.core.shared.events import DomainEvent
from src.core.shared.exceptions import ConcurrencyError
from src.core.shared.interfaces import EventStore
from src.core.shared.result import Result


logger = logging.getLogger(__name__)


class InMemoryEventStore(EventStore):
    """
    Example:
        store = InMemoryEventStore()
        store.append(evento, conta.id, expected_version=0)
        conta.load_from_history(store.get_events_for_aggregate(conta.id))
    """

    def __init__(self):
        self._streams: Dict[str, List[DomainEvent]] = {}

    def append(self, event: DomainEvent, aggregate_id: str, expected_version: int) -> Result[None]:
        stream = self._streams.setdefault(aggregate_id, [])
        if len(stream) != expected_version:
            logger.warning(
                f"Versão esperada {expected_version} difere da atual {len(stream)} "
                f"no stream {aggregate_id}"
            )
            return Result.fail(ConcurrencyError(event.aggregate_type, aggregate_id).message)

        stream.append(event)
        return Result.ok()

    def current_version(self, aggregate_id: str) -> int:
        return len(self._streams.get(aggregate_id, []))

    def get_events_for_aggregate(self, aggregate_id: str, since_version: int = 0) -> List[DomainEvent]:
        return list(self._streams.get(aggregate_id, [])[since_version:])
