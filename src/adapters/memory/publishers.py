"""
Event Publisher em memória.

Loga cada evento e despacha para os handlers inscritos de forma
síncrona. Padrão Observer/Pub-Sub para desacoplamento.
"""

import json
import logging
from typing import List

from src.core.shared.events import DomainEvent, DomainEventHandler
from src.core.shared.interfaces import EventPublisher


logger = logging.getLogger(__name__)

ALL_EVENTS = "*"


class InMemoryEventPublisher(EventPublisher):
    """
    Publisher síncrono.

    Falha em um handler é logada e não interrompe os demais.

    Example:
        publisher = InMemoryEventPublisher()
        publisher.subscribe(EnviarBoasVindas())
        publisher.publish(ClienteCadastrado(aggregate_id=cliente.id))
    """

    def __init__(self, log_level: int = logging.INFO):
        self._log_level = log_level
        self._handlers: List[DomainEventHandler] = []
        self._published_events: List[DomainEvent] = []

    def publish(self, event: DomainEvent) -> None:
        logger.log(
            self._log_level,
            f"[EVENT] {event.event_name} | "
            f"aggregate={event.aggregate_id} | "
            f"data={json.dumps(event.to_dict(), default=str)}"
        )
        self._published_events.append(event)
        self._dispatch_to_handlers(event)

    def subscribe(self, handler: DomainEventHandler) -> None:
        if handler not in self._handlers:
            self._handlers.append(handler)

    def unsubscribe(self, handler: DomainEventHandler) -> None:
        if handler in self._handlers:
            self._handlers.remove(handler)

    def _dispatch_to_handlers(self, event: DomainEvent) -> None:
        for handler in list(self._handlers):
            subscribed = handler.subscribed_to()
            if event.event_name not in subscribed and ALL_EVENTS not in subscribed:
                continue
            try:
                handler.handle(event)
            except Exception as e:
                logger.error(
                    f"Erro em handler {type(handler).__name__} para {event.event_name}: {e}",
                    exc_info=True,
                )

    @property
    def published_events(self) -> List[DomainEvent]:
        """Eventos publicados até agora (na ordem)."""
        return list(self._published_events)

    def reset(self) -> None:
        """Reset para próximo teste."""
        self._published_events.clear()
