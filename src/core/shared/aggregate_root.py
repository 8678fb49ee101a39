"""
Aggregate Root - Fronteira de consistência com eventos de domínio.

Estados (por instância):
    Pendente(eventos=[], versão=v)
        → mutação de domínio: adiciona 1 evento, versão inalterada
        → mark_as_committed(): eventos=[], versão=v+1

A versão só avança pelo reconhecimento explícito de commit ou pelo
replay de histórico (``load_from_history``), nunca por alteração
comum de propriedades.
"""

import logging
from typing import Any, Iterable, List, Optional, Tuple

from .entity import Entity, P
from .events import DomainEvent
from .result import Result


logger = logging.getLogger(__name__)


class AggregateRoot(Entity[P]):
    """
    Classe base para agregados.

    O buffer de eventos e a versão pertencem exclusivamente ao
    agregado; de fora só existem visões somente leitura.

    Example:
        class Conta(AggregateRoot):
            def depositar(self, valor):
                return self._record(
                    DepositoRealizado(aggregate_id=self.id, valor=valor),
                    saldo=self.props["saldo"] + valor,
                )
    """

    def __init__(self, props: P, entity_id: Optional[str] = None):
        super().__init__(props, entity_id)
        self._domain_events: List[DomainEvent] = []
        self._version = 0

    @property
    def domain_events(self) -> Tuple[DomainEvent, ...]:
        """Eventos pendentes (somente leitura)."""
        return tuple(self._domain_events)

    @property
    def version(self) -> int:
        """Versão para controle de concorrência otimista."""
        return self._version

    def _add_domain_event(self, event: DomainEvent) -> None:
        """Registra um evento para despacho posterior."""
        self._domain_events.append(event)
        self._on_domain_event_added(event)

    def _remove_domain_event(self, event: DomainEvent) -> None:
        self._domain_events = [
            pending for pending in self._domain_events if pending is not event
        ]

    def _on_domain_event_added(self, event: DomainEvent) -> None:
        """Hook chamado a cada evento registrado."""
        logger.debug(
            f"{type(self).__name__} {self.id}: evento {event.event_name} registrado "
            f"({len(self._domain_events)} pendentes)"
        )

    def _record(self, event: DomainEvent, **changes: Any) -> Result[None]:
        """
        Aplica alterações e registra o evento correspondente.

        Tudo ou nada: se a validação falhar, propriedades, versão e
        buffer de eventos permanecem como estavam.
        """
        if changes:
            result = self._update(**changes)
            if result.is_failure:
                return result
        self._add_domain_event(event)
        return Result.ok()

    def clear_events(self) -> None:
        """Descarta os eventos pendentes (após despachá-los)."""
        self._domain_events = []

    def mark_as_committed(self) -> None:
        """
        Reconhece a persistência do agregado.

        Avança a versão em exatamente 1, independente de quantos
        eventos estavam pendentes, e esvazia o buffer.
        """
        self._version += 1
        self.clear_events()

    def has_uncommitted_events(self) -> bool:
        return len(self._domain_events) > 0

    def get_uncommitted_events(self) -> Tuple[DomainEvent, ...]:
        """Cópia dos eventos pendentes, sem esvaziá-los."""
        return tuple(self._domain_events)

    def _apply(self, event: DomainEvent) -> None:
        """
        Aplica um evento histórico ao estado (event sourcing).

        Agregados com event sourcing sobrescrevem este método.
        """

    def load_from_history(self, events: Iterable[DomainEvent]) -> None:
        """
        Reconstrói o estado reaplicando eventos históricos.

        A versão avança uma vez por evento reaplicado. Usado apenas
        para reconstrução, nunca para criação.
        """
        for event in events:
            self._apply(event)
            self._version += 1

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}("
            f"id={self.id}, "
            f"version={self._version}, "
            f"pending_events={len(self._domain_events)}"
            f")"
        )
