"""
Testes Unitários para Domain Events.
"""

from datetime import timezone

import pytest

from src.core.shared.events import EventMetadata
from src.core.shared.identifiers import is_valid_id
from tests.sample_domain import DepositoRealizado


class TestDomainEvent:
    """Testes para a base de eventos."""

    def test_campos_gerados(self):
        event = DepositoRealizado(aggregate_id="conta-1", valor=10)

        assert is_valid_id(event.event_id)
        assert event.occurred_at.tzinfo == timezone.utc
        assert event.event_version == 1
        assert event.event_name == "DepositoRealizado"
        assert event.aggregate_type == "Conta"

    def test_aggregate_id_obrigatorio(self):
        with pytest.raises(ValueError):
            DepositoRealizado(valor=10)

    def test_evento_imutavel(self):
        event = DepositoRealizado(aggregate_id="conta-1", valor=10)

        with pytest.raises(AttributeError):
            event.valor = 20

    def test_to_dict(self):
        event = DepositoRealizado(aggregate_id="conta-1", valor=10)

        data = event.to_dict()

        assert data["event_name"] == "DepositoRealizado"
        assert data["aggregate_type"] == "Conta"
        assert data["payload"] == {"valor": 10}
        assert data["metadata"] is None

    def test_round_trip_com_metadata(self):
        metadata = EventMetadata(user_id="user-1", extra={"origem": "api"})
        event = DepositoRealizado(aggregate_id="conta-1", valor=10, metadata=metadata)

        restored = DepositoRealizado.from_dict(event.to_dict())

        assert restored.event_id == event.event_id
        assert restored.occurred_at == event.occurred_at
        assert restored.valor == 10
        assert restored.metadata.user_id == "user-1"
        assert restored.metadata.correlation_id == metadata.correlation_id
        assert restored.metadata.extra == {"origem": "api"}


class TestEventMetadata:
    """Testes para metadata."""

    def test_correlation_id_gerado(self):
        assert is_valid_id(EventMetadata().correlation_id)

    def test_to_dict_inclui_extra(self):
        data = EventMetadata(causation_id="evt-1", extra={"tenant": "a"}).to_dict()

        assert data["causation_id"] == "evt-1"
        assert data["tenant"] == "a"

    def test_evento_com_metadata_e_hashable(self):
        metadata = EventMetadata(correlation_id="c-1", extra={"origem": "api"})
        a = DepositoRealizado(aggregate_id="conta-1", event_id="e-1", valor=10, metadata=metadata)
        b = DepositoRealizado(
            aggregate_id="conta-1",
            event_id="e-1",
            occurred_at=a.occurred_at,
            valor=10,
            metadata=EventMetadata(correlation_id="c-1", extra={"origem": "api"}),
        )

        assert a == b
        assert hash(a) == hash(b)
        assert hash(metadata) == hash(EventMetadata(correlation_id="c-1", extra={"outro": 1}))
        assert metadata != EventMetadata(correlation_id="c-1", extra={"outro": 1})
