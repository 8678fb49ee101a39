"""
Domain Events - Registro de mudanças significativas.

Um evento é um fato já ocorrido em um agregado: dataclass congelada
com ULID e timestamp UTC gerados, serializável em dicionário
(``to_dict``/``from_dict``) para o Event Store e para os logs.

Fluxo:
    - Agregados acumulam eventos enquanto são alterados
    - O Unit of Work publica os eventos após o commit
    - ``mark_as_committed()`` esvazia o buffer do agregado
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, ClassVar, Dict, List, Mapping, Optional

from .identifiers import generate_id


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class EventMetadata:
    """
    Contexto de quem/o que disparou o evento.

    ``correlation_id`` agrupa eventos de uma mesma operação;
    ``causation_id`` aponta para o evento anterior da cadeia.
    Chaves desconhecidas em ``from_dict`` vão para ``extra``.
    """

    correlation_id: str = field(default_factory=generate_id)
    causation_id: Optional[str] = None
    user_id: Optional[str] = None
    ip_address: Optional[str] = None
    user_agent: Optional[str] = None
    extra: Mapping[str, Any] = field(default_factory=dict, hash=False)

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "correlation_id": self.correlation_id,
            "causation_id": self.causation_id,
            "user_id": self.user_id,
            "ip_address": self.ip_address,
            "user_agent": self.user_agent,
        }
        data.update(self.extra)
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "EventMetadata":
        known = {"correlation_id", "causation_id", "user_id", "ip_address", "user_agent"}
        kwargs = {key: data[key] for key in known if data.get(key) is not None}
        extra = {key: value for key, value in data.items() if key not in known}
        return cls(extra=extra, **kwargs)


@dataclass(frozen=True)
class DomainEvent(ABC):
    """
    Base dos eventos de domínio.

    Subclasses declaram os campos do payload (todos com default, por
    causa da herança de dataclass) e informam ``aggregate_type``.
    ``event_version`` é a versão do schema do payload, não do agregado.

    Example:
        @dataclass(frozen=True)
        class ClienteCadastrado(DomainEvent):
            email: str = ""

            @property
            def aggregate_type(self) -> str:
                return "Cliente"
    """

    aggregate_id: str = ""
    event_id: str = field(default_factory=generate_id)
    occurred_at: datetime = field(default_factory=_utcnow)
    event_version: int = 1
    metadata: Optional[EventMetadata] = None

    _base_fields: ClassVar[frozenset] = frozenset(
        {"aggregate_id", "event_id", "occurred_at", "event_version", "metadata"}
    )

    def __post_init__(self):
        if not self.aggregate_id:
            raise ValueError("aggregate_id é obrigatório")

    @property
    @abstractmethod
    def aggregate_type(self) -> str:
        """Tipo do agregado de origem (ex: "Conta")."""
        raise NotImplementedError

    @property
    def event_name(self) -> str:
        """Nome do evento (nome da classe)."""
        return self.__class__.__name__

    def to_dict(self) -> Dict[str, Any]:
        """Envelope com os campos base e o payload em ``payload``."""
        return {
            "event_id": self.event_id,
            "event_name": self.event_name,
            "aggregate_id": self.aggregate_id,
            "aggregate_type": self.aggregate_type,
            "occurred_at": self.occurred_at.isoformat(),
            "event_version": self.event_version,
            "metadata": self.metadata.to_dict() if self.metadata else None,
            "payload": self._get_event_data(),
        }

    def _get_event_data(self) -> Dict[str, Any]:
        fields = vars(self)
        return {name: fields[name] for name in fields if name not in self._base_fields}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DomainEvent":
        """Inverso de ``to_dict``."""
        metadata = data.get("metadata")
        return cls(
            aggregate_id=data["aggregate_id"],
            event_id=data.get("event_id") or generate_id(),
            occurred_at=datetime.fromisoformat(data["occurred_at"]),
            event_version=data.get("event_version", 1),
            metadata=EventMetadata.from_dict(metadata) if metadata else None,
            **data.get("payload", {}),
        )

    def __repr__(self) -> str:
        return f"{self.event_name}(aggregate_id={self.aggregate_id}, event_id={self.event_id})"


class DomainEventHandler(ABC):
    """
    Handler que reage a eventos de domínio publicados.

    Example:
        class EnviarBoasVindas(DomainEventHandler):
            def subscribed_to(self):
                return ["ClienteCadastrado"]

            def handle(self, event):
                mailer.send(event.email)
    """

    @abstractmethod
    def handle(self, event: DomainEvent) -> None:
        raise NotImplementedError

    @abstractmethod
    def subscribed_to(self) -> List[str]:
        """Nomes dos eventos que este handler escuta."""
        raise NotImplementedError
