"""
Adapters em memória.

Úteis para:
- Testes unitários
- Prototipagem
- Desenvolvimento local

Não usar em produção!
"""

from .event_store import InMemoryEventStore
from .publishers import InMemoryEventPublisher
from .repository import InMemoryRepository
from .unit_of_work import InMemoryUnitOfWork

__all__ = [
    "InMemoryEventStore",
    "InMemoryEventPublisher",
    "InMemoryRepository",
    "InMemoryUnitOfWork",
]
