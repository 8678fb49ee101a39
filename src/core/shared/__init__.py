"""
Shared Kernel - Building Blocks de Domínio.

Contém os componentes compartilhados por todos os domínios:
- Result (erros esperados sem exceções)
- Taxonomia de erros de domínio
- Value Objects, Entidades e Aggregate Roots
- Specifications combináveis
- Domain Events
- Interfaces (Ports), base de Use Cases e Mappers
"""

from .aggregate_root import AggregateRoot
from .entity import Entity
from .events import DomainEvent, DomainEventHandler, EventMetadata
from .exceptions import (
    AggregateValidationError,
    AuthorizationError,
    BusinessRuleViolationError,
    ConcurrencyError,
    DomainError,
    EntityNotFoundError,
    InvalidEntityError,
    InvalidOperationError,
    ValidationError,
)
from .identifiers import generate_id, is_valid_id
from .interfaces import (
    EventPublisher,
    EventStore,
    PaginatedResult,
    PaginationParams,
    Repository,
    UnitOfWork,
)
from .mappers import BaseMapper, MapperRegistry
from .result import Result
from .specification import PredicateSpecification, Specification
from .use_cases import BaseUseCase, transactional
from .value_object import ValueObject

__all__ = [
    "AggregateRoot",
    "Entity",
    "DomainEvent",
    "DomainEventHandler",
    "EventMetadata",
    "AggregateValidationError",
    "AuthorizationError",
    "BusinessRuleViolationError",
    "ConcurrencyError",
    "DomainError",
    "EntityNotFoundError",
    "InvalidEntityError",
    "InvalidOperationError",
    "ValidationError",
    "generate_id",
    "is_valid_id",
    "EventPublisher",
    "EventStore",
    "PaginatedResult",
    "PaginationParams",
    "Repository",
    "UnitOfWork",
    "BaseMapper",
    "MapperRegistry",
    "Result",
    "PredicateSpecification",
    "Specification",
    "BaseUseCase",
    "transactional",
    "ValueObject",
]
