"""
Container de dependências (dependency-injector).

Monta os adapters em memória a partir de ``Settings``.

Padrões:
- Singleton: Uma instância para toda app (publisher, store, repositórios)
- Factory: Nova instância por chamada (Unit of Work)
- Configuration: Valores vindos de ``Settings``
"""

import logging
from typing import Optional

from dependency_injector import containers, providers

from src.adapters.memory.event_store import InMemoryEventStore
from src.adapters.memory.publishers import InMemoryEventPublisher
from src.adapters.memory.unit_of_work import InMemoryUnitOfWork
from src.core.shared.mappers import MapperRegistry

from .settings import get_settings


class Container(containers.DeclarativeContainer):
    """
    Providers dos adapters em memória.

    Example:
        container = get_container()
        uow = container.unit_of_work()
        with uow:
            uow.register_new(cliente)
    """

    config = providers.Configuration()

    # Infraestrutura
    event_publisher = providers.Singleton(
        InMemoryEventPublisher,
        log_level=config.event_log_level_number,
    )

    event_store = providers.Singleton(InMemoryEventStore)

    # Repositórios compartilhados entre Units of Work
    repositories = providers.Singleton(dict)

    mapper_registry = providers.Singleton(MapperRegistry)

    # Unit of Work (Factory - nova instância por operação)
    unit_of_work = providers.Factory(
        InMemoryUnitOfWork,
        event_publisher=event_publisher,
        event_store=event_store,
        repositories=repositories,
    )


# =============================================================================
# Container Global (Singleton)
# =============================================================================

_container: Optional[Container] = None


def get_container() -> Container:
    """
    Container global, criado na primeira chamada a partir de ``get_settings()``.

    Raises:
        ConfigurationError: Se as configurações não foram inicializadas
    """
    global _container

    if _container is None:
        settings = get_settings()
        container = Container()
        config = settings.to_dict()
        config["event_log_level_number"] = getattr(logging, settings.event_log_level)
        container.config.from_dict(config)
        _container = container

    return _container


def reset_container() -> None:
    """Reset do container (para testes)."""
    global _container
    _container = None
