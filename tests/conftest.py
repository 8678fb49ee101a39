"""
Configurações globais do Pytest.

Este arquivo é carregado automaticamente pelo pytest e
fornece fixtures e configurações compartilhadas.
"""

import sys
from pathlib import Path

import pytest

# Adicionar raiz do projeto ao path para imports "src.*"
project_path = Path(__file__).parent.parent
sys.path.insert(0, str(project_path))

from src.adapters.memory import (  # noqa: E402
    InMemoryEventPublisher,
    InMemoryEventStore,
    InMemoryUnitOfWork,
)
from src.config.container import reset_container  # noqa: E402
from src.config.settings import reset_settings  # noqa: E402


@pytest.fixture(scope="session")
def project_root():
    """Retorna o caminho raiz do projeto."""
    return project_path


@pytest.fixture(autouse=True)
def reset_singletons():
    """
    Reset de singletons entre testes.

    Garante que cada teste inicia com estado limpo.
    """
    yield
    reset_container()
    reset_settings()


@pytest.fixture
def event_publisher():
    return InMemoryEventPublisher()


@pytest.fixture
def event_store():
    return InMemoryEventStore()


@pytest.fixture
def uow(event_publisher, event_store):
    """Unit of Work em memória com publisher e event store."""
    return InMemoryUnitOfWork(event_publisher=event_publisher, event_store=event_store)


def pytest_configure(config):
    """Configuração do pytest."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
