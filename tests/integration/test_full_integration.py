"""
Testes de Integração End-to-End.

Fluxo completo com as dependências do container:
- Use Case → Unit of Work → Repository
- Domain Events → Event Store → Publisher → Handler
"""

from dataclasses import dataclass

import pytest

from src.config.container import get_container
from src.config.settings import initialize_settings
from src.core.shared.events import DomainEventHandler
from src.core.shared.result import Result
from src.core.shared.use_cases import BaseUseCase, transactional
from tests.sample_domain import Conta


pytestmark = pytest.mark.integration


# =============================================================================
# Use Cases
# =============================================================================

@dataclass
class AbrirContaDTO:
    titular: str
    email: str


@dataclass
class DepositarDTO:
    conta_id: str
    valor: int


class AbrirContaService(BaseUseCase[AbrirContaDTO, str]):
    def __init__(self, uow):
        self.uow = uow

    @transactional
    def _execute_impl(self, request):
        result = Conta.abrir(request.titular, request.email)
        if result.is_failure:
            return Result.fail(result.error)
        self.uow.register_new(result.get_value())
        return Result.ok(result.get_value().id)


class DepositarService(BaseUseCase[DepositarDTO, int]):
    def __init__(self, uow):
        self.uow = uow

    @transactional
    def _execute_impl(self, request):
        found = self.uow.get_repository("Conta").get_by_id(request.conta_id)
        if found.is_failure:
            return Result.fail(found.error)

        conta = found.get_value()
        result = conta.depositar(request.valor)
        if result.is_failure:
            return Result.fail(result.error)

        self.uow.register_modified(conta)
        return Result.ok(conta.saldo)


class Auditoria(DomainEventHandler):
    def __init__(self):
        self.eventos = []

    def handle(self, event):
        self.eventos.append(event.event_name)

    def subscribed_to(self):
        return ["*"]


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def container():
    initialize_settings({"ENVIRONMENT": "test"}, configure_logs=False)
    return get_container()


@pytest.fixture
def auditoria(container):
    handler = Auditoria()
    container.event_publisher().subscribe(handler)
    return handler


# =============================================================================
# Testes
# =============================================================================

class TestFluxoConta:
    """Abertura e depósitos através do container."""

    def test_abrir_e_depositar(self, container, auditoria):
        conta_id = AbrirContaService(container.unit_of_work()).execute(
            AbrirContaDTO("Maria Silva", "maria@exemplo.com")
        ).get_value()

        saldo = DepositarService(container.unit_of_work()).execute(
            DepositarDTO(conta_id, 150)
        )

        assert saldo.get_value() == 150
        assert auditoria.eventos == ["ContaAberta", "DepositoRealizado"]

        conta = container.unit_of_work().get_repository("Conta").get_by_id(conta_id).get_value()
        assert conta.saldo == 150
        assert conta.version == 2

        historico = container.event_store().get_events_for_aggregate(conta_id)
        assert [e.event_name for e in historico] == ["ContaAberta", "DepositoRealizado"]

    def test_deposito_invalido_nao_publica(self, container, auditoria):
        conta_id = AbrirContaService(container.unit_of_work()).execute(
            AbrirContaDTO("Maria Silva", "maria@exemplo.com")
        ).get_value()

        result = DepositarService(container.unit_of_work()).execute(DepositarDTO(conta_id, -5))

        assert result.is_failure
        assert auditoria.eventos == ["ContaAberta"]

    def test_conta_inexistente(self, container):
        result = DepositarService(container.unit_of_work()).execute(DepositarDTO("nao-existe", 10))

        assert result.is_failure
        assert "nao-existe" in result.error
