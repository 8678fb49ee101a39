"""
Repositório genérico em memória.

Guarda cópias profundas dos agregados, de modo que quem lê recebe
uma instância independente (como faria um banco de dados). O save
aplica controle de concorrência otimista pela versão do agregado.
"""

import copy
import logging
from typing import Dict, List, Optional

from src.core.shared.aggregate_root import AggregateRoot
from src.core.shared.exceptions import ConcurrencyError, EntityNotFoundError
from src.core.shared.interfaces import PaginatedResult, PaginationParams, Repository, T
from src.core.shared.result import Result
from src.core.shared.specification import Specification


logger = logging.getLogger(__name__)


class InMemoryRepository(Repository[T]):
    """
    Implementação em memória do Repository.

    O snapshot armazenado já é marcado como comitado; quem chama
    ``save`` deve reconhecer o commit com ``mark_as_committed()``
    no próprio agregado (o InMemoryUnitOfWork faz isso).

    Example:
        repo = InMemoryRepository("Cliente")
        repo.save(cliente)
        cliente.mark_as_committed()
        found = repo.get_by_id(cliente.id).get_value()
    """

    def __init__(self, aggregate_type: str = "Aggregate"):
        self.aggregate_type = aggregate_type
        self._items: Dict[str, T] = {}

    def has_version_conflict(self, entity: AggregateRoot) -> bool:
        """True se o agregado foi salvo por outro processo desde a leitura."""
        stored = self._items.get(entity.id)
        return stored is not None and stored.version != entity.version

    def exists(self, entity_id: str) -> bool:
        return entity_id in self._items

    def get_by_id(self, entity_id: str) -> Result[T]:
        stored = self._items.get(entity_id)
        if stored is None:
            return Result.fail(EntityNotFoundError(self.aggregate_type, entity_id).message)
        return Result.ok(copy.deepcopy(stored))

    def list_all(self) -> Result[List[T]]:
        return Result.ok([copy.deepcopy(item) for item in self._items.values()])

    def save(self, entity: T) -> Result[None]:
        if self.has_version_conflict(entity):
            logger.warning(
                f"Conflito de versão em {self.aggregate_type} {entity.id}: "
                f"armazenada={self._items[entity.id].version}, recebida={entity.version}"
            )
            return Result.fail(ConcurrencyError(self.aggregate_type, entity.id).message)

        snapshot = copy.deepcopy(entity)
        snapshot.mark_as_committed()
        self._items[entity.id] = snapshot
        logger.debug(f"{self.aggregate_type} salvo: {entity.id} (versão {snapshot.version})")
        return Result.ok()

    def delete(self, entity_id: str) -> Result[None]:
        if entity_id not in self._items:
            return Result.fail(EntityNotFoundError(self.aggregate_type, entity_id).message)
        del self._items[entity_id]
        logger.debug(f"{self.aggregate_type} removido: {entity_id}")
        return Result.ok()

    def find_by_specification(self, spec: Specification[T]) -> Result[List[T]]:
        return Result.ok([
            copy.deepcopy(item)
            for item in self._items.values()
            if spec.is_satisfied_by(item)
        ])

    def count(self) -> Result[int]:
        return Result.ok(len(self._items))

    def count_by_specification(self, spec: Specification[T]) -> Result[int]:
        return Result.ok(sum(1 for item in self._items.values() if spec.is_satisfied_by(item)))

    def list_paginated(self, params: PaginationParams) -> Result[PaginatedResult[T]]:
        if params.page < 1 or params.page_size < 1:
            return Result.fail("Parâmetros de paginação inválidos")

        items = list(self._items.values())
        if params.sort_by:
            items.sort(
                key=lambda item: self._sort_key(item, params.sort_by),
                reverse=params.sort_order == "desc",
            )

        page_items = items[params.offset:params.offset + params.page_size]
        return Result.ok(PaginatedResult(
            items=[copy.deepcopy(item) for item in page_items],
            total=len(items),
            page=params.page,
            page_size=params.page_size,
        ))

    @staticmethod
    def _sort_key(item: AggregateRoot, field: str):
        value: Optional[object] = item.props.get(field)
        # None sempre por último na ordem ascendente
        return (value is None, value)

    def clear(self) -> None:
        """Limpa todos os dados (útil para testes)."""
        self._items.clear()
