"""
Base para Use Cases (Application Services).

Um use case orquestra entidades, repositórios e eventos para
executar uma operação de negócio, sempre devolvendo Result.

Fluxo do template ``execute``:
1. ``_validate_request`` (falha interrompe)
2. ``_execute_impl`` (lógica de negócio)
3. DomainError lançado vira Result de falha; qualquer outra
   exceção é erro de programação e propaga
"""

import functools
import logging
from abc import ABC, abstractmethod
from typing import Callable, Generic, TypeVar

from .exceptions import DomainError
from .result import Result


logger = logging.getLogger(__name__)

Req = TypeVar("Req")
Resp = TypeVar("Resp")


class BaseUseCase(ABC, Generic[Req, Resp]):
    """
    Classe base para use cases.

    Example:
        class CadastrarClienteService(BaseUseCase[CadastrarClienteDTO, str]):
            def __init__(self, uow):
                self.uow = uow

            @transactional
            def _execute_impl(self, request):
                cliente = Cliente.create(request.nome, request.email)
                if cliente.is_failure:
                    return Result.fail(cliente.error)
                self.uow.register_new(cliente.get_value())
                return Result.ok(cliente.get_value().id)
    """

    def execute(self, request: Req) -> Result[Resp]:
        validation = self._validate_request(request)
        if validation.is_failure:
            return Result.fail(validation.error)

        try:
            return self._execute_impl(request)
        except DomainError as error:
            return self._handle_error(error)

    def _validate_request(self, request: Req) -> Result[None]:
        """Validação da requisição. Sobrescreva quando necessário."""
        return Result.ok()

    @abstractmethod
    def _execute_impl(self, request: Req) -> Result[Resp]:
        raise NotImplementedError

    def _handle_error(self, error: DomainError) -> Result[Resp]:
        logger.warning(f"{type(self).__name__} falhou: {error}")
        return Result.fail(error.message)


def transactional(method: Callable) -> Callable:
    """
    Executa o método dentro do ``self.uow``.

    Commit se o Result for sucesso; rollback se for falha ou se
    uma exceção escapar.
    """

    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        uow = self.uow
        with uow:
            result = method(self, *args, **kwargs)
            if result.is_failure:
                uow.rollback()
        return result

    return wrapper
