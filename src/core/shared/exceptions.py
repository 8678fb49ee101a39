"""
Exceções de Domínio dos Building Blocks.

Este módulo define a taxonomia de erros de negócio que permite
comunicar falhas de forma clara e tipada entre as camadas.

Hierarquia:
    DomainError (base)
    ├── EntityNotFoundError (entidade não existe)
    ├── InvalidEntityError (entidade em estado inválido)
    ├── BusinessRuleViolationError (regra de negócio violada)
    ├── ConcurrencyError (conflito de versão)
    ├── AuthorizationError (ação não permitida)
    ├── ValidationError (validação de campo)
    └── AggregateValidationError (várias validações de uma vez)

    InvalidOperationError (erro de programação, fora da hierarquia)

O ``code`` e o ``status_code`` existem apenas para que a camada de
apresentação traduza o erro em uma resposta de transporte; o core
nunca faz essa tradução.
"""

from typing import Any, Dict, Optional, Sequence, Tuple


class InvalidOperationError(Exception):
    """
    Uso incorreto de um building block.

    Representa estados que nunca deveriam acontecer (ex: ler o valor
    de um Result de falha). Não é capturada em nenhum ponto do core.
    """


class DomainError(Exception):
    """
    Base dos erros de negócio.

    Use cases capturam ``DomainError`` e devolvem Result de falha.

    Attributes:
        message: Mensagem legível
        code: Código estável para máquinas
        status_code: Status de transporte sugerido (default 400)

    Example:
        result = pedido.confirmar()
        if result.is_failure:
            raise BusinessRuleViolationError("pedido_confirmado", result.error)
    """

    default_code = "DOMAIN_ERROR"

    def __init__(self, message: str, code: Optional[str] = None, status_code: int = 400):
        self.message = message
        self.code = code or self.default_code
        self.status_code = status_code
        super().__init__(self.message)

    @property
    def name(self) -> str:
        return self.__class__.__name__

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        """Representação para a camada de apresentação."""
        return {
            "name": self.name,
            "message": self.message,
            "code": self.code,
            "status_code": self.status_code,
        }


class EntityNotFoundError(DomainError):
    """
    Entidade não encontrada no repositório.

    Example:
        result = repo.get_by_id(pedido_id)
        if result.is_failure:
            raise EntityNotFoundError("Pedido", pedido_id)
    """

    def __init__(self, entity: str, entity_id: str):
        self.entity_type = entity
        self.entity_id = entity_id
        super().__init__(
            f"{entity} com id {entity_id} não encontrado",
            "ENTITY_NOT_FOUND",
            404,
        )


class InvalidEntityError(DomainError):
    """Entidade construída ou alterada com dados inválidos."""

    def __init__(self, entity: str, reason: str):
        self.entity_type = entity
        self.reason = reason
        super().__init__(f"{entity} inválido: {reason}", "INVALID_ENTITY", 400)


class BusinessRuleViolationError(DomainError):
    """
    Violação de regra de negócio.

    Example:
        if pedido.status == StatusPedido.CANCELADO:
            raise BusinessRuleViolationError(
                "pedido_cancelado_imutavel",
                "Pedido cancelado não pode ser alterado",
            )
    """

    def __init__(self, rule: str, details: Optional[str] = None):
        self.rule = rule
        self.details = details
        message = f"Regra de negócio violada: {rule}"
        if details:
            message = f"{message}. {details}"
        super().__init__(message, "BUSINESS_RULE_VIOLATION", 422)

    def to_dict(self) -> Dict[str, Any]:
        result = super().to_dict()
        result["rule"] = self.rule
        return result


class ConcurrencyError(DomainError):
    """
    Erro de concorrência/conflito de versão.

    Lançada (ou carregada em um Result) quando uma operação falha
    devido a modificação concorrente do agregado.
    """

    def __init__(self, entity: str, entity_id: str):
        self.entity_type = entity
        self.entity_id = entity_id
        super().__init__(
            f"{entity} com id {entity_id} foi modificado por outro processo",
            "CONCURRENCY_ERROR",
            409,
        )


class AuthorizationError(DomainError):
    """Ação não autorizada sobre um recurso."""

    def __init__(self, action: str, resource: Optional[str] = None):
        self.action = action
        self.resource = resource
        message = f"Não autorizado a {action}"
        if resource:
            message = f"{message} em {resource}"
        super().__init__(message, "AUTHORIZATION_ERROR", 403)


class ValidationError(DomainError):
    """
    Erro de validação de um campo.

    Example:
        if len(nome) < 3:
            raise ValidationError("nome", nome, "deve ter pelo menos 3 caracteres")
    """

    def __init__(self, field: str, value: Any, constraint: str):
        self.field = field
        self.value = value
        self.constraint = constraint
        super().__init__(
            f"Validação falhou para {field}: {constraint}",
            "VALIDATION_ERROR",
            400,
        )

    def to_dict(self) -> Dict[str, Any]:
        result = super().to_dict()
        result["field"] = self.field
        return result


class AggregateValidationError(DomainError):
    """
    Agrupa vários ValidationError detectados ao mesmo tempo.

    Cada erro individual mantém seu próprio código e mensagem;
    a ordem de entrada é preservada.
    """

    def __init__(self, errors: Sequence[ValidationError]):
        self.errors: Tuple[ValidationError, ...] = tuple(errors)
        joined = "; ".join(error.message for error in self.errors)
        super().__init__(
            f"Múltiplos erros de validação: {joined}",
            "AGGREGATE_VALIDATION_ERROR",
            400,
        )

    def to_dict(self) -> Dict[str, Any]:
        result = super().to_dict()
        result["errors"] = [error.to_dict() for error in self.errors]
        return result
