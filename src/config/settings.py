"""
Configurações do projeto.

Lidas de variáveis de ambiente (com suporte a arquivo .env via
python-dotenv) e validadas uma única vez na inicialização.

Uso:
    result = initialize_settings()
    if result.is_failure:
        raise SystemExit(result.error)

    settings = get_settings()

Usar ``get_settings()`` antes de ``initialize_settings()`` é erro de
programação e lança ConfigurationError.
"""

import logging
import logging.config
import os
from dataclasses import asdict, dataclass
from typing import Any, Dict, Mapping, Optional

from dotenv import load_dotenv

from src.core.shared.result import Result


logger = logging.getLogger(__name__)

ENVIRONMENTS = ("development", "test", "production")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMATS = ("simple", "verbose")


class ConfigurationError(RuntimeError):
    """Configuração usada antes de inicializada."""


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in ("true", "1", "yes")


@dataclass(frozen=True)
class Settings:
    """
    Configurações validadas da aplicação.

    Attributes:
        app_name: Nome usado nos logs
        environment: development, test ou production
        debug: Modo debug (proibido em produção)
        log_level: Nível do logger raiz
        log_format: Formatter do console (simple ou verbose)
        event_log_level: Nível usado ao logar eventos publicados
    """

    app_name: str = "domain-building-blocks"
    environment: str = "development"
    debug: bool = True
    log_level: str = "INFO"
    log_format: str = "simple"
    event_log_level: str = "INFO"

    @classmethod
    def from_env(cls, env: Mapping[str, str]) -> "Settings":
        return cls(
            app_name=env.get("APP_NAME", cls.app_name),
            environment=env.get("ENVIRONMENT", cls.environment).strip().lower(),
            debug=_parse_bool(env.get("DEBUG", "True")),
            log_level=env.get("LOG_LEVEL", cls.log_level).strip().upper(),
            log_format=env.get("LOG_FORMAT", cls.log_format).strip().lower(),
            event_log_level=env.get("EVENT_LOG_LEVEL", cls.event_log_level).strip().upper(),
        )

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def validate_settings(settings: Settings) -> Result[Settings]:
    """Valida valores permitidos e restrições de produção."""
    errors = []

    if settings.environment not in ENVIRONMENTS:
        errors.append(f"ENVIRONMENT deve ser um de {', '.join(ENVIRONMENTS)}")
    if settings.log_level not in LOG_LEVELS:
        errors.append(f"LOG_LEVEL deve ser um de {', '.join(LOG_LEVELS)}")
    if settings.event_log_level not in LOG_LEVELS:
        errors.append(f"EVENT_LOG_LEVEL deve ser um de {', '.join(LOG_LEVELS)}")
    if settings.log_format not in LOG_FORMATS:
        errors.append(f"LOG_FORMAT deve ser um de {', '.join(LOG_FORMATS)}")
    if settings.is_production and settings.debug:
        errors.append("DEBUG não pode estar ativo em produção")

    if errors:
        return Result.fail("Configuração inválida: " + "; ".join(errors))
    return Result.ok(settings)


def build_logging_config(settings: Settings) -> Dict[str, Any]:
    """Configuração para ``logging.config.dictConfig``."""
    return {
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'verbose': {
                'format': '{levelname} {asctime} {name} {process:d} {thread:d} {message}',
                'style': '{',
            },
            'simple': {
                'format': '{levelname} {asctime} {name} {message}',
                'style': '{',
            },
        },
        'handlers': {
            'console': {
                'class': 'logging.StreamHandler',
                'formatter': settings.log_format,
            },
        },
        'root': {
            'handlers': ['console'],
            'level': settings.log_level,
        },
        'loggers': {
            'src.core': {
                'handlers': ['console'],
                'level': 'DEBUG' if settings.debug else settings.log_level,
                'propagate': False,
            },
            'src.adapters': {
                'handlers': ['console'],
                'level': 'DEBUG' if settings.debug else settings.log_level,
                'propagate': False,
            },
        },
    }


def configure_logging(settings: Settings) -> None:
    logging.config.dictConfig(build_logging_config(settings))


# =============================================================================
# Settings Global
# =============================================================================

_settings: Optional[Settings] = None


def initialize_settings(
    env: Optional[Mapping[str, str]] = None,
    configure_logs: bool = True,
) -> Result[Settings]:
    """
    Lê, valida e registra as configurações globais.

    Args:
        env: Variáveis a usar (default: .env + os.environ)
        configure_logs: Se deve aplicar a configuração de logging

    Returns:
        Result com as configurações, ou falha descrevendo cada problema
    """
    global _settings

    if env is None:
        load_dotenv()
        env = os.environ

    result = validate_settings(Settings.from_env(env))
    if result.is_failure:
        logger.error(result.error)
        return result

    settings = result.get_value()
    if configure_logs:
        configure_logging(settings)

    _settings = settings
    logger.info(
        f"Configuração inicializada: environment={settings.environment}, "
        f"log_level={settings.log_level}"
    )
    return result


def get_settings() -> Settings:
    """
    Retorna as configurações globais.

    Raises:
        ConfigurationError: Se ``initialize_settings()`` não foi chamado
    """
    if _settings is None:
        raise ConfigurationError(
            "Configuração não inicializada. Chame initialize_settings() na inicialização."
        )
    return _settings


def reset_settings() -> None:
    """Reset das configurações (para testes)."""
    global _settings
    _settings = None
