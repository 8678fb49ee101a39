"""
Identificadores de entidades e eventos.

Usa ULID (26 caracteres, base32 de Crockford): único e ordenável
pelo instante de criação.
"""

import re

from ulid import ULID


ULID_LENGTH = 26

_ULID_PATTERN = re.compile(r"^[0-7][0-9A-HJKMNP-TV-Z]{25}$")


def generate_id() -> str:
    """Gera um novo identificador ULID em texto."""
    return str(ULID())


def is_valid_id(value: object) -> bool:
    """Verifica se ``value`` tem o formato de um ULID canônico."""
    if not isinstance(value, str):
        return False
    return bool(_ULID_PATTERN.match(value.upper()))
