"""
Value Objects de identificação e contato.

Todos são criados via ``create`` (que devolve Result) e armazenam
o valor já normalizado.
"""

from .cep import CEP
from .cnpj import CNPJ
from .cpf import CPF
from .email import Email
from .password import Password, PasswordStrength
from .phone import Phone

__all__ = [
    "CEP",
    "CNPJ",
    "CPF",
    "Email",
    "Password",
    "PasswordStrength",
    "Phone",
]
