"""
Testes Unitários para Email, Phone e CEP.
"""

import pytest

from src.core.value_objects import CEP, Email, Phone


class TestEmail:
    """Testes para o Value Object Email."""

    def test_normaliza(self):
        email = Email.create(" USER@Example.COM ").get_value()

        assert email.value == "user@example.com"
        assert email.local_part == "user"
        assert email.domain == "example.com"
        assert str(email) == "user@example.com"

    @pytest.mark.parametrize("valor", ["", "sem-arroba", "a@b", "a b@c.com", "@dominio.com", None, 10])
    def test_invalido(self, valor):
        result = Email.create(valor)

        assert result.is_failure
        assert result.error == "Endereço de e-mail inválido"

    def test_mask(self):
        assert Email.create("joao@exemplo.com").get_value().mask() == "j**o@exemplo.com"
        assert Email.create("ab@exemplo.com").get_value().mask() == "**@exemplo.com"

    def test_igualdade_apos_normalizacao(self):
        assert Email.create("A@B.com").get_value() == Email.create("a@b.com").get_value()

    def test_copy_with_exige_forma_normalizada(self):
        email = Email.create("a@b.com").get_value()

        assert email.copy_with(value="A@B.COM").is_failure
        assert email.copy_with(value=" c@d.com").is_failure
        assert email.copy_with(value="c@d.com").get_value() == Email.create(" C@D.com ").get_value()

    def test_quebra_de_linha_no_fim_rejeitada(self):
        email = Email.create("a@b.com").get_value()

        assert not Email.is_valid("a@b.com\n")
        assert email.copy_with(value="a@b.com\n").is_failure


class TestPhone:
    """Testes para o Value Object Phone."""

    def test_celular(self):
        phone = Phone.create("(11) 98765-4321").get_value()

        assert phone.value == "11987654321"
        assert phone.area_code == "11"
        assert phone.format() == "(11) 98765-4321"
        assert phone.is_whatsapp()

    def test_fixo(self):
        phone = Phone.create("1123456789").get_value()

        assert phone.format() == "(11) 2345-6789"
        assert not phone.is_whatsapp()

    @pytest.mark.parametrize("valor", ["123", "119876543210", "", None])
    def test_invalido(self, valor):
        result = Phone.create(valor)

        assert result.is_failure
        assert result.error == "Número de telefone inválido"


class TestCEP:
    """Testes para o Value Object CEP."""

    def test_valido(self):
        cep = CEP.create("01310-100").get_value()

        assert cep.value == "01310100"
        assert cep.format() == "01310-100"
        assert str(cep) == "01310-100"

    @pytest.mark.parametrize("valor", ["0131010", "013101000", "", None])
    def test_invalido(self, valor):
        result = CEP.create(valor)

        assert result.is_failure
        assert result.error == "CEP inválido"
