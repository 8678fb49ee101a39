"""
Testes Unitários para Password.
"""

import pytest

from src.core.value_objects import Password, PasswordStrength


class TestPasswordStrength:
    """Testes para a política de força."""

    def test_senha_forte(self):
        analysis = Password.analyze_strength("Segura@123")

        assert analysis == PasswordStrength(is_valid=True, score=5, reasons=())

    def test_senha_fraca_lista_motivos(self):
        analysis = Password.analyze_strength("abc")

        assert not analysis.is_valid
        assert analysis.score == 1
        assert len(analysis.reasons) == 4
        assert "Senha deve ter pelo menos 8 caracteres" in analysis.reasons

    def test_apenas_caractere_especial_faltando(self):
        analysis = Password.analyze_strength("Segura123")

        assert analysis.score == 4
        assert analysis.reasons == ("Senha deve conter ao menos um caractere especial",)


class TestPassword:
    """Testes para o Value Object Password."""

    def test_create(self):
        password = Password.create("Segura@123").get_value()

        assert password.value == "Segura@123"
        assert not password.is_hashed

    @pytest.mark.parametrize("valor", ["", None, 123])
    def test_obrigatoria(self, valor):
        result = Password.create(valor)

        assert result.is_failure
        assert result.error == "Senha é obrigatória"

    def test_fraca_junta_motivos(self):
        result = Password.create("segura123")

        assert result.is_failure
        assert "; " in result.error
        assert "maiúscula" in result.error

    def test_hash_nao_passa_por_analise(self):
        password = Password.create("$2b$12$abc", is_hashed=True).get_value()

        assert password.is_hashed
        assert Password.create_hashed("x").get_value().is_hashed

    def test_repr_nao_expoe_valor(self):
        password = Password.create("Segura@123").get_value()

        assert "Segura@123" not in repr(password)
