"""
Testes Unitários para ValueObject.

Coverage:
- Validação na construção (fail fast)
- Imutabilidade
- Igualdade estrutural recursiva (datas, listas, mapeamentos, VOs aninhados)
- copy_with
"""

from datetime import datetime, timedelta, timezone

import pytest

from src.core.shared.exceptions import ValidationError
from src.core.value_objects import CEP, Phone
from tests.sample_domain import Cadastro


def _cadastro(**overrides):
    props = {
        "nome": "Maria",
        "nascimento": datetime(1990, 5, 17, 12, 0, tzinfo=timezone.utc),
        "telefones": [
            Phone.create("11987654321").get_value(),
            Phone.create("1123456789").get_value(),
        ],
        "endereco": {"cep": CEP.create("01310-100").get_value(), "numero": 1000},
    }
    props.update(overrides)
    return Cadastro(props)


class TestValueObjectConstrucao:
    """Testes para construção."""

    def test_validacao_falha_impede_criacao(self):
        with pytest.raises(ValidationError) as exc_info:
            Cadastro({"nome": ""})

        assert "Nome é obrigatório" in exc_info.value.message

    def test_props_somente_leitura(self):
        cadastro = _cadastro()

        with pytest.raises(TypeError):
            cadastro.props["nome"] = "Outra"

    def test_atributos_imutaveis(self):
        cadastro = _cadastro()

        with pytest.raises(AttributeError):
            cadastro.nome = "Outra"

    def test_props_copiadas_na_construcao(self):
        props = {"nome": "Maria"}
        cadastro = Cadastro(props)

        props["nome"] = "Alterado"

        assert cadastro.props["nome"] == "Maria"


class TestValueObjectIgualdade:
    """Testes para igualdade estrutural."""

    def test_instancias_distintas_com_props_iguais(self):
        assert _cadastro().equals(_cadastro())
        assert _cadastro() == _cadastro()

    def test_datas_comparadas_por_instante(self):
        brasilia = timezone(timedelta(hours=-3))
        mesma_hora = datetime(1990, 5, 17, 9, 0, tzinfo=brasilia)

        assert _cadastro() == _cadastro(nascimento=mesma_hora)

    def test_data_diferente(self):
        outra = datetime(1990, 5, 18, 12, 0, tzinfo=timezone.utc)

        assert _cadastro() != _cadastro(nascimento=outra)

    def test_vo_aninhado_em_lista_diferente(self):
        telefones = [Phone.create("11987654321").get_value(), Phone.create("1123456780").get_value()]

        assert _cadastro() != _cadastro(telefones=telefones)

    def test_lista_com_tamanho_diferente(self):
        telefones = [Phone.create("11987654321").get_value()]

        assert _cadastro() != _cadastro(telefones=telefones)

    def test_mapeamento_aninhado_diferente(self):
        endereco = {"cep": CEP.create("01310-100").get_value(), "numero": 1001}

        assert _cadastro() != _cadastro(endereco=endereco)

    def test_chaves_diferentes(self):
        assert Cadastro({"nome": "A", "x": 1}) != Cadastro({"nome": "A", "y": 1})
        assert Cadastro({"nome": "A"}) != Cadastro({"nome": "A", "y": 1})

    def test_none_e_outros_tipos(self):
        cadastro = _cadastro()

        assert not cadastro.equals(None)
        assert not cadastro.equals("Maria")
        assert cadastro != "Maria"

    def test_classes_diferentes_nunca_iguais(self):
        assert not CEP.create("01310100").get_value().equals(
            Phone.create("0131010000").get_value()
        )

    def test_hash_consistente_com_igualdade(self):
        assert hash(_cadastro()) == hash(_cadastro())
        assert len({_cadastro(), _cadastro()}) == 1

    def test_hash_com_conjuntos(self):
        a = Cadastro({"nome": "Maria", "tags": {"vip", "ativo"}})
        b = Cadastro({"nome": "Maria", "tags": {"ativo", "vip"}})

        assert a == b
        assert hash(a) == hash(b)
        assert Cadastro({"nome": "Maria", "tags": frozenset({"vip"})}) != a


class TestValueObjectCopyWith:
    """Testes para copy_with."""

    def test_copy_with_cria_nova_instancia(self):
        original = _cadastro()

        result = original.copy_with(nome="Joana")

        assert result.is_success
        copia = result.get_value()
        assert copia is not original
        assert copia.props["nome"] == "Joana"
        assert copia.props["telefones"] == original.props["telefones"]
        assert original.props["nome"] == "Maria"

    def test_copy_with_invalido_retorna_falha(self):
        original = _cadastro()

        result = original.copy_with(nome="")

        assert result.is_failure
        assert result.error == "Nome é obrigatório"
        assert original.props["nome"] == "Maria"

    def test_copy_with_em_identificador(self):
        cep = CEP.create("01310100").get_value()

        assert cep.copy_with(value="20040020").get_value().format() == "20040-020"
        assert cep.copy_with(value="123").is_failure
