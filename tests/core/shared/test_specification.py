"""
Testes Unitários para Specification.
"""

from src.core.shared.specification import PredicateSpecification, Specification


class SaldoPositivo(Specification):
    def is_satisfied_by(self, candidate) -> bool:
        return candidate["saldo"] > 0


par = PredicateSpecification(lambda n: n % 2 == 0, "Número deve ser par")
positivo = PredicateSpecification(lambda n: n > 0, "Número deve ser positivo")


class TestSpecificationComposicao:
    """Testes para and/or/not."""

    def test_and(self):
        spec = par.and_(positivo)

        assert spec.is_satisfied_by(4)
        assert not spec.is_satisfied_by(-4)
        assert not spec.is_satisfied_by(3)

    def test_or(self):
        spec = par.or_(positivo)

        assert spec.is_satisfied_by(-4)
        assert spec.is_satisfied_by(3)
        assert not spec.is_satisfied_by(-3)

    def test_not(self):
        assert par.not_().is_satisfied_by(3)
        assert not par.not_().is_satisfied_by(2)

    def test_operadores(self):
        assert (par & positivo).is_satisfied_by(2)
        assert (par | positivo).is_satisfied_by(1)
        assert (~par).is_satisfied_by(1)

    def test_not_de_and_equivale_a_de_morgan(self):
        composta = par.and_(positivo).not_()
        de_morgan = par.not_().or_(positivo.not_())

        for n in range(-5, 6):
            assert composta.is_satisfied_by(n) == de_morgan.is_satisfied_by(n)

    def test_operandos_nao_sao_alterados(self):
        par & positivo

        assert par.reason_for_dissatisfaction() == "Número deve ser par"
        assert not par.is_satisfied_by(3)

    def test_and_curto_circuito(self):
        chamadas = []
        direita = PredicateSpecification(lambda n: chamadas.append(n) or True)

        PredicateSpecification(lambda n: False).and_(direita).is_satisfied_by(1)

        assert chamadas == []


class TestSpecificationMotivos:
    """Testes para reason_for_dissatisfaction e check."""

    def test_motivo_padrao(self):
        assert SaldoPositivo().reason_for_dissatisfaction() == "Especificação não satisfeita"
        assert PredicateSpecification(bool).reason_for_dissatisfaction() == (
            "Especificação não satisfeita"
        )

    def test_motivos_compostos(self):
        assert (par & positivo).reason_for_dissatisfaction() == (
            "Número deve ser par AND Número deve ser positivo"
        )
        assert (par | positivo).reason_for_dissatisfaction() == (
            "Número deve ser par OR Número deve ser positivo"
        )
        assert (~par).reason_for_dissatisfaction() == "NOT Número deve ser par"

    def test_check(self):
        assert par.check(2).get_value() == 2

        result = par.check(3)

        assert result.is_failure
        assert result.error == "Número deve ser par"

    def test_subclasse(self):
        assert SaldoPositivo().is_satisfied_by({"saldo": 1})
        assert not SaldoPositivo().is_satisfied_by({"saldo": 0})
