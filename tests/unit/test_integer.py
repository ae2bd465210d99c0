"""
Тесты для Integer

Проверяет:
1. Целочисленную арифметику внутри вида
2. Деление с округлением вниз и DivisionByZero
3. Продвижение до Rational при отрицательной степени и трансцендентных функциях
4. Использование как индекса и строковое представление
"""

from fractions import Fraction

import pytest

from exactcalc.core.domain import Complex, Integer, Rational
from exactcalc.core.errors import DivisionByZero, DomainError

Z = Integer

# =============================================================================
# ТЕСТЫ КОНСТРУИРОВАНИЯ
# =============================================================================


class TestConstruction:
    """Тесты конструирования"""

    def test_from_int(self) -> None:
        """Целое значение"""
        assert Z(7).value == 7
        assert Z(10**40).value == 10**40

    def test_from_integral_values(self) -> None:
        """Целые значения других типов"""
        assert Z("0x10").value == 16
        assert Z(Rational(8, 2)).value == 4
        assert Z(3.0).value == 3

    def test_non_integral(self) -> None:
        """Нецелое значение → DomainError"""
        with pytest.raises(DomainError):
            Z(Rational(1, 2))
        with pytest.raises(DomainError):
            Z("1.5")


# =============================================================================
# ТЕСТЫ АРИФМЕТИКИ
# =============================================================================


class TestArithmetic:
    """Тесты операторов"""

    def test_stays_integer(self) -> None:
        """+ - * с int возвращают Integer"""
        for result in (Z(2) + 3, Z(2) - 3, Z(2) * 3, 3 - Z(2)):
            assert isinstance(result, Integer)
        assert Z(2) - 3 == -1
        assert 3 - Z(2) == 1

    def test_floor_division(self) -> None:
        """/ и // — частное с округлением вниз"""
        assert Z(7) / 2 == 3
        assert isinstance(Z(7) / 2, Integer)
        assert Z(-7) / 2 == -4
        assert Z(-7) // 2 == -4
        assert 7 // Z(2) == 3

    def test_modulo(self) -> None:
        """% — остаток со знаком делителя"""
        assert Z(-7) % 2 == 1
        assert Z(7) % -2 == -1
        assert divmod(Z(7), 2) == (Z(3), Z(1))

    @pytest.mark.parametrize("operation", ["__truediv__", "__floordiv__", "__mod__"])
    def test_division_by_zero(self, operation: str) -> None:
        """Деление на ноль → DivisionByZero"""
        with pytest.raises(DivisionByZero):
            getattr(Z(7), operation)(0)

    def test_promotion(self) -> None:
        """Смешанные операнды продвигаются по решётке"""
        result = Z(1) + Rational(1, 2)
        assert isinstance(result, Rational)
        assert result == Fraction(3, 2)
        assert isinstance(Z(1) + 1j, Complex)
        assert isinstance(Z(1) + 0.5, Rational)

    def test_power(self) -> None:
        """Неотрицательная степень — Integer, отрицательная — Rational"""
        assert isinstance(Z(2) ** 10, Integer)
        assert Z(2) ** 10 == 1024
        result = Z(2) ** -1
        assert isinstance(result, Rational)
        assert result == Fraction(1, 2)

    def test_unary(self) -> None:
        """Унарные операции"""
        assert isinstance(-Z(3), Integer)
        assert abs(Z(-3)) == 3
        assert isinstance(abs(Z(-3)), Integer)
        assert isinstance(Z(2).inverse(), Rational)


# =============================================================================
# ТЕСТЫ ОПЕРАЦИЙ
# =============================================================================


class TestOperations:
    """Операции, общие для всех видов"""

    def test_integral_results_stay_integer(self) -> None:
        """Целочисленные функции сохраняют вид"""
        assert isinstance(Z(10).fact(), Integer)
        assert Z(10).fact() == 3628800
        assert isinstance(Z(12).gcd(18), Integer)
        assert Z(12).gcd(18) == 6

    def test_transcendental_returns_rational(self) -> None:
        """Приближённые результаты — Rational"""
        result = Z(2).sqrt("1e-4", 0)
        assert isinstance(result, Rational)
        assert result == Rational("1.4142")
        assert isinstance(Z(1).sin("1e-5"), Rational)

    def test_exact_root_stays_integer(self) -> None:
        """Точный корень целого — Integer"""
        assert isinstance(Z(27).root(3), Integer)
        assert isinstance(Z(16).root(2), Integer)
        approximated = Z(16).sqrt("1e-4", 0)
        assert isinstance(approximated, Rational)
        assert approximated == 4
        assert Z(27).root(3) == 3

    def test_bernoulli_promotes(self) -> None:
        """Нецелый результат продвигается до Rational"""
        result = Z(2).bernoulli()
        assert isinstance(result, Rational)
        assert result == Fraction(1, 6)


# =============================================================================
# ТЕСТЫ ПРЕОБРАЗОВАНИЙ
# =============================================================================


class TestConversions:
    """Тесты __index__, to_rational, estr"""

    def test_index(self) -> None:
        """Integer пригоден как индекс"""
        assert [10, 20, 30][Z(1)] == 20
        assert int(Z(-5)) == -5

    def test_widening(self) -> None:
        """to_rational, to_complex"""
        assert isinstance(Z(3).to_rational(), Rational)
        assert isinstance(Z(3).to_complex(), Complex)
        assert Z(3).to_complex() == 3

    def test_strings(self) -> None:
        """str, repr, estr"""
        assert str(Z(-42)) == "-42"
        assert repr(Z(5)) == "Integer(5)"
        assert Z(5).estr() == "Integer(5)"

    def test_hash(self) -> None:
        """hash совпадает с int"""
        assert hash(Z(5)) == hash(5)
        assert {Z(5), 5, Rational(5)} == {5}
