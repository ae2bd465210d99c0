"""
Тесты для Coercion

Проверяет:
1. Решётку INTEGER < RATIONAL < COMPLEX
2. to_value: минимальный вид для нативных значений
3. promote: продвижение без потерь, запрет демоции
4. coerce: общий вид пары операндов
5. coerce_argument: приведение получателя builtin
"""

from decimal import Decimal
from fractions import Fraction

import pytest

from exactcalc.core.domain import (
    Complex,
    Integer,
    Kind,
    Rational,
    coerce,
    coerce_argument,
    max_kind,
    promote,
    to_value,
)
from exactcalc.core.errors import TypeCoercionError

# =============================================================================
# ТЕСТЫ РЕШЁТКИ
# =============================================================================


class TestLattice:
    """Тесты Kind и max_kind"""

    def test_order(self) -> None:
        """INTEGER < RATIONAL < COMPLEX"""
        assert Kind.INTEGER < Kind.RATIONAL < Kind.COMPLEX

    def test_max_kind(self) -> None:
        """Наибольший вид"""
        assert max_kind(Kind.INTEGER, Kind.RATIONAL) is Kind.RATIONAL
        assert max_kind(Kind.COMPLEX, Kind.INTEGER, Kind.RATIONAL) is Kind.COMPLEX
        assert max_kind(Kind.INTEGER) is Kind.INTEGER

    def test_value_kinds(self) -> None:
        """kind каждого вида"""
        assert Integer(1).kind is Kind.INTEGER
        assert Rational(1).kind is Kind.RATIONAL
        assert Complex(1).kind is Kind.COMPLEX


# =============================================================================
# ТЕСТЫ to_value
# =============================================================================


class TestToValue:
    """Тесты для to_value"""

    @pytest.mark.parametrize("obj", [3, 0.5, Fraction(1, 3), Decimal("2.5"), "1/3", "0x10"])
    def test_real_natives_become_rational(self, obj: object) -> None:
        """Вещественные нативные значения → Rational"""
        assert isinstance(to_value(obj), Rational)

    def test_complex_native(self) -> None:
        """complex → Complex, даже при нулевой мнимой части"""
        assert isinstance(to_value(2j), Complex)
        assert isinstance(to_value(complex(2, 0)), Complex)

    def test_passthrough(self) -> None:
        """NumericValue возвращается без изменений"""
        value = Integer(5)
        assert to_value(value) is value

    @pytest.mark.parametrize("obj", [True, None, "abc", [1], object(), float("nan")])
    def test_unsupported(self, obj: object) -> None:
        """bool, None, нечисловые объекты → TypeCoercionError"""
        with pytest.raises(TypeCoercionError):
            to_value(obj)


# =============================================================================
# ТЕСТЫ promote
# =============================================================================


class TestPromote:
    """Тесты для promote"""

    def test_widening_preserves_value(self) -> None:
        """Продвижение сохраняет значение"""
        for value in (Integer(-7), Rational(3, 4)):
            widened = promote(value, Kind.COMPLEX)
            assert isinstance(widened, Complex)
            assert widened == value
        assert isinstance(promote(Integer(2), Kind.RATIONAL), Rational)

    def test_same_kind(self) -> None:
        """Тот же вид — тот же объект"""
        value = Rational(1, 2)
        assert promote(value, Kind.RATIONAL) is value

    def test_demotion_raises(self) -> None:
        """Демоция → TypeCoercionError"""
        with pytest.raises(TypeCoercionError, match="cannot demote"):
            promote(Complex(1), Kind.RATIONAL)
        with pytest.raises(TypeCoercionError):
            promote(Rational(1), Kind.INTEGER)


# =============================================================================
# ТЕСТЫ coerce
# =============================================================================


class TestCoerce:
    """Тесты для coerce"""

    def test_integer_with_int(self) -> None:
        """Integer и int → Integer"""
        a, b = coerce(Integer(2), 3)
        assert isinstance(a, Integer) and isinstance(b, Integer)

    def test_integer_with_float(self) -> None:
        """Integer и float → Rational"""
        a, b = coerce(Integer(2), 0.5)
        assert isinstance(a, Rational) and isinstance(b, Rational)

    def test_rational_with_complex(self) -> None:
        """Rational и Complex → Complex"""
        a, b = coerce(Rational(1, 2), Complex(0, 1))
        assert (a.kind, b.kind) == (Kind.COMPLEX, Kind.COMPLEX)
        assert a == Rational(1, 2)

    def test_integer_with_native_complex(self) -> None:
        """Integer и complex → Complex"""
        a, b = coerce(Integer(2), 1j)
        assert isinstance(a, Complex) and isinstance(b, Complex)

    def test_error_propagates(self) -> None:
        """Ошибка приведения не переклассифицируется"""
        with pytest.raises(TypeCoercionError):
            coerce(Rational(1), None)
        with pytest.raises(TypeCoercionError):
            Rational(1) + None  # type: ignore[operator]
        with pytest.raises(TypeCoercionError):
            Integer(1) * "x"


# =============================================================================
# ТЕСТЫ coerce_argument
# =============================================================================


class TestCoerceArgument:
    """Тесты для coerce_argument"""

    def test_integer_becomes_rational(self) -> None:
        """Integer и int → Rational"""
        assert isinstance(coerce_argument(Integer(3)), Rational)
        assert isinstance(coerce_argument(3), Rational)

    def test_complex_kept(self) -> None:
        """Complex остаётся Complex, даже вещественный"""
        value = Complex(3)
        assert coerce_argument(value) is value

    def test_native_complex(self) -> None:
        """Нативный complex с ненулевой мнимой частью → Complex"""
        assert isinstance(coerce_argument(1 + 1j), Complex)
        assert isinstance(coerce_argument(complex(2, 0)), Rational)
