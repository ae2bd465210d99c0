"""
Integer — Целое число произвольной точности

Обёртка над int. Арифметика внутри вида возвращает Integer:
- + - * и ** с неотрицательной целой степенью
- / и // — целочисленное частное с округлением вниз, % — остаток
- отрицательная степень продвигает результат до Rational

Деление и остаток по нулю → DivisionByZero.
"""

from dataclasses import dataclass
from fractions import Fraction
from typing import Any, ClassVar

from exactcalc.core.domain.integral import IntegralOps
from exactcalc.core.domain.kinds import Kind
from exactcalc.core.domain.numeric import NumericValue, Parts, as_int, make_complex, make_rational
from exactcalc.core.domain.transcendental import TranscendentalOps
from exactcalc.core.errors import DivisionByZero

_ZERO = Fraction(0)


@dataclass(frozen=True, eq=False, repr=False)
class Integer(TranscendentalOps, IntegralOps, NumericValue):
    """
    Целое число.

    Examples:
        >>> Integer(7) / 2
        Integer(3)
        >>> Integer(-7) % 2
        Integer(1)
        >>> Integer(2) ** -1
        Rational(1/2)
    """

    value: Any = 0

    kind: ClassVar[Kind] = Kind.INTEGER

    def __post_init__(self) -> None:
        if type(self.value) is not int:
            object.__setattr__(self, "value", as_int(self.value, "Integer value"))

    @classmethod
    def from_int(cls, value: int) -> "Integer":
        """Integer из int без повторной валидации."""
        instance = cls.__new__(cls)
        object.__setattr__(instance, "value", value)
        return instance

    def parts(self) -> Parts:
        return Fraction(self.value), _ZERO

    def _exact(self, re: Fraction, im: Fraction) -> NumericValue:
        if not im and re.denominator == 1:
            return Integer.from_int(re.numerator)
        return super()._exact(re, im)

    # -------------------------------------------------------------------------
    # Арифметика (после coerce оба операнда имеют вид Integer)
    # -------------------------------------------------------------------------

    def _divisor(self, other: NumericValue) -> int:
        divisor = other.value
        if not divisor:
            raise DivisionByZero(f"division of {self} by zero")
        return divisor

    def _add(self, other: NumericValue) -> NumericValue:
        return Integer.from_int(self.value + other.value)

    def _sub(self, other: NumericValue) -> NumericValue:
        return Integer.from_int(self.value - other.value)

    def _mul(self, other: NumericValue) -> NumericValue:
        return Integer.from_int(self.value * other.value)

    def _truediv(self, other: NumericValue) -> NumericValue:
        return Integer.from_int(self.value // self._divisor(other))

    def _floordiv(self, other: NumericValue) -> NumericValue:
        return Integer.from_int(self.value // self._divisor(other))

    def _mod(self, other: NumericValue) -> NumericValue:
        return Integer.from_int(self.value % self._divisor(other))

    def abs(self, eps: Any = None) -> NumericValue:
        return Integer.from_int(abs(self.value))

    def __index__(self) -> int:
        return self.value

    def __int__(self) -> int:
        return self.value

    # -------------------------------------------------------------------------
    # Преобразования
    # -------------------------------------------------------------------------

    def to_fraction(self) -> Fraction:
        return Fraction(self.value)

    def to_rational(self) -> NumericValue:
        return make_rational(Fraction(self.value))

    def to_complex(self) -> NumericValue:
        return make_complex(Fraction(self.value), _ZERO)

    def estr(self) -> str:
        return f"Integer({self.value})"
