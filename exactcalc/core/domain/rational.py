"""
Rational — Точное рациональное число

Rational(numerator, denominator=1): обе части могут быть любым вещественным
значением (int, Integer, Rational, Fraction, Decimal, float, строка).
Значение хранится в канонической форме.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. denominator > 0
2. gcd(|numerator|, denominator) == 1
3. Знак хранится только в числителе
4. Нулевой знаменатель → DivisionByZero при конструировании
5. float переводится точно (двоичное значение), без десятичного округления
"""

from dataclasses import dataclass, field
from fractions import Fraction
from typing import Any, ClassVar

from exactcalc.core.domain.integral import IntegralOps
from exactcalc.core.domain.kinds import Kind
from exactcalc.core.domain.numeric import NumericValue, Parts, as_real, estr_fraction, make_rational
from exactcalc.core.domain.transcendental import TranscendentalOps
from exactcalc.core.errors import DivisionByZero

_ZERO = Fraction(0)


@dataclass(frozen=True, eq=False, repr=False)
class Rational(TranscendentalOps, IntegralOps, NumericValue):
    """
    Рациональное число в канонической форме.

    Examples:
        >>> Rational(6, -4)
        Rational(-3/2)
        >>> Rational("-5.44")
        Rational(-136/25)
        >>> Rational(0.1) == Rational(3602879701896397, 36028797018963968)
        True
    """

    numerator: Any = 0
    denominator: Any = 1
    _value: Fraction = field(init=False, repr=False)

    kind: ClassVar[Kind] = Kind.RATIONAL

    def __post_init__(self) -> None:
        value = as_real(self.numerator, "numerator")
        divisor = as_real(self.denominator, "denominator")
        if not divisor:
            raise DivisionByZero(f"zero denominator: {self.numerator}/{self.denominator}")
        self._assign(value / divisor)

    def _assign(self, value: Fraction) -> None:
        object.__setattr__(self, "numerator", value.numerator)
        object.__setattr__(self, "denominator", value.denominator)
        object.__setattr__(self, "_value", value)

    @classmethod
    def from_fraction(cls, value: Fraction) -> "Rational":
        """Rational из Fraction без повторной валидации."""
        instance = cls.__new__(cls)
        instance._assign(value)
        return instance

    def parts(self) -> Parts:
        return self._value, _ZERO

    def to_fraction(self) -> Fraction:
        """Точное значение как fractions.Fraction."""
        return self._value

    # -------------------------------------------------------------------------
    # Арифметика (после coerce оба операнда имеют вид Rational)
    # -------------------------------------------------------------------------

    def _add(self, other: NumericValue) -> NumericValue:
        return make_rational(self._value + other.parts()[0])

    def _sub(self, other: NumericValue) -> NumericValue:
        return make_rational(self._value - other.parts()[0])

    def _mul(self, other: NumericValue) -> NumericValue:
        return make_rational(self._value * other.parts()[0])

    def _truediv(self, other: NumericValue) -> NumericValue:
        divisor = other.parts()[0]
        if not divisor:
            raise DivisionByZero(f"division of {self} by zero")
        return make_rational(self._value / divisor)

    def estr(self) -> str:
        """
        Examples:
            >>> Rational(1, 4).estr()
            'Rational(1,4)'
        """
        return estr_fraction(self._value)
