"""
Complex — Комплексное число с рациональными компонентами

Complex(real=0, imag=0) — значение real + imag * i. Каждый аргумент может
быть любым числом, включая нативный complex и другой Complex:
Complex(1+2j) == Complex(1, 2) и Complex(Complex(1, 2), 3) == Complex(1, 5).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Арифметика (+ - * / **) и трансцендентные функции всегда возвращают
   Complex, даже при нулевой мнимой части
2. Демоция в Rational — только mod, round, bround, appr, quo
   (и ceil, floor, mmin)
3. Методы, определённые только для вещественных чисел → TypeCoercionError
"""

from dataclasses import dataclass, field
from fractions import Fraction
from typing import Any, ClassVar

from exactcalc.core.domain.integral import IntegralOps
from exactcalc.core.domain.kinds import Kind
from exactcalc.core.domain.numeric import NumericValue, Parts, as_parts, estr_fraction, make_rational
from exactcalc.core.domain.transcendental import TranscendentalOps
from exactcalc.core.errors import DivisionByZero


@dataclass(frozen=True, eq=False, repr=False)
class Complex(TranscendentalOps, IntegralOps, NumericValue):
    """
    Комплексное число.

    Examples:
        >>> Complex(1, 1) * Complex(1, -1)
        Complex(2)
        >>> Complex(0, 11).mod(5)
        Complex(1i)
        >>> Complex(4, 4).quo(5)
        Rational(0)
    """

    real: Any = 0
    imag: Any = 0
    _parts: Parts = field(init=False, repr=False)

    kind: ClassVar[Kind] = Kind.COMPLEX

    def __post_init__(self) -> None:
        a, b = as_parts(self.real)
        c, d = as_parts(self.imag)
        self._assign(a - d, b + c)

    def _assign(self, re: Fraction, im: Fraction) -> None:
        object.__setattr__(self, "real", make_rational(re))
        object.__setattr__(self, "imag", make_rational(im))
        object.__setattr__(self, "_parts", (re, im))

    @classmethod
    def from_parts(cls, re: Fraction, im: Fraction) -> "Complex":
        """Complex из точных компонент без повторной валидации."""
        instance = cls.__new__(cls)
        instance._assign(re, im)
        return instance

    def parts(self) -> Parts:
        return self._parts

    # -------------------------------------------------------------------------
    # Арифметика (после coerce оба операнда имеют вид Complex)
    # -------------------------------------------------------------------------

    def _add(self, other: NumericValue) -> NumericValue:
        (a, b), (c, d) = self._parts, other.parts()
        return Complex.from_parts(a + c, b + d)

    def _sub(self, other: NumericValue) -> NumericValue:
        (a, b), (c, d) = self._parts, other.parts()
        return Complex.from_parts(a - c, b - d)

    def _mul(self, other: NumericValue) -> NumericValue:
        (a, b), (c, d) = self._parts, other.parts()
        return Complex.from_parts(a * c - b * d, a * d + b * c)

    def _truediv(self, other: NumericValue) -> NumericValue:
        (a, b), (c, d) = self._parts, other.parts()
        norm = c * c + d * d
        if not norm:
            raise DivisionByZero(f"division of {self} by zero")
        return Complex.from_parts((a * c + b * d) / norm, (b * c - a * d) / norm)

    def estr(self) -> str:
        """
        Examples:
            >>> Complex(Rational(-1, 2), 2).estr()
            'Complex(Rational(-1,2),2)'
            >>> Complex(4).estr()
            'Complex(4)'
        """
        re, im = self._parts
        if not im:
            return f"Complex({estr_fraction(re)})"
        return f"Complex({estr_fraction(re)},{estr_fraction(im)})"
