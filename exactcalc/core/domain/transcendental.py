"""
Transcendental — Epsilon-ограниченные функции NumericValue

Каждая функция принимает необязательный eps, который перекрывает
epsilon конфигурации только для этого вызова.

Вид результата:
- Integer/Rational: Rational, если главное значение вещественно, иначе
  Complex (acos(2), ln(-1), sqrt(-4), (-1) ** 0.1)
- Complex: всегда Complex (кроме abs и arg, которые возвращают Rational)

Точные случаи вычисляются без приближения: целые степени, рациональные
корни из точных степеней, sqrt точных квадратов, hypot(3, 4).
"""

from fractions import Fraction
from typing import Any

from exactcalc.core.domain.kinds import Kind
from exactcalc.core.domain.numeric import (
    NumericValue,
    Parts,
    as_int,
    as_parts,
    as_real,
    make_rational,
    resolve_eps,
    resolve_flags,
)
from exactcalc.core.errors import DivisionByZero, DomainError
from exactcalc.core.math import kernel, rounding

# Биты флагов sqrt
SQRT_EXACT_FLAG = 32
SQRT_NEGATE_FLAG = 64


def _pair_mul(a: Parts, b: Parts) -> Parts:
    return a[0] * b[0] - a[1] * b[1], a[0] * b[1] + a[1] * b[0]


def _pair_power(base: Parts, exponent: int) -> Parts:
    """base ** exponent для целого exponent (возведение в квадрат)."""
    if base[1] == 0:
        return base[0] ** exponent, Fraction(0)

    result: Parts = (Fraction(1), Fraction(0))
    square = base
    remaining = abs(exponent)
    while remaining:
        if remaining & 1:
            result = _pair_mul(result, square)
        square = _pair_mul(square, square)
        remaining >>= 1
    if exponent < 0:
        norm = result[0] ** 2 + result[1] ** 2
        result = result[0] / norm, -result[1] / norm
    return result


class TranscendentalOps:
    """Трансцендентные функции, степени и корни."""

    def _apply(self: Any, name: str, eps: Any) -> NumericValue:
        re, im = self.parts()
        return self._wrap(*kernel.evaluate(name, re, im, resolve_eps(eps)))

    # -------------------------------------------------------------------------
    # Тригонометрические
    # -------------------------------------------------------------------------

    def sin(self, eps: Any = None) -> NumericValue:
        return self._apply("sin", eps)

    def cos(self, eps: Any = None) -> NumericValue:
        return self._apply("cos", eps)

    def tan(self, eps: Any = None) -> NumericValue:
        return self._apply("tan", eps)

    def cot(self, eps: Any = None) -> NumericValue:
        return self._apply("cot", eps)

    def sec(self, eps: Any = None) -> NumericValue:
        return self._apply("sec", eps)

    def csc(self, eps: Any = None) -> NumericValue:
        return self._apply("csc", eps)

    def asin(self, eps: Any = None) -> NumericValue:
        return self._apply("asin", eps)

    def acos(self, eps: Any = None) -> NumericValue:
        return self._apply("acos", eps)

    def atan(self, eps: Any = None) -> NumericValue:
        return self._apply("atan", eps)

    def acot(self, eps: Any = None) -> NumericValue:
        return self._apply("acot", eps)

    def asec(self, eps: Any = None) -> NumericValue:
        return self._apply("asec", eps)

    def acsc(self, eps: Any = None) -> NumericValue:
        return self._apply("acsc", eps)

    # -------------------------------------------------------------------------
    # Гиперболические
    # -------------------------------------------------------------------------

    def sinh(self, eps: Any = None) -> NumericValue:
        return self._apply("sinh", eps)

    def cosh(self, eps: Any = None) -> NumericValue:
        return self._apply("cosh", eps)

    def tanh(self, eps: Any = None) -> NumericValue:
        return self._apply("tanh", eps)

    def coth(self, eps: Any = None) -> NumericValue:
        return self._apply("coth", eps)

    def sech(self, eps: Any = None) -> NumericValue:
        return self._apply("sech", eps)

    def csch(self, eps: Any = None) -> NumericValue:
        return self._apply("csch", eps)

    def asinh(self, eps: Any = None) -> NumericValue:
        return self._apply("asinh", eps)

    def acosh(self, eps: Any = None) -> NumericValue:
        return self._apply("acosh", eps)

    def atanh(self, eps: Any = None) -> NumericValue:
        return self._apply("atanh", eps)

    def acoth(self: Any, eps: Any = None) -> NumericValue:
        """
        Обратный гиперболический котангенс.

        Raises:
            DomainError: При x in {-1, 0, 1}
        """
        if self.parts() in ((Fraction(-1), Fraction(0)), (Fraction(0), Fraction(0)), (Fraction(1), Fraction(0))):
            raise DomainError(f"acoth is not defined at {self}")
        return self._apply("acoth", eps)

    def asech(self, eps: Any = None) -> NumericValue:
        return self._apply("asech", eps)

    def acsch(self, eps: Any = None) -> NumericValue:
        return self._apply("acsch", eps)

    def gd(self, eps: Any = None) -> NumericValue:
        """Функция Гудермана: 2 * atan(tanh(x / 2))."""
        return self._apply("gd", eps)

    def agd(self, eps: Any = None) -> NumericValue:
        """Обратная функция Гудермана: 2 * atanh(tan(x / 2))."""
        return self._apply("agd", eps)

    # -------------------------------------------------------------------------
    # Экспонента и логарифмы
    # -------------------------------------------------------------------------

    def exp(self, eps: Any = None) -> NumericValue:
        return self._apply("exp", eps)

    def ln(self, eps: Any = None) -> NumericValue:
        """Натуральный логарифм; ln(0) → DomainError, ln(-1) = pi*i."""
        return self._apply("ln", eps)

    def log(self, eps: Any = None) -> NumericValue:
        """Десятичный логарифм."""
        return self._apply("log", eps)

    # -------------------------------------------------------------------------
    # Степени и корни
    # -------------------------------------------------------------------------

    def power(self: Any, y: Any, eps: Any = None) -> NumericValue:
        """
        x ** y.

        Целая степень и рациональная степень неотрицательного вещественного
        x с точным корнем вычисляются точно; иначе главное значение с
        точностью eps.

        Raises:
            DivisionByZero: 0 ** отрицательная вещественная степень

        Examples:
            >>> Rational(81).power(Rational(1, 4))
            Rational(3)
            >>> Rational(8).power(Fraction(2, 3))
            Rational(4)
        """
        base = self.parts()
        exp_re, exp_im = as_parts(y)
        accuracy = resolve_eps(eps)

        if base == (0, 0) and not exp_im and exp_re < 0:
            raise DivisionByZero(f"zero raised to negative power {exp_re}")

        if not exp_im and exp_re.denominator == 1:
            return self._exact(*_pair_power(base, exp_re.numerator))

        if not exp_im and not base[1] and base[0] >= 0:
            root = kernel.exact_root(base[0], exp_re.denominator)
            if root is not None:
                return self._exact(root**exp_re.numerator, Fraction(0))

        return self._wrap(*kernel.power(base, (exp_re, exp_im), accuracy))

    def root(self: Any, n: Any, eps: Any = None) -> NumericValue:
        """
        Корень степени n (n — положительное целое).

        Для вещественного x: нечётная степень из отрицательного числа даёт
        вещественный отрицательный корень, чётная → DomainError.
        Для Complex — главное значение.

        Examples:
            >>> Rational(7).root(4, "1e-5")
            Rational(162658/100000)
        """
        degree = as_int(n, "root degree")
        if degree < 1:
            raise DomainError(f"root degree must be positive, got {degree}")
        accuracy = resolve_eps(eps)
        re, im = self.parts()

        if not im and self.kind is not Kind.COMPLEX:
            if re < 0 and degree % 2 == 0:
                raise DomainError(f"even root of negative number: {self}")
            exact = kernel.exact_root(re, degree)
            if exact is not None:
                return self._exact(exact, Fraction(0))
            if re < 0:
                magnitude, _ = kernel.root_approximation((-re, Fraction(0)), degree, accuracy, 24)
                return self._exact(-magnitude, Fraction(0))

        return self._wrap(*kernel.root_approximation((re, im), degree, accuracy, 24))

    def sqrt(self: Any, eps: Any = None, flags: Any = None) -> NumericValue:
        """
        Квадратный корень.

        Флаги (default: config sqrt):
        - z & 31 — режим округления компонент до кратных eps
        - z & 32 — вернуть точный корень, если он существует
        - z & 64 — вернуть корень с противоположным знаком

        Examples:
            >>> Rational(2).sqrt("1e-4", 0)
            Rational(7071/5000)
            >>> Rational(-4).sqrt()
            Complex(2i)
        """
        accuracy = resolve_eps(eps)
        mode = resolve_flags(flags, "sqrt")
        value = self.parts()

        exact = kernel.exact_sqrt(value)
        if exact is not None:
            if mode & SQRT_EXACT_FLAG:
                re, im = exact
            else:
                re = rounding.appr(exact[0], accuracy, mode)
                im = rounding.appr(exact[1], accuracy, mode)
        else:
            re, im = kernel.root_approximation(value, 2, accuracy, mode & rounding.ROUNDING_MASK)

        if mode & SQRT_NEGATE_FLAG:
            re, im = -re, -im
        return self._wrap(re, im)

    # -------------------------------------------------------------------------
    # Модуль, аргумент, hypot, atan2
    # -------------------------------------------------------------------------

    def abs(self: Any, eps: Any = None) -> NumericValue:
        """
        Модуль числа (Rational).

        Для чисто вещественных и чисто мнимых значений — точно; иначе
        hypot(re, im) с точностью eps.
        """
        re, im = self.parts()
        if not im:
            return make_rational(abs(re))
        if not re:
            return make_rational(abs(im))
        return make_rational(kernel.hypot(re, im, resolve_eps(eps)))

    def arg(self: Any, eps: Any = None) -> NumericValue:
        """Аргумент (угол) числа; 0 для неотрицательных вещественных."""
        accuracy = resolve_eps(eps)
        re, im = self.parts()
        if not im:
            return make_rational(kernel.pi(accuracy) if re < 0 else Fraction(0))
        return make_rational(kernel.atan2(im, re, accuracy))

    def hypot(self: Any, y: Any, eps: Any = None) -> NumericValue:
        """sqrt(x**2 + y**2) для вещественных x, y."""
        x = self._real("hypot")
        return make_rational(kernel.hypot(x, as_real(y, "hypot argument"), resolve_eps(eps)))

    def ltol(self: Any, eps: Any = None) -> NumericValue:
        """
        Второй катет прямоугольного треугольника с гипотенузой 1: sqrt(1 - x**2).

        Examples:
            >>> Rational(3, 5).ltol()
            Rational(4/5)

        Raises:
            DomainError: Если |x| > 1
        """
        x = self._real("ltol")
        return make_rational(kernel.leg_to_leg(x, resolve_eps(eps)))

    def atan2(self: Any, x: Any, eps: Any = None) -> NumericValue:
        """Угол точки (x, self) для вещественных аргументов; atan2(0, 0) = 0."""
        y = self._real("atan2")
        return make_rational(kernel.atan2(y, as_real(x, "atan2 argument"), resolve_eps(eps)))
