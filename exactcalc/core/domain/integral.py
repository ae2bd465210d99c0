"""
Integral — Теория чисел, комбинаторика и предикаты NumericValue

Большинство операций определены только для вещественных значений: на
Complex они вызывают TypeCoercionError. Операции, требующие целого
аргумента, вызывают DomainError для нецелых значений.

Исключения (определены и для Complex):
- comb(k): биномиальный коэффициент от произвольного x
- ilog(b), ilog10(), ilog2(): по модулю |x|

Результаты:
- числовые значения — того же вида, что и x (Integer остаётся Integer)
- предикаты — в двух формах: Rational 0/1 (isprime) и bool (is_prime)
"""

import math
from fractions import Fraction
from typing import Any

from exactcalc.config.context import get_config
from exactcalc.core.domain.numeric import (
    NumericValue,
    Parts,
    as_int,
    as_real,
    make_rational,
    resolve_flags,
    _truth,
)
from exactcalc.core.errors import DomainError, OutOfRangeError
from exactcalc.core.math import continued_fractions, number_theory, rounding

_ZERO = Fraction(0)


def _require_int(value: Fraction, name: str) -> int:
    if value.denominator != 1:
        raise DomainError(f"{name} requires an integer, got {value}")
    return value.numerator


def _require_base(value: Any) -> int:
    base = as_int(value, "base")
    if base < 2:
        raise DomainError(f"base must be at least 2, got {base}")
    return base


class IntegralOps:
    """Целочисленные функции и предикаты."""

    def _integral(self: Any, value: Fraction) -> NumericValue:
        return self._exact(Fraction(value), _ZERO)

    def _int_value(self: Any, name: str) -> int:
        return _require_int(self._real(name), name)

    # -------------------------------------------------------------------------
    # Числитель, знаменатель, quomod
    # -------------------------------------------------------------------------

    def num(self: Any) -> NumericValue:
        """Числитель (знак хранится в числителе)."""
        return self._integral(self._real("num").numerator)

    def den(self: Any) -> NumericValue:
        """Знаменатель (> 0)."""
        return self._integral(self._real("den").denominator)

    def quomod(self: Any, y: Any, flags: Any = None) -> tuple[NumericValue, NumericValue]:
        """
        Частное и остаток с общими флагами (default: config quomod).

        Examples:
            >>> Rational(10).quomod(-3)
            (Rational(-4), Rational(-2))
        """
        x = self._real("quomod")
        step = as_real(y, "divisor")
        mode = resolve_flags(flags, "quomod")
        return (
            make_rational(Fraction(rounding.quo(x, step, mode))),
            make_rational(rounding.mod(x, step, mode)),
        )

    # -------------------------------------------------------------------------
    # Комбинаторика и последовательности
    # -------------------------------------------------------------------------

    def fact(self: Any) -> NumericValue:
        """
        Факториал.

        Raises:
            DomainError: Если x не целое или x < 0
        """
        return self._integral(number_theory.factorial(self._int_value("fact")))

    def fib(self: Any) -> NumericValue:
        """Число Фибоначчи F(x) (x — целое, в том числе отрицательное)."""
        return self._integral(number_theory.fibonacci(self._int_value("fib")))

    def bernoulli(self: Any) -> NumericValue:
        """Число Бернулли B(x)."""
        return self._integral(number_theory.bernoulli(self._int_value("bernoulli")))

    def euler(self: Any) -> NumericValue:
        """Число Эйлера E(x)."""
        return self._integral(number_theory.euler(self._int_value("euler")))

    def catalan(self: Any) -> NumericValue:
        """Число Каталана C(x)."""
        return self._integral(number_theory.catalan(self._int_value("catalan")))

    def perm(self: Any, k: Any) -> NumericValue:
        """Число размещений x! / (x - k)! для целых x и k >= 0."""
        n = self._int_value("perm")
        return self._integral(number_theory.falling_factorial(n, as_int(k, "perm count")))

    def comb(self: Any, k: Any) -> NumericValue:
        """
        Биномиальный коэффициент x(x-1)...(x-k+1) / k!.

        Определён для любого x, включая Complex; 0 при k < 0.

        Examples:
            >>> Rational("7.5").comb(3)
            Rational(715/16)
        """
        count = as_int(k, "comb count")
        re, im = self.parts()
        if count < 0:
            return self._exact(_ZERO, _ZERO)
        if not im and re.denominator == 1 and re >= 0:
            return self._exact(Fraction(number_theory.binomial(re.numerator, count)), _ZERO)

        product: Parts = (Fraction(1), _ZERO)
        for i in range(count):
            factor = (re - i, im)
            product = (
                product[0] * factor[0] - product[1] * factor[1],
                product[0] * factor[1] + product[1] * factor[0],
            )
        scale = number_theory.factorial(count)
        return self._exact(product[0] / scale, product[1] / scale)

    # -------------------------------------------------------------------------
    # Делимость
    # -------------------------------------------------------------------------

    def gcd(self: Any, *ys: Any) -> NumericValue:
        """
        Наибольший общий делитель рациональных чисел (неотрицательный).

        gcd(a/b, c/d) = gcd(a, c) / lcm(b, d)

        Examples:
            >>> Rational(12).gcd(-24, 30)
            Rational(6)
        """
        values = [self._real("gcd")] + [as_real(y, "gcd argument") for y in ys]
        numerator = 0
        denominator = 1
        for value in values:
            numerator = math.gcd(numerator, value.numerator)
            denominator = denominator * value.denominator // math.gcd(denominator, value.denominator)
        return self._integral(Fraction(numerator, denominator))

    def lcm(self: Any, *ys: Any) -> NumericValue:
        """Наименьшее общее кратное (неотрицательное); 0, если среди аргументов есть 0."""
        values = [self._real("lcm")] + [as_real(y, "lcm argument") for y in ys]
        if any(value == 0 for value in values):
            return self._integral(_ZERO)
        numerator = 1
        denominator = 0
        for value in values:
            numerator = abs(numerator * value.numerator) // math.gcd(numerator, value.numerator)
            denominator = math.gcd(denominator, value.denominator)
        return self._integral(Fraction(numerator, denominator))

    def factor(self: Any, limit: Any = number_theory.DEFAULT_FACTOR_LIMIT) -> NumericValue:
        """Наименьший простой делитель |x|, не превышающий limit, иначе 1."""
        n = self._int_value("factor")
        return self._integral(number_theory.smallest_factor(n, as_int(limit, "factor limit")))

    def fcnt(self: Any, d: Any) -> NumericValue:
        """Сколько раз d делит x."""
        n = self._int_value("fcnt")
        return self._integral(number_theory.factor_count(n, as_int(d, "fcnt divisor")))

    def frem(self: Any, d: Any) -> NumericValue:
        """|x| без всех множителей d."""
        n = self._int_value("frem")
        return self._integral(number_theory.remove_factor(n, as_int(d, "frem divisor")))

    def jacobi(self: Any, y: Any) -> NumericValue:
        """Символ Якоби (x/y); 0 при чётном или неположительном y."""
        a = self._int_value("jacobi")
        return self._integral(number_theory.jacobi(a, as_int(y, "jacobi argument")))

    def minv(self: Any, md: Any) -> NumericValue:
        """
        Обратный к x по модулю md, приведённый по флагам config mod.

        Returns:
            Обратный элемент или 0, если x и md не взаимно просты
        """
        a = self._int_value("minv")
        modulus = as_int(md, "minv modulus")
        inverse = number_theory.modular_inverse(a, modulus)
        if inverse is None:
            return self._integral(_ZERO)
        return self._integral(rounding.mod(Fraction(inverse), Fraction(modulus), resolve_flags(None, "mod")))

    def gcdrem(self: Any, y: Any) -> NumericValue:
        """
        Наибольший делитель x, взаимно простой с y.

        Examples:
            >>> Rational(630).gcdrem(6)
            Rational(35)
        """
        n = self._int_value("gcdrem")
        return self._integral(number_theory.gcd_remainder(n, as_int(y, "gcdrem argument")))

    def lcmfact(self: Any) -> NumericValue:
        """lcm(1, 2, ..., x) для целого x >= 0."""
        return self._integral(number_theory.lcm_factorial(self._int_value("lcmfact")))

    def lfactor(self: Any, count: Any) -> NumericValue:
        """Наименьший простой делитель x среди первых count простых чисел, иначе 1."""
        n = self._int_value("lfactor")
        return self._integral(number_theory.least_prime_factor(n, as_int(count, "lfactor count")))

    # -------------------------------------------------------------------------
    # Цепные дроби
    # -------------------------------------------------------------------------

    def cfappr(self: Any, eps: Any = None, flags: Any = None) -> NumericValue:
        """
        Приближение цепными дробями (default: config epsilon и cfappr).

        |eps| < 1 — дробь с наименьшим знаменателем в пределах |eps| от x;
        |eps| >= 1 — лучшее приближение со знаменателем <= |eps|.

        Examples:
            >>> Rational(43, 30).cfappr(10, 1)
            Rational(13/9)
        """
        x = self._real("cfappr")
        bound = get_config().epsilon if eps is None else as_real(eps, "cfappr eps")
        mode = resolve_flags(flags, "cfappr")
        return self._integral(continued_fractions.cfappr(x, bound, mode))

    def cfsim(self: Any, flags: Any = None) -> NumericValue:
        """Соседняя дробь с меньшим знаменателем (флаги: config cfsim)."""
        x = self._real("cfsim")
        return self._integral(continued_fractions.cfsim(x, resolve_flags(flags, "cfsim")))

    # -------------------------------------------------------------------------
    # Целые корни и логарифмы
    # -------------------------------------------------------------------------

    def isqrt(self: Any) -> NumericValue:
        """Целая часть квадратного корня (x >= 0)."""
        x = self._real("isqrt")
        if x < 0:
            raise DomainError(f"isqrt of negative number: {x}")
        return self._integral(number_theory.integer_root(math.floor(x), 2))

    def iroot(self: Any, n: Any) -> NumericValue:
        """
        Целая часть корня степени n.

        Нечётный корень отрицательного числа отрицателен; чётный →
        DomainError.
        """
        x = self._real("iroot")
        degree = as_int(n, "iroot degree")
        if degree < 1:
            raise DomainError(f"iroot degree must be positive, got {degree}")
        if x < 0 and degree % 2 == 0:
            raise DomainError(f"even iroot of negative number: {x}")
        root = number_theory.integer_root(int(abs(x)), degree)
        return self._integral(-root if x < 0 else root)

    def ilog(self: Any, b: Any) -> NumericValue:
        """
        Наибольшее целое k с b**k <= |x| (b — целое >= 2).

        Examples:
            >>> Rational(1, 8).ilog(3)
            Rational(-2)

        Raises:
            DomainError: Если x == 0
        """
        base = _require_base(b)
        re, im = self.parts()
        norm = re * re + im * im
        if not norm:
            raise DomainError("ilog of zero")

        square = base * base
        if norm >= 1:
            k = number_theory.integer_log(math.floor(norm), square)
        else:
            inverse = 1 / norm
            k = number_theory.integer_log(math.floor(inverse), square)
            if square**k != inverse:
                k += 1
            k = -k
        return make_rational(Fraction(k))

    def ilog10(self) -> NumericValue:
        return self.ilog(10)

    def ilog2(self) -> NumericValue:
        return self.ilog(2)

    # -------------------------------------------------------------------------
    # Биты и цифры
    # -------------------------------------------------------------------------

    def highbit(self: Any) -> NumericValue:
        """Номер старшего единичного бита |x|; -1 для нуля."""
        n = abs(self._int_value("highbit"))
        return self._integral(n.bit_length() - 1)

    def lowbit(self: Any) -> NumericValue:
        """Номер младшего единичного бита |x|; -1 для нуля."""
        n = abs(self._int_value("lowbit"))
        return self._integral((n & -n).bit_length() - 1)

    def _digit_at(self: Any, name: str, position: int, base: int) -> int:
        x = abs(self._real(name))
        return math.floor(x * Fraction(base) ** -position) % base

    def digit(self: Any, n: Any, base: Any = 10) -> NumericValue:
        """
        Цифра |x| в позиции n (отрицательные n — дробная часть).

        Examples:
            >>> Rational("123456.789").digit(-1)
            Rational(7)
        """
        return self._integral(self._digit_at("digit", as_int(n, "digit position"), _require_base(base)))

    def digits(self: Any, base: Any = 10) -> NumericValue:
        """Количество цифр целой части |x| (не меньше 1)."""
        radix = _require_base(base)
        whole = int(abs(self._real("digits")))
        count = 1
        while whole >= radix:
            whole //= radix
            count += 1
        return self._integral(count)

    def has_bit(self: Any, n: Any) -> bool:
        """Бит n значения |x| установлен (отрицательные n — дробные биты)."""
        return self._digit_at("bit", as_int(n, "bit position"), 2) == 1

    def bit(self, n: Any) -> NumericValue:
        return _truth(self.has_bit(n))

    def xor(self: Any, *ys: Any) -> NumericValue:
        """
        Побитовое исключающее ИЛИ целых (дополнительный код для отрицательных).

        Examples:
            >>> Rational(5).xor(3, -7, 2, 9)
            Rational(-12)
        """
        result = self._int_value("xor")
        for y in ys:
            result ^= _require_int(as_real(y, "xor argument"), "xor")
        return self._integral(result)

    def char(self: Any) -> str:
        """
        Символ с кодом x.

        Raises:
            DomainError: Если x не целое
            OutOfRangeError: Если x вне 0–255
        """
        code = self._int_value("char")
        if not 0 <= code <= 255:
            raise OutOfRangeError(f"char code out of range 0-255: {code}")
        return chr(code) if code else ""

    # -------------------------------------------------------------------------
    # Предикаты
    # -------------------------------------------------------------------------

    def is_prime(self: Any) -> bool:
        """Простота |x| (x — целое)."""
        return number_theory.is_prime(self._int_value("isprime"))

    def isprime(self) -> NumericValue:
        return _truth(self.is_prime())

    def is_sq(self: Any) -> bool:
        """x — квадрат рационального числа."""
        x = self._real("issq")
        return number_theory.is_square(x.numerator) and number_theory.is_square(x.denominator)

    def issq(self) -> NumericValue:
        return _truth(self.is_sq())

    def is_mult(self: Any, y: Any) -> bool:
        """x — целое кратное y (для y == 0: x == 0)."""
        x = self._real("ismult")
        step = as_real(y, "ismult argument")
        if not step:
            return x == 0
        return (x / step).denominator == 1

    def ismult(self, y: Any) -> NumericValue:
        return _truth(self.is_mult(y))

    def is_rel(self: Any, y: Any) -> bool:
        """x и y взаимно просты (целые)."""
        a = self._int_value("isrel")
        return math.gcd(a, as_int(y, "isrel argument")) == 1

    def isrel(self, y: Any) -> NumericValue:
        return _truth(self.is_rel(y))

    def is_meq(self: Any, y: Any, md: Any) -> bool:
        """x ≡ y (mod md); при md == 0 — точное равенство."""
        difference = self._real("meq") - as_real(y, "meq argument")
        modulus = as_real(md, "meq modulus")
        return rounding.mod(difference, modulus, resolve_flags(None, "mod")) == 0

    def meq(self, y: Any, md: Any) -> NumericValue:
        return _truth(self.is_meq(y, md))

    def mne(self, y: Any, md: Any) -> NumericValue:
        return _truth(not self.is_meq(y, md))
