"""
NumericValue — Базовый интерфейс числовой башни

Tagged union {Integer, Rational, Complex}. Каждый вид реализует:
- kind: Kind (дискриминант)
- parts(): точные компоненты (re, im) как Fraction
- арифметику внутри вида (_add, _sub, _mul, _truediv, _floordiv, _mod)

Базовый класс реализует поверх этого:
- бинарные операторы через coerce(a, b) в каждой точке вызова
- равенство по значению между видами и нативными скалярами
- упорядочивание (только для вещественных значений)
- семейство округления appr/round/bround/mod/quo/ceil/floor/mmin
- предикаты в двух формах: числовой 0/1 (iseven) и bool (is_even)
- строковое представление в режимах вывода

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Значения неизменяемы: каждая операция возвращает новое значение
2. Сравнение на порядок не-вещественных значений → TypeCoercionError
3. Демоция Complex → Rational выполняется ТОЛЬКО в mod, round, bround,
   appr, quo (и построенных на них ceil, floor, mmin)
"""

import sys
from fractions import Fraction
from typing import Any, ClassVar, Optional

from exactcalc.config.context import get_config
from exactcalc.core.domain.kinds import Kind
from exactcalc.core.errors import DivisionByZero, DomainError, MathError, TypeCoercionError
from exactcalc.core.math import kernel, rounding
from exactcalc.core.math.formatting import OutputMode, format_fraction, parse_mode
from exactcalc.core.math.literals import to_fraction

Parts = tuple[Fraction, Fraction]

_ZERO = Fraction(0)
_ONE = Fraction(1)


# =============================================================================
# ФАБРИКИ РЕЗУЛЬТАТОВ
# =============================================================================


def make_rational(value: Fraction) -> "NumericValue":
    """Rational из точного значения."""
    from exactcalc.core.domain.rational import Rational  # rational.py наследует NumericValue

    return Rational.from_fraction(value)


def make_complex(re: Fraction, im: Fraction) -> "NumericValue":
    """Complex из точных компонент (без демоции)."""
    from exactcalc.core.domain.complex import Complex  # complex.py наследует NumericValue

    return Complex.from_parts(re, im)


def make_real_or_complex(re: Fraction, im: Fraction) -> "NumericValue":
    """Rational, если мнимая часть точно равна нулю, иначе Complex."""
    if im == 0:
        return make_rational(re)
    return make_complex(re, im)


def _coerce(a: "NumericValue", b: Any) -> tuple["NumericValue", "NumericValue"]:
    from exactcalc.core.domain.coercion import coerce  # coercion.py импортирует все виды

    return coerce(a, b)


# =============================================================================
# ПРИВЕДЕНИЕ АРГУМЕНТОВ
# =============================================================================


def as_parts(value: Any) -> Parts:
    """
    Точные компоненты (re, im) произвольного числового аргумента.

    Raises:
        TypeCoercionError: Если значение не является числом
    """
    if isinstance(value, NumericValue):
        return value.parts()
    if isinstance(value, complex):
        return to_fraction(value.real), to_fraction(value.imag)
    return to_fraction(value), _ZERO


def as_real(value: Any, name: str = "argument") -> Fraction:
    """
    Точное вещественное значение аргумента.

    Raises:
        TypeCoercionError: Если аргумент не число или не вещественный
    """
    re, im = as_parts(value)
    if im:
        raise TypeCoercionError(f"{name} must be real, got {value}")
    return re


def as_int(value: Any, name: str = "argument") -> int:
    """
    Целое значение аргумента.

    Raises:
        DomainError: Если аргумент не целый
    """
    real = as_real(value, name)
    if real.denominator != 1:
        raise DomainError(f"{name} must be an integer, got {real}")
    return real.numerator


def resolve_eps(eps: Any) -> Fraction:
    """Явный eps или epsilon из текущей конфигурации; eps <= 0 → DomainError."""
    if eps is None:
        return get_config().epsilon
    return kernel.validate_eps(as_real(eps, "eps"))


def resolve_flags(flags: Any, name: str) -> int:
    """Явные флаги округления или значение параметра name из конфигурации."""
    if flags is None:
        return getattr(get_config(), name)
    return rounding.validate_flags(as_real(flags, f"{name} flags"), name)


def _sign(value: Fraction) -> int:
    return (value > 0) - (value < 0)


def _truth(flag: bool) -> "NumericValue":
    return make_rational(_ONE if flag else _ZERO)


def _complex_hash(re: Fraction, im: Fraction) -> int:
    # совпадает с hash(complex(re, im)) для представимых значений
    if not im:
        return hash(re)
    width = sys.hash_info.width
    combined = (hash(re) + sys.hash_info.imag * hash(im)) % 2**width
    if combined >= 2 ** (width - 1):
        combined -= 2**width
    return -2 if combined == -1 else combined


# =============================================================================
# NUMERIC VALUE
# =============================================================================


class NumericValue:
    """
    Базовый класс трёх видов чисел.

    Подклассы объявляют kind и реализуют parts(), _exact() и арифметику
    внутри своего вида.
    """

    kind: ClassVar[Kind]

    # -------------------------------------------------------------------------
    # Интерфейс вида
    # -------------------------------------------------------------------------

    def parts(self) -> Parts:
        """Точные компоненты (re, im)."""
        raise NotImplementedError

    def _wrap(self, re: Fraction, im: Fraction) -> "NumericValue":
        """Результат приближения: Complex остаётся Complex, иначе Rational или Complex."""
        if self.kind is Kind.COMPLEX:
            return make_complex(re, im)
        return make_real_or_complex(re, im)

    def _exact(self, re: Fraction, im: Fraction) -> "NumericValue":
        """
        Точный результат покомпонентной операции без демоции.

        Совпадает с _wrap; Integer переопределяет его и сохраняет вид
        для целых результатов.
        """
        return self._wrap(re, im)

    def _add(self, other: "NumericValue") -> "NumericValue":
        raise NotImplementedError

    def _sub(self, other: "NumericValue") -> "NumericValue":
        raise NotImplementedError

    def _mul(self, other: "NumericValue") -> "NumericValue":
        raise NotImplementedError

    def _truediv(self, other: "NumericValue") -> "NumericValue":
        raise NotImplementedError

    def _floordiv(self, other: "NumericValue") -> "NumericValue":
        return self.quo(other)

    def _mod(self, other: "NumericValue") -> "NumericValue":
        return self.mod(other)

    # -------------------------------------------------------------------------
    # Бинарные операторы: coerce(a, b) в каждой точке вызова
    # -------------------------------------------------------------------------

    def __add__(self, other: Any) -> "NumericValue":
        a, b = _coerce(self, other)
        return a._add(b)

    def __radd__(self, other: Any) -> "NumericValue":
        a, b = _coerce(self, other)
        return b._add(a)

    def __sub__(self, other: Any) -> "NumericValue":
        a, b = _coerce(self, other)
        return a._sub(b)

    def __rsub__(self, other: Any) -> "NumericValue":
        a, b = _coerce(self, other)
        return b._sub(a)

    def __mul__(self, other: Any) -> "NumericValue":
        a, b = _coerce(self, other)
        return a._mul(b)

    def __rmul__(self, other: Any) -> "NumericValue":
        a, b = _coerce(self, other)
        return b._mul(a)

    def __truediv__(self, other: Any) -> "NumericValue":
        a, b = _coerce(self, other)
        return a._truediv(b)

    def __rtruediv__(self, other: Any) -> "NumericValue":
        a, b = _coerce(self, other)
        return b._truediv(a)

    def __floordiv__(self, other: Any) -> "NumericValue":
        a, b = _coerce(self, other)
        return a._floordiv(b)

    def __rfloordiv__(self, other: Any) -> "NumericValue":
        a, b = _coerce(self, other)
        return b._floordiv(a)

    def __mod__(self, other: Any) -> "NumericValue":
        a, b = _coerce(self, other)
        return a._mod(b)

    def __rmod__(self, other: Any) -> "NumericValue":
        a, b = _coerce(self, other)
        return b._mod(a)

    def __divmod__(self, other: Any) -> tuple["NumericValue", "NumericValue"]:
        return self // other, self % other

    def __rdivmod__(self, other: Any) -> tuple["NumericValue", "NumericValue"]:
        a, b = _coerce(self, other)
        return b // a, b % a

    def __pow__(self, other: Any) -> "NumericValue":
        return self.power(other)

    def __rpow__(self, other: Any) -> "NumericValue":
        a, b = _coerce(self, other)
        return b.power(a)

    def power(self, y: Any, eps: Any = None) -> "NumericValue":
        raise NotImplementedError

    # -------------------------------------------------------------------------
    # Унарные операции
    # -------------------------------------------------------------------------

    def __neg__(self) -> "NumericValue":
        re, im = self.parts()
        return self._exact(-re, -im)

    def __pos__(self) -> "NumericValue":
        return self

    def __abs__(self) -> "NumericValue":
        return self.abs()

    def abs(self, eps: Any = None) -> "NumericValue":
        raise NotImplementedError

    def conj(self) -> "NumericValue":
        """Комплексно сопряжённое."""
        re, im = self.parts()
        return self._exact(re, -im)

    def re(self) -> "NumericValue":
        """Вещественная часть (Rational)."""
        return make_rational(self.parts()[0])

    def im(self) -> "NumericValue":
        """Мнимая часть (Rational)."""
        return make_rational(self.parts()[1])

    def norm(self) -> "NumericValue":
        """re**2 + im**2 (Rational)."""
        re, im = self.parts()
        return make_rational(re * re + im * im)

    def inverse(self) -> "NumericValue":
        """
        1 / x.

        Raises:
            DivisionByZero: Если x == 0
        """
        re, im = self.parts()
        norm = re * re + im * im
        if not norm:
            raise DivisionByZero(f"inverse of zero: {self}")
        return self._exact(re / norm, -im / norm)

    # -------------------------------------------------------------------------
    # Равенство и порядок
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if isinstance(other, str):
            return NotImplemented
        try:
            theirs = as_parts(other)
        except TypeCoercionError:
            return NotImplemented
        return self.parts() == theirs

    def __hash__(self) -> int:
        return _complex_hash(*self.parts())

    def _ordered(self, other: Any) -> tuple[Fraction, Fraction]:
        mine, theirs = self.parts(), as_parts(other)
        if mine[1] or theirs[1]:
            raise TypeCoercionError(f"ordering is not defined for complex values: {self}, {other}")
        return mine[0], theirs[0]

    def __lt__(self, other: Any) -> bool:
        a, b = self._ordered(other)
        return a < b

    def __le__(self, other: Any) -> bool:
        a, b = self._ordered(other)
        return a <= b

    def __gt__(self, other: Any) -> bool:
        a, b = self._ordered(other)
        return a > b

    def __ge__(self, other: Any) -> bool:
        a, b = self._ordered(other)
        return a >= b

    def compare(self, other: Any) -> Optional[int]:
        """
        Трёхстороннее сравнение.

        Returns:
            -1, 0, 1 или None, если порядок не определён (не-вещественные
            значения или нечисловой операнд)
        """
        try:
            a, b = self._ordered(other)
        except MathError:
            return None
        return _sign(a - b)

    def cmp(self, other: Any) -> "NumericValue":
        """
        Покомпонентное сравнение: sign(re - re') + sign(im - im') * i.

        Для вещественного результата возвращает Rational -1/0/1.
        """
        re, im = self.parts()
        other_re, other_im = as_parts(other)
        return make_real_or_complex(Fraction(_sign(re - other_re)), Fraction(_sign(im - other_im)))

    # -------------------------------------------------------------------------
    # Округление (демоция при нулевой мнимой части)
    # -------------------------------------------------------------------------

    def appr(self, y: Any = None, flags: Any = None) -> "NumericValue":
        """
        Приближение кратным y (default: epsilon) по флагам (default: config appr).

        Examples:
            >>> Rational("-5.44").appr("0.1", 0)
            Rational(-11/2)
        """
        step = get_config().epsilon if y is None else as_real(y, "appr step")
        mode = resolve_flags(flags, "appr")
        re, im = self.parts()
        return make_real_or_complex(rounding.appr(re, step, mode), rounding.appr(im, step, mode))

    def round(self, places: Any = 0, flags: Any = None) -> "NumericValue":
        """Округление до places десятичных знаков (флаги: config round)."""
        digits = as_int(places, "places")
        mode = resolve_flags(flags, "round")
        re, im = self.parts()
        return make_real_or_complex(
            rounding.round_places(re, digits, mode),
            rounding.round_places(im, digits, mode),
        )

    def bround(self, places: Any = 0, flags: Any = None) -> "NumericValue":
        """Округление до places двоичных знаков (флаги: config round)."""
        digits = as_int(places, "places")
        mode = resolve_flags(flags, "round")
        re, im = self.parts()
        return make_real_or_complex(
            rounding.bround_places(re, digits, mode),
            rounding.bround_places(im, digits, mode),
        )

    def mod(self, y: Any, flags: Any = None) -> "NumericValue":
        """Остаток x - y * quo (флаги: config mod); y == 0 возвращает x."""
        step = as_real(y, "modulus")
        mode = resolve_flags(flags, "mod")
        re, im = self.parts()
        return make_real_or_complex(rounding.mod(re, step, mode), rounding.mod(im, step, mode))

    def quo(self, y: Any, flags: Any = None) -> "NumericValue":
        """Частное (флаги: config quo); y == 0 возвращает 0."""
        step = as_real(y, "divisor")
        mode = resolve_flags(flags, "quo")
        re, im = self.parts()
        return make_real_or_complex(
            Fraction(rounding.quo(re, step, mode)),
            Fraction(rounding.quo(im, step, mode)),
        )

    def ceil(self) -> "NumericValue":
        """Наименьшее целое >= x (покомпонентно)."""
        return self.appr(1, 1)

    def floor(self) -> "NumericValue":
        """Наибольшее целое <= x (покомпонентно)."""
        return self.appr(1, 0)

    def mmin(self, md: Any) -> "NumericValue":
        """Наименьший по модулю вычет: mod(md, 16)."""
        return self.mod(md, 16)

    # -------------------------------------------------------------------------
    # Предикаты, определённые для всех видов
    # -------------------------------------------------------------------------

    def is_zero(self) -> bool:
        return self.parts() == (_ZERO, _ZERO)

    def is_real(self) -> bool:
        return self.parts()[1] == 0

    def is_imag(self) -> bool:
        re, im = self.parts()
        return re == 0 and im != 0

    def is_int(self) -> bool:
        re, im = self.parts()
        return im == 0 and re.denominator == 1

    def is_even(self) -> bool:
        re, im = self.parts()
        return im == 0 and re.denominator == 1 and re.numerator % 2 == 0

    def is_odd(self) -> bool:
        re, im = self.parts()
        return im == 0 and re.denominator == 1 and re.numerator % 2 == 1

    def isreal(self) -> "NumericValue":
        return _truth(self.is_real())

    def isimag(self) -> "NumericValue":
        return _truth(self.is_imag())

    def isint(self) -> "NumericValue":
        return _truth(self.is_int())

    def iseven(self) -> "NumericValue":
        return _truth(self.is_even())

    def isodd(self) -> "NumericValue":
        return _truth(self.is_odd())

    def __bool__(self) -> bool:
        return not self.is_zero()

    # -------------------------------------------------------------------------
    # Преобразования
    # -------------------------------------------------------------------------

    def _real(self, name: str) -> Fraction:
        """Вещественное значение для операций, не определённых на Complex."""
        if self.kind is Kind.COMPLEX:
            raise TypeCoercionError(f"{name} is not defined for complex values: {self}")
        return self.parts()[0]

    def _real_part(self, name: str) -> Fraction:
        re, im = self.parts()
        if im:
            raise TypeCoercionError(f"cannot convert complex value {self} to {name}")
        return re

    def __int__(self) -> int:
        return int(self._real_part("int"))

    def __float__(self) -> float:
        return float(self._real_part("float"))

    def __complex__(self) -> complex:
        re, im = self.parts()
        return complex(float(re), float(im))

    def int(self) -> "NumericValue":
        """Целая часть каждой компоненты (отбрасывание к нулю)."""
        re, im = self.parts()
        return self._exact(Fraction(int(re)), Fraction(int(im)))

    def frac(self) -> "NumericValue":
        """Дробная часть каждой компоненты: x - int(x)."""
        re, im = self.parts()
        return self._exact(re - int(re), im - int(im))

    def to_s(self, mode: Any = None) -> str:
        """
        Строковое представление в режиме mode (default: config mode).

        Examples:
            >>> Complex(Rational(1, 5), Rational(2, 5)).to_s()
            '0.2+0.4i'
            >>> Complex(Rational(1, 5), Rational(2, 5)).to_s("frac")
            '1/5+2i/5'
        """
        cfg = get_config()
        output = cfg.mode if mode is None else parse_mode(mode)
        re, im = self.parts()
        if not im:
            return format_fraction(re, output, cfg.display)

        imag = format_fraction(abs(im), output, cfg.display)
        imag = imag.replace("/", "i/", 1) if "/" in imag else imag + "i"
        if im < 0:
            imag = "-" + imag
        if not re:
            return imag
        real = format_fraction(re, output, cfg.display)
        return f"{real}{imag}" if im < 0 else f"{real}+{imag}"

    def __str__(self) -> str:
        return self.to_s()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_s(OutputMode.FRACTION)})"

    def estr(self) -> str:
        """Выражение, конструирующее равное значение."""
        raise NotImplementedError


def estr_fraction(value: Fraction) -> str:
    """Rational-литерал для estr(): "4" или "Rational(-1,2)"."""
    if value.denominator == 1:
        return str(value.numerator)
    return f"Rational({value.numerator},{value.denominator})"
