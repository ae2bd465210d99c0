"""
Special — Module-style builtins без единственного получателя

- pi(eps): число pi с точностью eps
- polar(radius, angle, eps): комплексное число по модулю и аргументу
- hnrmod(v, h, n, r): v mod (h * 2**n + r)
- config(name, value): чтение/изменение конфигурации
"""

from fractions import Fraction
from typing import Any

from exactcalc.config import context
from exactcalc.core.domain import NumericValue, Rational
from exactcalc.core.domain.numeric import as_int, as_real, make_real_or_complex, resolve_eps
from exactcalc.core.math import kernel, number_theory
from exactcalc.core.math.formatting import OutputMode


def pi(eps: Any = None) -> NumericValue:
    """
    Число pi, округлённое до кратного eps (default: config epsilon).

    Examples:
        >>> pi("1e-5")
        Rational(314159/100000)
    """
    return Rational.from_fraction(kernel.pi(resolve_eps(eps)))


def polar(radius: Any, angle: Any, eps: Any = None) -> NumericValue:
    """
    radius * (cos(angle) + i*sin(angle)).

    Returns:
        Rational, если мнимая часть равна нулю, иначе Complex

    Examples:
        >>> polar(2, 0)
        Rational(2)
    """
    accuracy = resolve_eps(eps)
    re, im = kernel.polar(as_real(radius, "radius"), as_real(angle, "angle"), accuracy)
    return make_real_or_complex(re, im)


def hnrmod(v: Any, h: Any, n: Any, r: Any) -> NumericValue:
    """
    v mod (h * 2**n + r) для целых v, h >= 1, n >= 1, r in {-1, 0, 1}.

    Examples:
        >>> hnrmod(100, 1, 3, 1)
        Rational(1)
    """
    result = number_theory.hnrmod(
        as_int(v, "hnrmod v"),
        as_int(h, "hnrmod h"),
        as_int(n, "hnrmod n"),
        as_int(r, "hnrmod r"),
    )
    return Rational.from_fraction(Fraction(result))


def _exported(value: Any) -> Any:
    if isinstance(value, Fraction):
        return Rational.from_fraction(value)
    if isinstance(value, OutputMode):
        return value.value
    return value


def config(name: str, value: Any = context.UNSET) -> Any:
    """
    Параметр конфигурации; при передаче value — установка и возврат
    предыдущего значения. epsilon возвращается как Rational, mode — как
    имя режима.

    Examples:
        >>> config("epsilon")
        Rational(1/100000000000000000000)
    """
    return _exported(context.config(name, value))
