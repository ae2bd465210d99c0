"""
Polynomial — Вычисление полиномов

Две формы вызова poly():

1. Плоская: poly(c0, c1, ..., cn, x) = c0*x**n + c1*x**(n-1) + ... + cn
   (c0 — старший коэффициент). poly(x) == x.

2. Вложенная: poly(coeffs, x, y, z, ...), где coeffs — список, элементы
   которого коэффициенты или снова списки. Каждый уровень вложенности
   потребляет одну переменную; на каждом уровне первый элемент —
   свободный член:
   poly([[a, b, c], [d, e], f], x, y) =
       (a + b*y + c*y**2) + (d + e*y)*x + f*x**2

Вложенная структура разбирается в закрытое дерево
PolyTerm = Coeff(value) | Nested(terms) до вычисления.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. poly() без аргументов → ArgumentCountError
2. Пустой список коэффициентов → None (не ошибка)
3. Нечисловой коэффициент → TypeCoercionError из приведения
"""

from collections.abc import Sequence
from dataclasses import dataclass
from fractions import Fraction
from typing import Any, Optional, Union

from exactcalc.core.domain import NumericValue, Rational, coerce_argument
from exactcalc.core.errors import ArgumentCountError

# =============================================================================
# ДЕРЕВО КОЭФФИЦИЕНТОВ
# =============================================================================


@dataclass(frozen=True)
class Coeff:
    """Числовой коэффициент."""

    value: NumericValue


@dataclass(frozen=True)
class Nested:
    """Коэффициент-полином от следующей переменной."""

    terms: tuple["PolyTerm", ...]


PolyTerm = Union[Coeff, Nested]


def build_term(obj: Any) -> PolyTerm:
    """
    Дерево PolyTerm из вложенных списков/кортежей.

    Raises:
        TypeCoercionError: Если лист дерева не является числом
    """
    if isinstance(obj, (list, tuple)):
        return Nested(tuple(build_term(item) for item in obj))
    return Coeff(coerce_argument(obj))


# =============================================================================
# ВЫЧИСЛЕНИЕ
# =============================================================================


def _zero() -> NumericValue:
    return Rational.from_fraction(Fraction(0))


def _horner(terms: tuple[PolyTerm, ...], points: Sequence[NumericValue], depth: int) -> NumericValue:
    # свёртка справа налево, первый элемент является свободным членом
    point = points[depth]
    result = _zero()
    for term in reversed(terms):
        if isinstance(term, Nested):
            value = evalpoly(term.terms, points, depth + 1)
            if value is None:
                value = _zero()
        else:
            value = term.value
        result = result * point + value
    return result


def evalpoly(
    terms: tuple[PolyTerm, ...],
    points: Sequence[NumericValue],
    depth: int = 0,
) -> Optional[NumericValue]:
    """
    Значение вложенного полинома в точке points[depth:].

    Если переменные закончились, берётся первый элемент (для вложенного
    списка — рекурсивно).

    Args:
        terms: Коэффициенты уровня depth
        points: Значения переменных
        depth: Номер текущей переменной

    Returns:
        Значение или None для пустого списка коэффициентов
    """
    if not terms:
        return None
    if depth >= len(points):
        first = terms[0]
        if isinstance(first, Nested):
            return evalpoly(first.terms, points, depth + 1)
        return first.value
    return _horner(terms, points, depth)


def poly(*args: Any) -> Optional[NumericValue]:
    """
    Значение полинома (плоская или вложенная форма).

    Examples:
        >>> poly(2, 3, 5, 7)
        Rational(124)
        >>> poly([[2, 3], [5], 1], 2, 3)
        Rational(25)

    Raises:
        ArgumentCountError: Если аргументы не переданы
    """
    if not args:
        raise ArgumentCountError("poly requires at least one argument")

    first, rest = args[0], args[1:]
    if isinstance(first, (list, tuple)):
        terms = tuple(build_term(item) for item in first)
        return evalpoly(terms, [coerce_argument(point) for point in rest])

    *coefficients, point = [coerce_argument(arg) for arg in args]
    if not coefficients:
        return point
    result = _zero()
    for coefficient in coefficients:
        result = result * point + coefficient
    return result
