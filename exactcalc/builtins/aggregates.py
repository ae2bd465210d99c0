"""
Aggregates — avg, hmean, ssq, sum, max, min

Все функции принимают произвольное число аргументов, в том числе
вложенные списки/кортежи (раскрываются рекурсивно). Каждый элемент
приводится через coerce_argument; арифметика — через операторы
NumericValue (coerce в каждой операции).

Пустой ввод:
- avg, hmean, max, min → None
- sum, ssq → Rational(0)

Особые случаи:
- hmean с нулевым аргументом → Rational(0) без деления
- sum, max, min пропускают None
- max, min для не-вещественных значений → TypeCoercionError
"""

from collections.abc import Iterable, Iterator
from fractions import Fraction
from typing import Any, Optional

from exactcalc.core.domain import NumericValue, Rational, coerce_argument


def flatten(args: Iterable[Any]) -> Iterator[Any]:
    """Рекурсивное раскрытие вложенных списков и кортежей."""
    for arg in args:
        if isinstance(arg, (list, tuple)):
            yield from flatten(arg)
        else:
            yield arg


def _values(args: Iterable[Any], skip_none: bool = False) -> list[NumericValue]:
    return [coerce_argument(arg) for arg in flatten(args) if not (skip_none and arg is None)]


def _total(values: list[NumericValue]) -> NumericValue:
    result: NumericValue = Rational.from_fraction(Fraction(0))
    for value in values:
        result = result + value
    return result


def avg(*args: Any) -> Optional[NumericValue]:
    """
    Среднее арифметическое.

    Examples:
        >>> avg(1, 2, 3, 4, 5)
        Rational(3)
        >>> avg() is None
        True
    """
    values = _values(args)
    if not values:
        return None
    return _total(values) / len(values)


def hmean(*args: Any) -> Optional[NumericValue]:
    """
    Среднее гармоническое: count / sum(1 / x).

    Examples:
        >>> hmean(1, 2, 3)
        Rational(18/11)
        >>> hmean(1, 2, 0, 3)
        Rational(0)
    """
    values = _values(args)
    if not values:
        return None
    if any(value.is_zero() for value in values):
        return Rational.from_fraction(Fraction(0))
    return len(values) / _total([value.inverse() for value in values])


def ssq(*args: Any) -> NumericValue:
    """Сумма квадратов."""
    return _total([value * value for value in _values(args)])


def sum_(*args: Any) -> NumericValue:
    """Сумма аргументов; None пропускается."""
    return _total(_values(args, skip_none=True))


def _extreme(args: Iterable[Any], greater: bool) -> Optional[NumericValue]:
    best: Optional[NumericValue] = None
    for value in _values(args, skip_none=True):
        if best is None or (value > best if greater else value < best):
            best = value
    return best


def max_(*args: Any) -> Optional[NumericValue]:
    """
    Наибольший аргумент; None пропускается.

    Examples:
        >>> max_("3.2", "-0.5", "8.7")
        Rational(87/10)

    Raises:
        TypeCoercionError: Если среди аргументов есть не-вещественное значение
    """
    return _extreme(args, greater=True)


def min_(*args: Any) -> Optional[NumericValue]:
    """Наименьший аргумент; None пропускается."""
    return _extreme(args, greater=False)
