"""
Coercion — Приведение операндов к общему виду

Решётка продвижения INTEGER < RATIONAL < COMPLEX (Kind).

Правила:
1. Оба операнда NumericValue → оба продвигаются до max(kind)
2. Нативный int против Integer → Integer
3. Остальные нативные значения → минимальный вид, представляющий их точно:
   int, float, Fraction, Decimal, числовая строка → Rational;
   complex → Complex
4. bool, None, нечисловые строки и объекты → TypeCoercionError

coerce() вызывается в каждой точке бинарной операции; ошибки
пропагируют без переклассификации.
"""

from typing import Any

from exactcalc.core.domain.complex import Complex
from exactcalc.core.domain.integer import Integer
from exactcalc.core.domain.kinds import Kind, max_kind
from exactcalc.core.domain.numeric import NumericValue, as_parts
from exactcalc.core.domain.rational import Rational
from exactcalc.core.errors import TypeCoercionError
from exactcalc.core.math.literals import to_fraction


def to_value(obj: Any) -> NumericValue:
    """
    NumericValue минимального вида, точно представляющего obj.

    Raises:
        TypeCoercionError: Если obj не является числом

    Examples:
        >>> to_value("1/3")
        Rational(1/3)
        >>> to_value(2j)
        Complex(2i)
    """
    if isinstance(obj, NumericValue):
        return obj
    if isinstance(obj, complex):
        return Complex.from_parts(to_fraction(obj.real), to_fraction(obj.imag))
    return Rational.from_fraction(to_fraction(obj))


def promote(value: NumericValue, kind: Kind) -> NumericValue:
    """
    Продвижение value до вида kind без потери точности.

    Raises:
        TypeCoercionError: Если kind ниже вида value
    """
    if value.kind is kind:
        return value
    if kind < value.kind:
        raise TypeCoercionError(f"cannot demote {value.kind.name} to {kind.name}")
    re, im = value.parts()
    if kind is Kind.RATIONAL:
        return Rational.from_fraction(re)
    return Complex.from_parts(re, im)


def coerce(a: NumericValue, b: Any) -> tuple[NumericValue, NumericValue]:
    """
    Соизмеримая пара операндов общего вида.

    Args:
        a: Левый операнд (NumericValue)
        b: Правый операнд (NumericValue или нативное значение)

    Returns:
        (a', b') одного вида max(kind(a), kind(b))

    Examples:
        >>> coerce(Integer(2), 3)
        (Integer(2), Integer(3))
        >>> coerce(Rational(1, 2), Complex(0, 1))
        (Complex(1/2), Complex(1i))
    """
    if not isinstance(b, NumericValue):
        if a.kind is Kind.INTEGER and type(b) is int:
            b = Integer.from_int(b)
        else:
            b = to_value(b)
    kind = max_kind(a.kind, b.kind)
    return promote(a, kind), promote(b, kind)


def coerce_argument(obj: Any) -> NumericValue:
    """
    Приведение первого аргумента builtin к получателю метода.

    Integer и вещественные значения → Rational, комплексные → Complex.

    Raises:
        TypeCoercionError: Если obj не является числом
    """
    if isinstance(obj, (Rational, Complex)):
        return obj
    re, im = as_parts(obj)
    if im:
        return Complex.from_parts(re, im)
    return Rational.from_fraction(re)
