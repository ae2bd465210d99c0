"""Kinds — Виды чисел и решётка продвижения

INTEGER < RATIONAL < COMPLEX

Порядок значений enum и есть решётка: результат бинарной операции
имеет вид max(kind(a), kind(b)).
"""

from enum import IntEnum


class Kind(IntEnum):
    """Вид NumericValue (дискриминант tagged union)."""

    INTEGER = 0
    RATIONAL = 1
    COMPLEX = 2


def max_kind(*kinds: Kind) -> Kind:
    """Наименьший вид, в который продвигаются все переданные виды."""
    return Kind(max(kinds))
