"""
Rounding — Приближение к кратным с флагами режима округления

Модуль реализует единый механизм округления, на котором построены
appr, round, bround, mod, quo, ceil, floor, mmin и sqrt:

    appr(x, y, z) = k * y, где k — целое, выбранное по флагам z

Флаги (m = z & 31):
    0  — вниз (floor)               1  — вверх (ceil)
    2  — к нулю                     3  — от нуля
    4  — вниз если y > 0            5  — противоположно 4
    6  — вниз если x > 0            7  — противоположно 6
    8  — k чётное                   9  — k нечётное
    10 — чётное если x/y > 0        11 — противоположно 10
    12 — чётное если y > 0          13 — противоположно 12
    14 — чётное если x > 0          15 — противоположно 14
    16..31 — ближайшее кратное, при точной середине правило (m - 16)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Все вычисления точные (Fraction), без float
2. y == 0: appr и mod возвращают x, quo возвращает 0
3. Если x кратно y, результат не зависит от флагов
"""

from fractions import Fraction
from typing import Final

from exactcalc.core.errors import DomainError

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Маска флагов направления округления
ROUNDING_MASK: Final[int] = 31

# Бит "ближайшее кратное"
NEAREST_FLAG: Final[int] = 16

# Верхняя граница значения флагов (int32)
MAX_FLAGS: Final[int] = 2**31

# Режим по умолчанию для приближения трансцендентных функций:
# ближайшее кратное, середина к чётному
DEFAULT_APPROX_MODE: Final[int] = 24


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_flags(flags: object, name: str = "rounding") -> int:
    """
    Проверка значения флагов округления.

    Args:
        flags: Значение флагов (int или целое NumericValue/Fraction)
        name: Имя параметра для сообщения об ошибке

    Returns:
        Флаги как int

    Raises:
        DomainError: Если флаги не целые, отрицательные или >= 2**31
    """
    if isinstance(flags, bool):
        raise DomainError(f"{name} flags must be an integer, got {flags!r}")
    try:
        value = Fraction(flags)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        raise DomainError(f"{name} flags must be an integer, got {flags!r}") from None
    if value.denominator != 1:
        raise DomainError(f"{name} flags must be an integer, got {flags}")
    if value < 0 or value >= MAX_FLAGS:
        raise DomainError(f"{name} flags must be in [0, 2**31), got {flags}")
    return int(value)


# =============================================================================
# ВЫБОР КРАТНОГО
# =============================================================================


def pick_by_rule(rule: int, lo: int, hi: int, x: Fraction, y: Fraction, t: Fraction) -> int:
    """Выбор между соседними кратными lo и hi = lo + 1 по правилу 0..15."""
    if rule == 0:
        return lo
    if rule == 1:
        return hi
    if rule == 2:
        return lo if t > 0 else hi
    if rule == 3:
        return hi if t > 0 else lo
    if rule == 4:
        return lo if y > 0 else hi
    if rule == 5:
        return hi if y > 0 else lo
    if rule == 6:
        return lo if x > 0 else hi
    if rule == 7:
        return hi if x > 0 else lo

    even = lo if lo % 2 == 0 else hi
    odd = hi if lo % 2 == 0 else lo
    if rule == 8:
        return even
    if rule == 9:
        return odd
    if rule == 10:
        return even if t > 0 else odd
    if rule == 11:
        return odd if t > 0 else even
    if rule == 12:
        return even if y > 0 else odd
    if rule == 13:
        return odd if y > 0 else even
    if rule == 14:
        return even if x > 0 else odd
    return odd if x > 0 else even


def nearest_multiple(x: Fraction, y: Fraction, flags: int) -> int:
    """
    Множитель k такой, что k * y — приближение x по флагам.

    Args:
        x: Приближаемое значение
        y: Шаг (не ноль)
        flags: Флаги округления

    Returns:
        Целое k

    Examples:
        >>> nearest_multiple(Fraction(-544, 100), Fraction(1, 10), 0)
        -55
        >>> nearest_multiple(Fraction(11), Fraction(5), 2)
        2
    """
    t = x / y
    if t.denominator == 1:
        return t.numerator

    lo = t.numerator // t.denominator
    hi = lo + 1
    mode = flags & ROUNDING_MASK

    if mode >= NEAREST_FLAG:
        diff = t - lo
        if diff < Fraction(1, 2):
            return lo
        if diff > Fraction(1, 2):
            return hi
        mode -= NEAREST_FLAG

    return pick_by_rule(mode, lo, hi, x, y, t)


# =============================================================================
# ПРОИЗВОДНЫЕ ОПЕРАЦИИ
# =============================================================================


def appr(x: Fraction, y: Fraction, flags: int) -> Fraction:
    """
    Приближение x кратным y.

    Examples:
        >>> appr(Fraction(-544, 100), Fraction(1, 10), 0)
        Fraction(-11, 2)
    """
    if y == 0:
        return x
    return nearest_multiple(x, y, flags) * y


def mod(x: Fraction, y: Fraction, flags: int) -> Fraction:
    """Остаток x - appr(x, y, flags); при y == 0 возвращает x."""
    if y == 0:
        return x
    return x - nearest_multiple(x, y, flags) * y


def quo(x: Fraction, y: Fraction, flags: int) -> int:
    """Частное k из appr; при y == 0 возвращает 0."""
    if y == 0:
        return 0
    return nearest_multiple(x, y, flags)


def round_places(x: Fraction, places: int, flags: int) -> Fraction:
    """Округление до places десятичных знаков (places может быть отрицательным)."""
    return appr(x, Fraction(10) ** -places, flags)


def bround_places(x: Fraction, places: int, flags: int) -> Fraction:
    """Округление до places двоичных знаков."""
    return appr(x, Fraction(2) ** -places, flags)
