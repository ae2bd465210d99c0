"""
Continued Fractions — Приближения цепными дробями

- simplest_between(lo, hi): дробь с наименьшим знаменателем в [lo, hi]
- neighbours(x, limit): лучшие приближения x снизу и сверху со
  знаменателем не больше limit
- cfappr(x, eps, flags): приближение x по точности или границе знаменателя
- cfsim(x, flags): соседняя дробь с меньшим знаменателем

Выбор между приближением снизу L и сверху U (m = flags & 31):
    0..15  — правило appr, где "вниз" — L, "вверх" — U, а "чётный"
             кандидат — с чётным числителем (если оба нечётны — с чётным
             знаменателем)
    16..31 — ближайший к x; при равенстве расстояний меньший знаменатель,
             затем правило (m - 16)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. L < x < U, между L и U нет дробей со знаменателем <= limit
2. cfsim(x) имеет знаменатель меньше den(x)
3. Целый x или eps == 0: cfappr возвращает x
"""

import math
from fractions import Fraction

from exactcalc.core.math.rounding import NEAREST_FLAG, ROUNDING_MASK, pick_by_rule

_ONE = Fraction(1)


# =============================================================================
# ПОИСК ПРИБЛИЖЕНИЙ
# =============================================================================


def simplest_between(lo: Fraction, hi: Fraction) -> Fraction:
    """
    Дробь с наименьшим знаменателем в отрезке [lo, hi] (lo <= hi).

    Examples:
        >>> simplest_between(Fraction(313659, 100000), Fraction(314659, 100000))
        Fraction(22, 7)
    """
    # Подходящие дроби: h/k = (a * h1 + h0) / (a * k1 + k0)
    h0, h1, k0, k1 = 0, 1, 1, 0
    while True:
        term = math.ceil(lo)
        if term <= hi:
            return Fraction(term * h1 + h0, term * k1 + k0)
        whole = math.floor(lo)
        h0, h1 = h1, whole * h1 + h0
        k0, k1 = k1, whole * k1 + k0
        lo, hi = 1 / (hi - whole), 1 / (lo - whole)


def neighbours(x: Fraction, limit: int) -> tuple[Fraction, Fraction]:
    """
    Ближайшие к x дроби снизу и сверху со знаменателем <= limit.

    Args:
        x: Приближаемое значение, den(x) > limit
        limit: Граница знаменателя (>= 1)

    Returns:
        (L, U), L < x < U

    Examples:
        >>> neighbours(Fraction(43, 30), 10)
        (Fraction(10, 7), Fraction(13, 9))
    """
    whole = math.floor(x)
    lo_num, lo_den = whole, 1
    hi_num, hi_den = whole + 1, 1

    # Спуск по дереву Штерна-Броко с пакетными шагами
    while lo_den + hi_den <= limit:
        if Fraction(lo_num + hi_num, lo_den + hi_den) < x:
            steps = math.ceil((x * lo_den - lo_num) / (hi_num - x * hi_den)) - 1
            steps = min(steps, (limit - lo_den) // hi_den)
            lo_num, lo_den = lo_num + steps * hi_num, lo_den + steps * hi_den
        else:
            steps = math.ceil((hi_num - x * hi_den) / (x * lo_den - lo_num)) - 1
            steps = min(steps, (limit - hi_den) // lo_den)
            hi_num, hi_den = hi_num + steps * lo_num, hi_den + steps * lo_den

    return Fraction(lo_num, lo_den), Fraction(hi_num, hi_den)


# =============================================================================
# ВЫБОР ПО ФЛАГАМ
# =============================================================================


def _lower_is_even(lower: Fraction, upper: Fraction) -> bool:
    if lower.numerator % 2 == 0:
        return True
    if upper.numerator % 2 == 0:
        return False
    return lower.denominator % 2 == 0


def choose(lower: Fraction, upper: Fraction, x: Fraction, y: Fraction, flags: int) -> Fraction:
    """
    Выбор между приближениями lower <= x <= upper по флагам.

    Args:
        lower: Приближение снизу
        upper: Приближение сверху
        x: Приближаемое значение
        y: Параметр точности (его знак учитывают правила 4, 5, 12, 13)
        flags: Флаги округления

    Returns:
        lower или upper
    """
    mode = flags & ROUNDING_MASK
    if mode >= NEAREST_FLAG:
        below, above = x - lower, upper - x
        if below != above:
            return lower if below < above else upper
        if lower.denominator != upper.denominator:
            return lower if lower.denominator < upper.denominator else upper
        mode -= NEAREST_FLAG

    lo = 0 if _lower_is_even(lower, upper) else 1
    picked = pick_by_rule(mode, lo, lo + 1, x, y, x / y)
    return lower if picked == lo else upper


# =============================================================================
# PUBLIC API
# =============================================================================


def cfappr(x: Fraction, eps: Fraction, flags: int) -> Fraction:
    """
    Приближение x цепными дробями.

    |eps| < 1: дробь с наименьшим знаменателем в [x - |eps|, x] или
    [x, x + |eps|] (выбор по флагам), а с флагом 16 — в
    [x - |eps|/2, x + |eps|/2].

    |eps| >= 1: лучшее приближение снизу или сверху (или ближайшее) со
    знаменателем <= |eps|; x, если den(x) <= |eps|.

    Examples:
        >>> cfappr(Fraction(43, 30), Fraction(10), 0)
        Fraction(10, 7)
        >>> cfappr(Fraction(43, 30), Fraction(10), 1)
        Fraction(13, 9)
    """
    if not eps or x.denominator == 1:
        return x

    size = abs(eps)
    if size < 1:
        if flags & ROUNDING_MASK >= NEAREST_FLAG:
            return simplest_between(x - size / 2, x + size / 2)
        lower = simplest_between(x - size, x)
        upper = simplest_between(x, x + size)
        return choose(lower, upper, x, eps, flags)

    limit = math.floor(size)
    if x.denominator <= limit:
        return x
    lower, upper = neighbours(x, limit)
    return choose(lower, upper, x, eps, flags)


def cfsim(x: Fraction, flags: int) -> Fraction:
    """
    Соседняя к x дробь снизу или сверху со знаменателем меньше den(x).

    Повторное применение даёт последовательность всё более грубых
    приближений; целый x возвращается без изменений.

    Examples:
        >>> cfsim(Fraction(43, 30), 0)
        Fraction(10, 7)
        >>> cfsim(Fraction(43, 30), 1)
        Fraction(33, 23)
    """
    if x.denominator == 1:
        return x
    lower, upper = neighbours(x, x.denominator - 1)
    return choose(lower, upper, x, _ONE, flags)
