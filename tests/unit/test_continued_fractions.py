"""
Тесты для модуля Continued Fractions

Проверяет:
1. simplest_between — наименьший знаменатель в отрезке
2. neighbours — лучшие приближения снизу и сверху
3. choose — выбор кандидата по флагам
4. cfappr / cfsim на значениях с известными ответами
"""

import math
from fractions import Fraction

import pytest

from exactcalc.core.math.continued_fractions import cfappr, cfsim, choose, neighbours, simplest_between

F = Fraction

# Число pi, округлённое до 1e-10
PI = F(31415926536, 10**10)


def _smallest_denominator(lo: Fraction, hi: Fraction) -> int:
    q = 1
    while math.ceil(lo * q) > hi * q:
        q += 1
    return q


# =============================================================================
# ТЕСТЫ ПОИСКА
# =============================================================================


class TestSimplestBetween:
    """Тесты simplest_between"""

    def test_known_values(self) -> None:
        """Известные приближения pi"""
        assert simplest_between(PI - F(1, 200), PI + F(1, 200)) == F(22, 7)
        assert simplest_between(PI - F(1, 2 * 10**6), PI + F(1, 2 * 10**6)) == F(355, 113)

    def test_integer_inside(self) -> None:
        """Целое в отрезке"""
        assert simplest_between(F(5, 2), F(3)) == 3
        assert simplest_between(F(-7, 2), F(-3)) == -3

    @pytest.mark.parametrize(
        "lo, hi",
        [(F(43, 30), F(433, 300)), (F(-1, 3), F(-3, 10)), (F(1, 1000), F(1, 999)), (F(7, 5), F(7, 5))],
    )
    def test_denominator_is_minimal(self, lo: Fraction, hi: Fraction) -> None:
        """Знаменатель результата минимален, результат в отрезке"""
        result = simplest_between(lo, hi)
        assert lo <= result <= hi
        assert result.denominator == _smallest_denominator(lo, hi)


class TestNeighbours:
    """Тесты neighbours"""

    def test_known_values(self) -> None:
        """Приближения со знаменателем <= limit"""
        assert neighbours(F(43, 30), 10) == (F(10, 7), F(13, 9))
        assert neighbours(F(43, 30), 29) == (F(10, 7), F(33, 23))
        assert neighbours(F(17, 12), 4) == (F(4, 3), F(3, 2))
        assert neighbours(PI, 100) == (F(311, 99), F(22, 7))

    def test_negative(self) -> None:
        """Отрицательный x"""
        assert neighbours(F(-43, 30), 10) == (F(-13, 9), F(-10, 7))

    def test_limit_one(self) -> None:
        """limit == 1 — floor и ceil"""
        assert neighbours(F(7, 2), 1) == (F(3), F(4))

    @pytest.mark.parametrize("x, limit", [(F(43, 30), 10), (PI, 1000), (F(-355, 113), 50), (F(1, 97), 13)])
    def test_best_approximations(self, x: Fraction, limit: int) -> None:
        """L и U — соседние дроби, лучшие среди знаменателей <= limit"""
        lower, upper = neighbours(x, limit)
        assert lower < x < upper
        assert upper.numerator * lower.denominator - lower.numerator * upper.denominator == 1
        below = max(F(math.ceil(x * q) - 1, q) for q in range(1, limit + 1))
        above = min(F(math.floor(x * q) + 1, q) for q in range(1, limit + 1))
        assert (lower, upper) == (below, above)


# =============================================================================
# ТЕСТЫ ВЫБОРА
# =============================================================================


class TestChoose:
    """Тесты choose"""

    def test_directions(self) -> None:
        """0 — снизу, 1 — сверху, 2 — к нулю"""
        lower, upper, x = F(10, 7), F(13, 9), F(43, 30)
        assert choose(lower, upper, x, F(1), 0) == lower
        assert choose(lower, upper, x, F(1), 1) == upper
        assert choose(lower, upper, x, F(1), 2) == lower
        assert choose(-upper, -lower, -x, F(1), 2) == -lower

    def test_parity(self) -> None:
        """8 — кандидат с чётным числителем"""
        assert choose(F(10, 7), F(33, 23), F(43, 30), F(1), 8) == F(10, 7)
        assert choose(F(10, 7), F(33, 23), F(43, 30), F(1), 9) == F(33, 23)

    def test_nearest_tie_prefers_smaller_denominator(self) -> None:
        """Равные расстояния — меньший знаменатель"""
        assert choose(F(4, 3), F(3, 2), F(17, 12), F(4), 16) == F(3, 2)

    def test_nearest_tie_equal_denominators(self) -> None:
        """Равные знаменатели — правило m - 16"""
        assert choose(F(3), F(4), F(7, 2), F(1), 16) == 3
        assert choose(F(3), F(4), F(7, 2), F(1), 17) == 4


# =============================================================================
# ТЕСТЫ PUBLIC API
# =============================================================================


class TestCfappr:
    """Тесты cfappr"""

    def test_trivial(self) -> None:
        """eps == 0 или целый x"""
        assert cfappr(F(43, 30), F(0), 0) == F(43, 30)
        assert cfappr(F(5), F(1, 10), 0) == 5

    def test_denominator_bound(self) -> None:
        """|eps| >= 1 — граница знаменателя"""
        assert cfappr(F(43, 30), F(10), 0) == F(10, 7)
        assert cfappr(F(43, 30), F(10), 1) == F(13, 9)
        assert cfappr(F(43, 30), F(10), 16) == F(10, 7)
        assert cfappr(F(43, 30), F(30), 1) == F(43, 30)
        assert cfappr(PI, F(100), 16) == F(311, 99)
        assert cfappr(F(17, 12), F(4), 16) == F(3, 2)

    def test_tolerance(self) -> None:
        """|eps| < 1 — наименьший знаменатель в пределах eps"""
        assert cfappr(F(43, 30), F(1, 100), 0) == F(10, 7)
        assert cfappr(F(43, 30), F(1, 100), 1) == F(23, 16)
        assert cfappr(F(43, 30), F(1, 100), 16) == F(10, 7)
        assert cfappr(PI, F(1, 100), 16) == F(22, 7)
        assert cfappr(PI, F(1, 10**6), 16) == F(355, 113)


class TestCfsim:
    """Тесты cfsim"""

    def test_known_values(self) -> None:
        """Соседние дроби 43/30"""
        assert cfsim(F(43, 30), 0) == F(10, 7)
        assert cfsim(F(43, 30), 1) == F(33, 23)
        assert cfsim(F(43, 30), 8) == F(10, 7)
        assert cfsim(F(43, 30), 16) == F(33, 23)

    def test_integer_unchanged(self) -> None:
        """Целый x не меняется"""
        assert cfsim(F(-4), 0) == -4

    def test_sequence_of_approximations(self) -> None:
        """Повторное применение уменьшает знаменатель"""
        x = F(355, 113)
        seen = []
        while x.denominator != 1:
            x = cfsim(x, 16)
            seen.append(x)
        assert seen[0] == F(333, 106)
        assert all(a.denominator > b.denominator for a, b in zip(seen, seen[1:]))
