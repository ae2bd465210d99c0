"""
Тесты для модуля Rounding

Проверяет:
1. Выбор кратного по всем правилам 0..15 и режиму "ближайшее"
2. Точные кратные не зависят от флагов
3. appr/mod/quo при y == 0
4. round_places / bround_places
5. Валидацию флагов
"""

from fractions import Fraction

import pytest

from exactcalc.core.errors import DomainError
from exactcalc.core.math.rounding import (
    appr,
    bround_places,
    mod,
    nearest_multiple,
    quo,
    round_places,
    validate_flags,
)

F = Fraction

# =============================================================================
# ТЕСТЫ ВЫБОРА КРАТНОГО
# =============================================================================


class TestNearestMultiple:
    """Тесты для nearest_multiple"""

    def test_exact_multiple_ignores_flags(self) -> None:
        """Если x кратно y, флаги не влияют на результат"""
        for flags in range(32):
            assert nearest_multiple(F(15), F(5), flags) == 3

    def test_floor_and_ceil(self) -> None:
        """Правила 0 и 1 — вниз и вверх"""
        assert nearest_multiple(F(-544, 100), F(1, 10), 0) == -55
        assert nearest_multiple(F(-544, 100), F(1, 10), 1) == -54

    def test_toward_and_away_from_zero(self) -> None:
        """Правила 2 и 3 — к нулю и от нуля"""
        assert nearest_multiple(F(11), F(5), 2) == 2
        assert nearest_multiple(F(-11), F(5), 2) == -2
        assert nearest_multiple(F(11), F(5), 3) == 3
        assert nearest_multiple(F(-11), F(5), 3) == -3

    def test_sign_of_step(self) -> None:
        """Правила 4 и 5 зависят от знака y"""
        assert nearest_multiple(F(11), F(5), 4) == 2
        assert nearest_multiple(F(11), F(-5), 4) == -2
        assert nearest_multiple(F(11), F(5), 5) == 3

    def test_sign_of_value(self) -> None:
        """Правила 6 и 7 зависят от знака x"""
        assert nearest_multiple(F(11), F(5), 6) == 2
        assert nearest_multiple(F(-11), F(5), 6) == -2
        assert nearest_multiple(F(11), F(5), 7) == 3

    def test_even_and_odd(self) -> None:
        """Правила 8 и 9 — чётное и нечётное k"""
        assert nearest_multiple(F(11), F(5), 8) == 2
        assert nearest_multiple(F(11), F(5), 9) == 3
        assert nearest_multiple(F(16), F(5), 8) == 4

    def test_parity_by_sign(self) -> None:
        """Правила 10..15 выбирают чётность по знаку"""
        assert nearest_multiple(F(11), F(5), 10) == 2
        assert nearest_multiple(F(-11), F(5), 10) == -3
        assert nearest_multiple(F(11), F(5), 11) == 3
        assert nearest_multiple(F(11), F(-5), 12) == -3
        assert nearest_multiple(F(-11), F(5), 14) == -3
        assert nearest_multiple(F(-11), F(5), 15) == -2

    def test_nearest(self) -> None:
        """Флаг 16 выбирает ближайшее кратное"""
        assert nearest_multiple(F(12), F(5), 16) == 2
        assert nearest_multiple(F(14), F(5), 16) == 3

    def test_nearest_tie_uses_low_bits(self) -> None:
        """При точной середине применяется правило m - 16"""
        assert nearest_multiple(F(5, 2), F(1), 16) == 2
        assert nearest_multiple(F(5, 2), F(1), 17) == 3
        assert nearest_multiple(F(5, 2), F(1), 24) == 2
        assert nearest_multiple(F(7, 2), F(1), 24) == 4

    def test_high_bits_ignored(self) -> None:
        """Биты выше 31 не влияют на направление"""
        assert nearest_multiple(F(11), F(5), 64) == nearest_multiple(F(11), F(5), 0)


# =============================================================================
# ТЕСТЫ ПРОИЗВОДНЫХ ОПЕРАЦИЙ
# =============================================================================


class TestDerivedOperations:
    """Тесты для appr, mod, quo, round_places, bround_places"""

    def test_appr(self) -> None:
        """appr возвращает кратное y"""
        assert appr(F(-544, 100), F(1, 10), 0) == F(-11, 2)

    def test_zero_step(self) -> None:
        """y == 0: appr и mod возвращают x, quo — 0"""
        assert appr(F(7, 3), F(0), 24) == F(7, 3)
        assert mod(F(7, 3), F(0), 0) == F(7, 3)
        assert quo(F(7, 3), F(0), 2) == 0

    def test_mod_plus_quo_restores_value(self) -> None:
        """x == quo * y + mod для одинаковых флагов"""
        for flags in (0, 1, 2, 3, 16, 24):
            x, y = F(-17, 3), F(5, 4)
            assert quo(x, y, flags) * y + mod(x, y, flags) == x

    def test_mod_negative_divisor(self) -> None:
        """Остаток с флагами 0 имеет знак делителя"""
        assert mod(F(10), F(-3), 0) == F(-2)
        assert mod(F(13), F(5), 0) == F(3)

    def test_round_places(self) -> None:
        """Округление до десятичных знаков"""
        assert round_places(F(7, 32), 3, 24) == F(219, 1000)
        assert round_places(F(7, 32), 3, 0) == F(218, 1000)
        assert round_places(F(1234), -2, 24) == F(1200)

    def test_bround_places(self) -> None:
        """Округление до двоичных знаков"""
        assert bround_places(F(7, 32), 3, 0) == F(1, 8)
        assert bround_places(F(-7, 32), 3, 0) == F(-1, 4)
        assert bround_places(F(7, 32), 3, 24) == F(1, 4)


# =============================================================================
# ТЕСТЫ ВАЛИДАЦИИ ФЛАГОВ
# =============================================================================


class TestValidateFlags:
    """Тесты для validate_flags"""

    def test_valid_values(self) -> None:
        """Допустимые значения возвращаются как int"""
        assert validate_flags(0) == 0
        assert validate_flags(F(24)) == 24
        assert validate_flags(2**31 - 1) == 2**31 - 1

    @pytest.mark.parametrize("flags", [-1, 2**31, F(1, 2), True, "abc"])
    def test_invalid_values(self, flags: object) -> None:
        """Недопустимые значения вызывают DomainError"""
        with pytest.raises(DomainError):
            validate_flags(flags)
