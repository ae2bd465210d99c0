"""
Тесты для конфигурации (CalcConfig и ambient context)

Проверяет:
1. Значения по умолчанию
2. config(name) / config(name, value) → предыдущее значение
3. Валидацию: eps > 0, режимы, флаги → DomainError
4. local_config восстанавливает конфигурацию
5. Изоляцию между потоками (contextvars)
"""

import threading
from fractions import Fraction

import pytest
from pydantic import ValidationError

from exactcalc.config import (
    CalcConfig,
    build_config,
    config,
    get_config,
    local_config,
    reset_config,
    set_config,
)
from exactcalc.core.domain import Rational
from exactcalc.core.errors import DomainError
from exactcalc.core.math.formatting import OutputMode

# =============================================================================
# ТЕСТЫ МОДЕЛИ
# =============================================================================


class TestCalcConfig:
    """Тесты для CalcConfig"""

    def test_defaults(self) -> None:
        """Значения по умолчанию"""
        cfg = CalcConfig()
        assert cfg.epsilon == Fraction(1, 10**20)
        assert cfg.mode is OutputMode.REAL
        assert cfg.display == 20
        assert (cfg.appr, cfg.round, cfg.mod, cfg.quo, cfg.quomod, cfg.sqrt) == (24, 24, 0, 2, 0, 24)
        assert (cfg.cfappr, cfg.cfsim) == (0, 8)

    def test_frozen(self) -> None:
        """Модель неизменяема"""
        cfg = CalcConfig()
        with pytest.raises(ValidationError):
            cfg.display = 5  # type: ignore[misc]

    def test_build_config_coerces_values(self) -> None:
        """Строки, Rational и синонимы режимов приводятся"""
        cfg = build_config(CalcConfig(), epsilon="1e-5", mode="frac", quo=Rational(3))
        assert cfg.epsilon == Fraction(1, 10**5)
        assert cfg.mode is OutputMode.FRACTION
        assert cfg.quo == 3

    @pytest.mark.parametrize(
        "changes",
        [
            {"epsilon": 0},
            {"epsilon": "-1e-3"},
            {"mode": "roman"},
            {"display": -1},
            {"appr": 2**31},
            {"round": "1/2"},
            {"colour": 1},
        ],
    )
    def test_build_config_invalid(self, changes: dict) -> None:
        """Невалидные значения и имена → DomainError"""
        with pytest.raises(DomainError):
            build_config(CalcConfig(), **changes)


# =============================================================================
# ТЕСТЫ КОНТЕКСТА
# =============================================================================


class TestConfigContext:
    """Тесты для config, local_config, set_config"""

    def test_read(self) -> None:
        """Чтение параметра"""
        assert config("quo") == 2

    def test_write_returns_previous(self) -> None:
        """Установка возвращает предыдущее значение"""
        assert config("quo", 0) == 2
        assert config("quo") == 0

    def test_unknown_name(self) -> None:
        """Неизвестное имя → DomainError"""
        with pytest.raises(DomainError, match="unknown config parameter"):
            config("colour")

    def test_invalid_value_keeps_config(self) -> None:
        """Невалидное значение не меняет конфигурацию"""
        with pytest.raises(DomainError):
            config("epsilon", -1)
        assert config("epsilon") == Fraction(1, 10**20)

    def test_local_config(self) -> None:
        """local_config действует только внутри блока"""
        with local_config(epsilon="1e-5", mode="frac") as cfg:
            assert cfg.epsilon == Fraction(1, 10**5)
            assert get_config().mode is OutputMode.FRACTION
        assert get_config().mode is OutputMode.REAL

    def test_local_config_restores_after_error(self) -> None:
        """Конфигурация восстанавливается при исключении"""
        with pytest.raises(RuntimeError):
            with local_config(display=3):
                raise RuntimeError("boom")
        assert config("display") == 20

    def test_set_and_reset(self) -> None:
        """set_config возвращает предыдущую конфигурацию, reset_config — умолчания"""
        previous = set_config(build_config(CalcConfig(), display=7))
        assert previous.display == 20
        assert config("display") == 7
        reset_config()
        assert config("display") == 20

    def test_thread_isolation(self) -> None:
        """Изменения в другом потоке не видны в текущем"""
        seen = []

        def worker() -> None:
            config("display", 3)
            seen.append(config("display"))

        thread = threading.Thread(target=worker)
        thread.start()
        thread.join()

        assert seen == [3]
        assert config("display") == 20
