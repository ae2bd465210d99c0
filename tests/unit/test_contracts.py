"""
Тесты для JSON Schema контрактов

Проверяет:
1. Загрузку и meta-validation схем
2. Сериализацию чисел to_dict / from_dict
3. Снимки конфигурации config_to_dict / config_from_dict
4. Отклонение невалидных данных (jsonschema.ValidationError)
"""

from fractions import Fraction
from pathlib import Path

import pytest
from jsonschema import ValidationError

from exactcalc.config import CalcConfig, build_config
from exactcalc.core.contracts import (
    CalcConfigValidator,
    NumericValueValidator,
    SchemaLoader,
    config_from_dict,
    config_to_dict,
    from_dict,
    to_dict,
    validate_calc_config,
    validate_numeric_value,
)
from exactcalc.core.domain import Complex, Integer, Rational
from exactcalc.core.math.formatting import OutputMode

# =============================================================================
# ТЕСТЫ ЗАГРУЗЧИКА
# =============================================================================


class TestSchemaLoader:
    """Тесты для SchemaLoader"""

    def test_load_and_cache(self) -> None:
        """Схема загружается один раз"""
        loader = SchemaLoader()
        schema = loader.load_schema("numeric_value")
        assert schema["title"] == "NumericValue"
        assert loader.load_schema("numeric_value") is schema

    def test_available(self) -> None:
        """Каталог содержит обе схемы"""
        assert SchemaLoader().available() == ["calc_config", "numeric_value"]

    def test_validator_with_custom_loader(self, tmp_path: Path) -> None:
        """Валидатор принимает собственный загрузчик"""
        (tmp_path / "numeric_value.json").write_text('{"type": "object"}', encoding="utf-8")
        validator = NumericValueValidator(SchemaLoader(tmp_path))
        assert validator.is_valid({"anything": 1})

    def test_missing_schema(self) -> None:
        """Отсутствующая схема → FileNotFoundError"""
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("no_such_schema")

    def test_missing_directory(self, tmp_path: Path) -> None:
        """Отсутствующий каталог → RuntimeError"""
        with pytest.raises(RuntimeError):
            SchemaLoader(tmp_path / "missing")

    def test_invalid_schema(self, tmp_path: Path) -> None:
        """Схема, не проходящая meta-validation → ValueError"""
        (tmp_path / "broken.json").write_text('{"type": 5}', encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON Schema"):
            SchemaLoader(tmp_path).load_schema("broken")


# =============================================================================
# ТЕСТЫ ЧИСЕЛ
# =============================================================================


class TestNumericValueContract:
    """Тесты для numeric_value"""

    def test_to_dict(self) -> None:
        """Формат JSON-представления"""
        assert to_dict(Integer(5)) == {"kind": "integer", "re": "5"}
        assert to_dict(Rational(-1, 2)) == {"kind": "rational", "re": "-1/2"}
        assert to_dict(Complex(1, Rational(2, 3))) == {"kind": "complex", "re": "1", "im": "2/3"}
        assert to_dict(Complex(4)) == {"kind": "complex", "re": "4", "im": "0"}

    @pytest.mark.parametrize(
        "value",
        [Integer(-(10**40)), Rational(10**30, 7), Complex(Rational(-1, 3), 0), Complex(0, -2)],
    )
    def test_round_trip_preserves_kind(self, value: object) -> None:
        """from_dict(to_dict(x)) сохраняет значение и вид"""
        restored = from_dict(to_dict(value))
        assert restored == value
        assert type(restored) is type(value)

    @pytest.mark.parametrize(
        "data",
        [
            {"kind": "rational"},
            {"kind": "real", "re": "1"},
            {"kind": "rational", "re": 1},
            {"kind": "rational", "re": "0.5"},
            {"kind": "rational", "re": "1/0"},
            {"kind": "integer", "re": "1/2"},
            {"kind": "rational", "re": "1", "im": "2"},
            {"kind": "complex", "re": "1"},
            {"kind": "integer", "re": "1", "extra": True},
        ],
    )
    def test_invalid(self, data: dict) -> None:
        """Невалидные данные → ValidationError"""
        assert not NumericValueValidator().is_valid(data)
        with pytest.raises(ValidationError):
            from_dict(data)

    def test_iter_errors(self) -> None:
        """Все ошибки валидации"""
        errors = list(NumericValueValidator().iter_errors({"kind": "real", "re": 1}))
        assert len(errors) >= 2


# =============================================================================
# ТЕСТЫ КОНФИГУРАЦИИ
# =============================================================================


class TestCalcConfigContract:
    """Тесты для calc_config"""

    def test_default_snapshot(self) -> None:
        """Снимок конфигурации по умолчанию"""
        data = config_to_dict(CalcConfig())
        assert data["epsilon"] == "1/100000000000000000000"
        assert data["mode"] == "real"
        assert data["quo"] == 2
        assert (data["cfappr"], data["cfsim"]) == (0, 8)
        validate_calc_config(data)

    def test_round_trip(self) -> None:
        """config_from_dict(config_to_dict(cfg)) == cfg"""
        cfg = build_config(CalcConfig(), epsilon="1e-5", mode="hex", sqrt=32)
        restored = config_from_dict(config_to_dict(cfg))
        assert restored == cfg
        assert restored.epsilon == Fraction(1, 10**5)
        assert restored.mode is OutputMode.HEXADECIMAL

    @pytest.mark.parametrize(
        "changes",
        [
            {"epsilon": "0"},
            {"epsilon": "-1/10"},
            {"mode": "frac"},
            {"appr": -1},
            {"round": 2**31},
            {"display": "20"},
        ],
    )
    def test_invalid(self, changes: dict) -> None:
        """Невалидный снимок → ValidationError"""
        data = {**config_to_dict(CalcConfig()), **changes}
        assert not CalcConfigValidator().is_valid(data)
        with pytest.raises(ValidationError):
            config_from_dict(data)

    def test_missing_field(self) -> None:
        """Все поля обязательны"""
        data = config_to_dict(CalcConfig())
        del data["mod"]
        with pytest.raises(ValidationError):
            validate_calc_config(data)

    def test_validate_numeric_value_function(self) -> None:
        """Функция-обёртка validate_numeric_value"""
        validate_numeric_value({"kind": "integer", "re": "-3"})
