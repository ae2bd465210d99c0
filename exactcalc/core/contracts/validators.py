"""
Contract Validators — JSON Schema для чисел и конфигурации

Схемы (Draft 2020-12) поставляются в пакете, каталог schema/:
- numeric_value.json — {"kind", "re", "im"}; компоненты — строки-дроби
- calc_config.json — полный снимок CalcConfig

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каждая схема проходит meta-validation при первой загрузке
2. Загруженная схема кэшируется (один экземпляр SchemaLoader на модуль)
3. Ошибки данных — jsonschema.ValidationError, без переклассификации
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterator

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

# Каталог схем рядом с модулем
SCHEMA_DIR = Path(__file__).parent / "schema"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик и кэш JSON Schema.

    Args:
        schema_dir: Каталог со схемами (default: schema/ пакета)

    Raises:
        RuntimeError: Если каталог не существует
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or SCHEMA_DIR
        if not self._schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def available(self) -> list[str]:
        """Имена схем в каталоге (без расширения)."""
        return sorted(path.stem for path in self._schema_dir.glob("*.json"))

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Схема по имени (например, 'numeric_value').

        Raises:
            FileNotFoundError: Если файла схемы нет
            ValueError: Если схема не проходит meta-validation
        """
        cached = self._schemas.get(schema_name)
        if cached is not None:
            return cached

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        schema = json.loads(schema_path.read_text(encoding="utf-8"))
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e.message}") from e

        self._schemas[schema_name] = schema
        return schema


_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# VALIDATORS
# =============================================================================


class ContractValidator:
    """Проверка данных против одной схемы из каталога."""

    schema_name: str = ""

    def __init__(self, loader: SchemaLoader | None = None):
        self.schema = (loader or _SCHEMA_LOADER).load_schema(self.schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: Первое найденное нарушение схемы
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        """Все нарушения схемы (ленивый итератор)."""
        return self.validator.iter_errors(data)


class NumericValueValidator(ContractValidator):
    """Контракт JSON-представления Integer / Rational / Complex."""

    schema_name = "numeric_value"


class CalcConfigValidator(ContractValidator):
    """Контракт снимка конфигурации."""

    schema_name = "calc_config"


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_numeric_value(data: Dict[str, Any]) -> None:
    """
    Raises:
        ValidationError: Если данные не соответствуют numeric_value.json
    """
    NumericValueValidator().validate(data)


def validate_calc_config(data: Dict[str, Any]) -> None:
    """
    Raises:
        ValidationError: Если данные не соответствуют calc_config.json
    """
    CalcConfigValidator().validate(data)
