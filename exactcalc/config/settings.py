"""Settings — Конфигурация вычислений

Immutable Pydantic модель параметров, которые используются по умолчанию:
- epsilon: точность трансцендентных функций (default 1e-20)
- mode / display: режим и число знаков строкового вывода
- appr, round, mod, quo, quomod, sqrt, cfappr, cfsim: флаги округления
  соответствующих операций

Ошибки валидации pydantic переводятся в DomainError (build_config).
"""

from fractions import Fraction
from typing import Any, Final

from pydantic import BaseModel, Field, ValidationError, field_validator

from exactcalc.core.errors import DomainError, MathError
from exactcalc.core.math.formatting import OutputMode, parse_mode
from exactcalc.core.math.kernel import DEFAULT_EPSILON
from exactcalc.core.math.literals import to_fraction
from exactcalc.core.math.rounding import MAX_FLAGS, validate_flags

# Имена параметров, содержащих флаги округления
ROUNDING_FIELDS: Final[tuple[str, ...]] = (
    "appr",
    "round",
    "mod",
    "quo",
    "quomod",
    "sqrt",
    "cfappr",
    "cfsim",
)


# =============================================================================
# MODELS
# =============================================================================


class CalcConfig(BaseModel):
    """Параметры вычислений по умолчанию.

    Значения по умолчанию:
    epsilon=1e-20, mode=real, display=20, appr=24, round=24,
    mod=0, quo=2, quomod=0, sqrt=24, cfappr=0, cfsim=8.
    """

    epsilon: Fraction = Field(default=DEFAULT_EPSILON, description="Точность трансцендентных функций (> 0)")
    mode: OutputMode = Field(default=OutputMode.REAL, description="Режим строкового вывода")
    display: int = Field(default=20, ge=0, lt=MAX_FLAGS, description="Знаков после точки при выводе")
    appr: int = Field(default=24, description="Флаги округления appr")
    round: int = Field(default=24, description="Флаги округления round/bround")
    mod: int = Field(default=0, description="Флаги округления mod")
    quo: int = Field(default=2, description="Флаги округления quo")
    quomod: int = Field(default=0, description="Флаги округления quomod")
    sqrt: int = Field(default=24, description="Флаги sqrt")
    cfappr: int = Field(default=0, description="Флаги выбора приближения cfappr")
    cfsim: int = Field(default=8, description="Флаги выбора приближения cfsim")

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    @field_validator("epsilon", mode="before")
    @classmethod
    def _coerce_epsilon(cls, value: Any) -> Fraction:
        epsilon = _plain_fraction(value)
        if epsilon <= 0:
            raise ValueError(f"epsilon must be positive, got {epsilon}")
        return epsilon

    @field_validator("mode", mode="before")
    @classmethod
    def _coerce_mode(cls, value: Any) -> OutputMode:
        try:
            return parse_mode(value)
        except DomainError as exc:
            raise ValueError(str(exc)) from None

    @field_validator("display", *ROUNDING_FIELDS, mode="before")
    @classmethod
    def _coerce_flags(cls, value: Any) -> int:
        try:
            return validate_flags(_plain_value(value))
        except DomainError as exc:
            raise ValueError(str(exc)) from None


# =============================================================================
# HELPERS
# =============================================================================


def _plain_value(value: Any) -> Any:
    # NumericValue отдаёт точное значение через to_fraction()
    converter = getattr(value, "to_fraction", None)
    return converter() if callable(converter) else value


def _plain_fraction(value: Any) -> Fraction:
    value = _plain_value(value)
    try:
        return to_fraction(value)
    except MathError as exc:
        raise ValueError(str(exc)) from None


def build_config(base: CalcConfig, **changes: Any) -> CalcConfig:
    """
    Новая конфигурация с изменёнными параметрами.

    Args:
        base: Исходная конфигурация
        **changes: Изменяемые параметры

    Returns:
        Провалидированная конфигурация

    Raises:
        DomainError: Если имя параметра неизвестно или значение невалидно
    """
    unknown = sorted(set(changes) - set(CalcConfig.model_fields))
    if unknown:
        raise DomainError(f"unknown config parameter(s): {', '.join(unknown)}")
    try:
        return CalcConfig(**{**base.model_dump(), **changes})
    except ValidationError as exc:
        raise DomainError(f"invalid config value: {exc.errors()[0]['msg']}") from None
