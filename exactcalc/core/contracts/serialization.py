"""
Serialization — JSON-представление чисел и конфигурации

Числа:
    Integer(5)          → {"kind": "integer", "re": "5"}
    Rational(-1, 2)     → {"kind": "rational", "re": "-1/2"}
    Complex(1, "2/3")   → {"kind": "complex", "re": "1", "im": "2/3"}

Конфигурация: все поля CalcConfig; epsilon — строка-дробь, mode — имя режима.

Компоненты хранятся строками: JSON-числа не гарантируют точность
больших целых.
"""

from fractions import Fraction
from typing import Any, Dict

from exactcalc.config.settings import CalcConfig, build_config
from exactcalc.core.contracts.validators import validate_calc_config, validate_numeric_value
from exactcalc.core.domain import Complex, Integer, Kind, NumericValue, Rational

_KIND_NAMES: Dict[Kind, str] = {
    Kind.INTEGER: "integer",
    Kind.RATIONAL: "rational",
    Kind.COMPLEX: "complex",
}


def to_dict(value: NumericValue) -> Dict[str, Any]:
    """
    JSON-представление числа (проходит validate_numeric_value).

    Examples:
        >>> to_dict(Rational(-1, 2))
        {'kind': 'rational', 're': '-1/2'}
    """
    re, im = value.parts()
    data: Dict[str, Any] = {"kind": _KIND_NAMES[value.kind], "re": str(re)}
    if value.kind is Kind.COMPLEX:
        data["im"] = str(im)
    return data


def from_dict(data: Dict[str, Any]) -> NumericValue:
    """
    Число из JSON-представления.

    Raises:
        ValidationError: Если данные не соответствуют схеме numeric_value
    """
    validate_numeric_value(data)
    re = Fraction(data["re"])
    if data["kind"] == "integer":
        return Integer.from_int(re.numerator)
    if data["kind"] == "rational":
        return Rational.from_fraction(re)
    return Complex.from_parts(re, Fraction(data["im"]))


def config_to_dict(cfg: CalcConfig) -> Dict[str, Any]:
    """Снимок конфигурации (проходит validate_calc_config)."""
    data = cfg.model_dump()
    data["epsilon"] = str(cfg.epsilon)
    data["mode"] = cfg.mode.value
    return data


def config_from_dict(data: Dict[str, Any]) -> CalcConfig:
    """
    Конфигурация из снимка.

    Raises:
        ValidationError: Если данные не соответствуют схеме calc_config
    """
    validate_calc_config(data)
    return build_config(CalcConfig(), **data)
