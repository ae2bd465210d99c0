"""
exactcalc — числовая башня точной арифметики

Integer < Rational < Complex с приведением операндов, каталогом
builtin-функций, вычислением полиномов и агрегатами. Трансцендентные
функции вычисляются с точностью epsilon (конфигурация или явный eps).

Examples:
    >>> from exactcalc import Rational, dispatch
    >>> Rational(1, 3) + Rational(1, 6)
    Rational(1/2)
    >>> dispatch("sqrt", 2, "1e-4")
    Rational(7071/5000)
"""

from exactcalc.builtins import dispatch, poly
from exactcalc.config import config, get_config, local_config, reset_config, set_config
from exactcalc.core.domain import Complex, Integer, Kind, NumericValue, Rational, coerce
from exactcalc.core.errors import (
    ArgumentCountError,
    DivisionByZero,
    DomainError,
    MathError,
    OutOfRangeError,
    TypeCoercionError,
    UnknownBuiltinError,
)

__version__ = "0.1.0"

__all__ = [
    # Values
    "Kind",
    "NumericValue",
    "Integer",
    "Rational",
    "Complex",
    "coerce",
    # Builtins
    "dispatch",
    "poly",
    # Configuration
    "config",
    "get_config",
    "local_config",
    "reset_config",
    "set_config",
    # Errors
    "MathError",
    "DivisionByZero",
    "DomainError",
    "TypeCoercionError",
    "ArgumentCountError",
    "OutOfRangeError",
    "UnknownBuiltinError",
]
