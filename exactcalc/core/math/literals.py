"""
Literals — Точное чтение нативных скаляров и строк

Поддерживаемые формы:
- int, fractions.Fraction
- float (точное двоичное значение, без десятичного округления)
- decimal.Decimal
- строки: "42", "-5.44", ".44", "1e-3", "1.5E3", "n/d" (каждая часть —
  любая из форм), "0x2a", "0b101", "052" (восьмеричная с ведущим нулём)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Преобразование никогда не теряет точность
2. Нулевой знаменатель → DivisionByZero
3. NaN/Inf, bool и нераспознанные значения → TypeCoercionError
"""

import math
import re
from decimal import Decimal
from fractions import Fraction
from typing import Final

from exactcalc.core.errors import DivisionByZero, TypeCoercionError

# Целое в системе счисления с префиксом: 0x.., 0b.., 0.. (восьмеричная)
_BASED_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"^(?P<sign>[+-]?)0(?:[xX](?P<hex>[0-9a-fA-F]+)|[bB](?P<bin>[01]+)|(?P<oct>[0-7]+))$"
)

# Десятичная запись с необязательной экспонентой
_DECIMAL_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?$"
)


def _parse_scalar(text: str) -> Fraction:
    based = _BASED_PATTERN.match(text)
    if based:
        if based.group("hex"):
            value = int(based.group("hex"), 16)
        elif based.group("bin"):
            value = int(based.group("bin"), 2)
        else:
            value = int(based.group("oct"), 8)
        return Fraction(-value if based.group("sign") == "-" else value)

    if _DECIMAL_PATTERN.match(text):
        return Fraction(text)

    raise TypeCoercionError(f"cannot convert {text!r} to a number")


def parse_literal(text: str) -> Fraction:
    """
    Точное значение строкового литерала.

    Args:
        text: Строка ("1/3", "0.25", "1e-3", "0x2a", ...)

    Returns:
        Fraction

    Raises:
        DivisionByZero: Если знаменатель дроби равен нулю
        TypeCoercionError: Если строка не является числом

    Examples:
        >>> parse_literal("-5.44")
        Fraction(-136, 25)
        >>> parse_literal("1e3/0x10")
        Fraction(125, 2)
    """
    stripped = text.strip()
    if "/" in stripped:
        numerator, _, denominator = stripped.partition("/")
        num = _parse_scalar(numerator.strip())
        den = _parse_scalar(denominator.strip())
        if den == 0:
            raise DivisionByZero(f"division by zero in {text!r}")
        return num / den
    return _parse_scalar(stripped)


def to_fraction(value: object) -> Fraction:
    """
    Точное рациональное значение нативного скаляра или строки.

    Raises:
        TypeCoercionError: Если значение не представимо точно
        DivisionByZero: Если строка содержит нулевой знаменатель
    """
    if isinstance(value, bool):
        raise TypeCoercionError(f"cannot convert bool {value!r} to a number")
    if isinstance(value, Fraction):
        return value
    if isinstance(value, int):
        return Fraction(value)
    if isinstance(value, float):
        if not math.isfinite(value):
            raise TypeCoercionError(f"cannot convert non-finite float {value!r}")
        return Fraction(value)
    if isinstance(value, Decimal):
        if not value.is_finite():
            raise TypeCoercionError(f"cannot convert non-finite decimal {value!r}")
        return Fraction(value)
    if isinstance(value, str):
        return parse_literal(value)
    raise TypeCoercionError(f"cannot convert {type(value).__name__} to a number")
