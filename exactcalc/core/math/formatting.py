"""
Formatting — Строковое представление точных чисел

Режимы вывода (OutputMode):
- real:        "0.05", "~0.33333333333333333333" (~ — значение округлено)
- fraction:    "1/20"
- integer:     "~0" (округление до целого)
- scientific:  "4.2e1", "5e-2"
- hexadecimal: "0x2a", "1/0x14"
- octal:       "052", "1/024"
- binary:      "0b101010"

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Неточное представление всегда помечено префиксом "~"
2. Точное значение с конечной десятичной записью в пределах display
   знаков выводится без потерь
"""

from enum import Enum
from fractions import Fraction
from typing import Final, Optional

from exactcalc.core.errors import DomainError
from exactcalc.core.math import rounding

# =============================================================================
# РЕЖИМЫ ВЫВОДА
# =============================================================================


class OutputMode(str, Enum):
    """Режим строкового вывода чисел."""

    FRACTION = "fraction"
    INTEGER = "integer"
    REAL = "real"
    SCIENTIFIC = "scientific"
    HEXADECIMAL = "hexadecimal"
    OCTAL = "octal"
    BINARY = "binary"


# Допустимые синонимы имён режимов
MODE_ALIASES: Final[dict[str, OutputMode]] = {
    "frac": OutputMode.FRACTION,
    "int": OutputMode.INTEGER,
    "float": OutputMode.REAL,
    "default": OutputMode.REAL,
    "sci": OutputMode.SCIENTIFIC,
    "exp": OutputMode.SCIENTIFIC,
    "hex": OutputMode.HEXADECIMAL,
    "oct": OutputMode.OCTAL,
    "bin": OutputMode.BINARY,
}

# Маркер неточного представления
APPROX_MARK: Final[str] = "~"

# Режим округления при выводе: ближайшее, середина к чётному
OUTPUT_ROUNDING: Final[int] = 24


def parse_mode(name: object) -> OutputMode:
    """
    Разбор имени режима вывода (включая синонимы).

    Raises:
        DomainError: Если режим неизвестен
    """
    if isinstance(name, OutputMode):
        return name
    if isinstance(name, str):
        key = name.strip().lower()
        if key in MODE_ALIASES:
            return MODE_ALIASES[key]
        for mode in OutputMode:
            if mode.value == key:
                return mode
    raise DomainError(f"unknown output mode: {name!r}")


# =============================================================================
# ДЕСЯТИЧНАЯ ЗАПИСЬ
# =============================================================================


def _terminating_places(denominator: int) -> Optional[int]:
    """Число знаков конечной десятичной дроби или None, если она бесконечна."""
    twos = fives = 0
    while denominator % 2 == 0:
        denominator //= 2
        twos += 1
    while denominator % 5 == 0:
        denominator //= 5
        fives += 1
    if denominator != 1:
        return None
    return max(twos, fives)


def _decimal(value: Fraction, places: int) -> str:
    """Запись value (кратного 10**-places) с удалением хвостовых нулей."""
    sign = "-" if value < 0 else ""
    scaled = abs(value) * 10**places
    whole, rest = divmod(scaled.numerator // scaled.denominator, 10**places)
    if not places or not rest:
        return f"{sign}{whole}"
    digits = f"{rest:0{places}d}".rstrip("0")
    return f"{sign}{whole}.{digits}"


def format_real(value: Fraction, display: int) -> str:
    """
    Десятичная запись с не более чем display знаками после точки.

    Examples:
        >>> format_real(Fraction(1, 20), 20)
        '0.05'
        >>> format_real(Fraction(1, 3), 5)
        '~0.33333'
    """
    places = _terminating_places(value.denominator)
    if places is not None and places <= display:
        return _decimal(value, places)
    rounded = rounding.round_places(value, display, OUTPUT_ROUNDING)
    return APPROX_MARK + _decimal(rounded, display)


def _format_integer(value: Fraction) -> str:
    if value.denominator == 1:
        return str(value.numerator)
    rounded = rounding.round_places(value, 0, OUTPUT_ROUNDING)
    return APPROX_MARK + str(rounded.numerator)


def _format_scientific(value: Fraction, display: int) -> str:
    if value == 0:
        return "0"
    magnitude = abs(value)
    whole = magnitude.numerator // magnitude.denominator
    if whole:
        exponent = len(str(whole)) - 1
    else:
        exponent = -1
        while magnitude * Fraction(10) ** -exponent < 1:
            exponent -= 1

    mantissa = value / Fraction(10) ** exponent
    if abs(rounding.round_places(mantissa, display, OUTPUT_ROUNDING)) >= 10:
        exponent += 1
        mantissa = value / Fraction(10) ** exponent
    return f"{format_real(mantissa, display)}e{exponent}"


# =============================================================================
# ЗАПИСЬ В СИСТЕМАХ СЧИСЛЕНИЯ
# =============================================================================


def _based(n: int, mode: OutputMode) -> str:
    # Одна цифра выводится без префикса системы счисления
    if mode is OutputMode.HEXADECIMAL:
        return f"{n:#x}" if n > 9 else str(n)
    if mode is OutputMode.BINARY:
        return f"{n:#b}" if n > 1 else str(n)
    return f"0{n:o}" if n > 7 else str(n)


def _format_based(value: Fraction, mode: OutputMode) -> str:
    sign = "-" if value < 0 else ""
    text = _based(abs(value.numerator), mode)
    if value.denominator != 1:
        text = f"{text}/{_based(value.denominator, mode)}"
    return sign + text


# =============================================================================
# PUBLIC API
# =============================================================================


def format_fraction(value: Fraction, mode: OutputMode, display: int) -> str:
    """
    Строковое представление рационального числа в заданном режиме.

    Args:
        value: Точное значение
        mode: Режим вывода
        display: Число знаков после точки (real/scientific)

    Returns:
        Строка

    Examples:
        >>> format_fraction(Fraction(42), OutputMode.HEXADECIMAL, 20)
        '0x2a'
        >>> format_fraction(Fraction(1, 20), OutputMode.FRACTION, 20)
        '1/20'
        >>> format_fraction(Fraction(1, 20), OutputMode.SCIENTIFIC, 20)
        '5e-2'
    """
    if mode is OutputMode.FRACTION:
        return str(value)
    if mode is OutputMode.INTEGER:
        return _format_integer(value)
    if mode is OutputMode.SCIENTIFIC:
        return _format_scientific(value, display)
    if mode in (OutputMode.HEXADECIMAL, OutputMode.OCTAL, OutputMode.BINARY):
        return _format_based(value, mode)
    return format_real(value, display)
