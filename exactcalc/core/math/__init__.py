"""
Core math modules для exactcalc

Точные математические примитивы: округление к кратным, адаптер
арифметического движка (sympy), цепные дроби, теория чисел и
форматирование.
"""

# Rounding (appr flags)
from exactcalc.core.math.rounding import (
    DEFAULT_APPROX_MODE,
    MAX_FLAGS,
    NEAREST_FLAG,
    ROUNDING_MASK,
    appr,
    bround_places,
    mod,
    nearest_multiple,
    pick_by_rule,
    quo,
    round_places,
    validate_flags,
)

# Continued fractions (cfappr, cfsim)
from exactcalc.core.math.continued_fractions import (
    cfappr,
    cfsim,
    neighbours,
    simplest_between,
)

# Kernel (epsilon-bounded evaluation)
from exactcalc.core.math.kernel import (
    DEFAULT_EPSILON,
    GUARD_DIGITS,
    TRANSCENDENTALS,
    approximate,
    decimal_digits,
    evaluate,
    exact_root,
    validate_eps,
)

# Literals
from exactcalc.core.math.literals import (
    parse_literal,
    to_fraction,
)

# Formatting
from exactcalc.core.math.formatting import (
    MODE_ALIASES,
    OutputMode,
    format_fraction,
    format_real,
    parse_mode,
)

__all__ = [
    # Rounding: Constants
    "DEFAULT_APPROX_MODE",
    "MAX_FLAGS",
    "NEAREST_FLAG",
    "ROUNDING_MASK",
    # Rounding: Functions
    "appr",
    "bround_places",
    "mod",
    "nearest_multiple",
    "pick_by_rule",
    "quo",
    "round_places",
    "validate_flags",
    # Continued fractions
    "cfappr",
    "cfsim",
    "neighbours",
    "simplest_between",
    # Kernel: Constants
    "DEFAULT_EPSILON",
    "GUARD_DIGITS",
    "TRANSCENDENTALS",
    # Kernel: Functions
    "approximate",
    "decimal_digits",
    "evaluate",
    "exact_root",
    "validate_eps",
    # Literals
    "parse_literal",
    "to_fraction",
    # Formatting: Types
    "MODE_ALIASES",
    "OutputMode",
    # Formatting: Functions
    "format_fraction",
    "format_real",
    "parse_mode",
]
