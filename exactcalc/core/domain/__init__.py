"""
Domain: виды чисел и протокол приведения.

Integer < Rational < Complex — неизменяемые значения с точной арифметикой.
"""

from exactcalc.core.domain.coercion import coerce, coerce_argument, promote, to_value
from exactcalc.core.domain.complex import Complex
from exactcalc.core.domain.integer import Integer
from exactcalc.core.domain.kinds import Kind, max_kind
from exactcalc.core.domain.numeric import NumericValue
from exactcalc.core.domain.rational import Rational

__all__ = [
    # Kinds
    "Kind",
    "max_kind",
    # Values
    "NumericValue",
    "Integer",
    "Rational",
    "Complex",
    # Coercion
    "coerce",
    "coerce_argument",
    "promote",
    "to_value",
]
