"""
Builtins: каталог, dispatcher и module-style функции.
"""

from exactcalc.builtins.aggregates import avg, hmean, max_, min_, ssq, sum_
from exactcalc.builtins.catalogue import BUILTINS, CATALOGUE, Builtin, BuiltinStyle
from exactcalc.builtins.dispatcher import builtin_names, dispatch, lookup
from exactcalc.builtins.polynomial import Coeff, Nested, PolyTerm, build_term, evalpoly, poly
from exactcalc.builtins.special import config, hnrmod, pi, polar

__all__ = [
    # Catalogue
    "BUILTINS",
    "CATALOGUE",
    "Builtin",
    "BuiltinStyle",
    # Dispatcher
    "builtin_names",
    "dispatch",
    "lookup",
    # Aggregates
    "avg",
    "hmean",
    "max_",
    "min_",
    "ssq",
    "sum_",
    # Polynomial
    "Coeff",
    "Nested",
    "PolyTerm",
    "build_term",
    "evalpoly",
    "poly",
    # Special
    "config",
    "hnrmod",
    "pi",
    "polar",
]
