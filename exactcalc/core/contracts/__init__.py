"""
Contract Validation Module

JSON Schema контракты для чисел и конфигурации exactcalc.
"""

from .serialization import config_from_dict, config_to_dict, from_dict, to_dict
from .validators import (
    CalcConfigValidator,
    ContractValidator,
    NumericValueValidator,
    SchemaLoader,
    validate_calc_config,
    validate_numeric_value,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "NumericValueValidator",
    "CalcConfigValidator",
    # Functions
    "validate_numeric_value",
    "validate_calc_config",
    # Serialization
    "to_dict",
    "from_dict",
    "config_to_dict",
    "config_from_dict",
]
