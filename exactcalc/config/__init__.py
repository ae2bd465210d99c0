"""
Configuration для exactcalc

Ambient конфигурация (ContextVar) с валидацией через pydantic.
"""

from .context import (
    config,
    get_config,
    local_config,
    reset_config,
    set_config,
)
from .settings import ROUNDING_FIELDS, CalcConfig, build_config

__all__ = [
    # Settings
    "CalcConfig",
    "ROUNDING_FIELDS",
    "build_config",
    # Context
    "config",
    "get_config",
    "local_config",
    "reset_config",
    "set_config",
]
