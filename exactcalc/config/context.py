"""
Config Context — Ambient конфигурация вычислений

Конфигурация хранится в contextvars.ContextVar: каждый поток и каждая
asyncio-задача видят своё значение, изменения в одном контексте не влияют
на другие. Для вызовов, которым нужна конкретная точность, каждая
трансцендентная функция принимает явный eps.

API:
- get_config() / set_config(cfg) / reset_config()
- config(name) → текущее значение; config(name, value) → предыдущее значение
- local_config(**overrides) — временные изменения в блоке with
"""

import logging
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, Iterator

from exactcalc.config.settings import CalcConfig, build_config
from exactcalc.core.errors import DomainError

logger = logging.getLogger(__name__)

_DEFAULT_CONFIG = CalcConfig()

_CURRENT: ContextVar[CalcConfig] = ContextVar("exactcalc_config", default=_DEFAULT_CONFIG)

UNSET: Any = object()


def get_config() -> CalcConfig:
    """Текущая конфигурация."""
    return _CURRENT.get()


def set_config(cfg: CalcConfig) -> CalcConfig:
    """
    Замена текущей конфигурации.

    Returns:
        Предыдущая конфигурация
    """
    previous = _CURRENT.get()
    _CURRENT.set(cfg)
    return previous


def reset_config() -> None:
    """Возврат к значениям по умолчанию."""
    _CURRENT.set(_DEFAULT_CONFIG)


def config(name: str, value: Any = UNSET) -> Any:
    """
    Чтение или изменение параметра конфигурации.

    Args:
        name: Имя параметра ("epsilon", "mode", "display", "appr", ...)
        value: Новое значение (если не передано — только чтение)

    Returns:
        Текущее значение при чтении, предыдущее значение при записи

    Raises:
        DomainError: Если имя неизвестно или значение невалидно

    Examples:
        >>> config("quo")
        2
        >>> config("quo", 0)
        2
        >>> config("quo")
        0
    """
    current = _CURRENT.get()
    if name not in CalcConfig.model_fields:
        raise DomainError(f"unknown config parameter: {name!r}")

    previous = getattr(current, name)
    if value is UNSET:
        return previous

    updated = build_config(current, **{name: value})
    _CURRENT.set(updated)
    logger.debug("config %s: %s -> %s", name, previous, getattr(updated, name))
    return previous


@contextmanager
def local_config(**overrides: Any) -> Iterator[CalcConfig]:
    """
    Временное изменение конфигурации в пределах блока with.

    Examples:
        >>> with local_config(epsilon="1e-5", mode="frac"):
        ...     pass
    """
    token = _CURRENT.set(build_config(_CURRENT.get(), **overrides))
    try:
        yield _CURRENT.get()
    finally:
        _CURRENT.reset(token)
