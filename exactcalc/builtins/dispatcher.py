"""
Dispatcher — Полиморфный вызов builtin по имени

dispatch(name, x, *args) == coerce_argument(x).name(*args) для
instance-style имён и target(*args) для module-style.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Имя вне каталога → UnknownBuiltinError
2. Instance-style без аргументов → ArgumentCountError
3. Ошибки реализации пропагируют без изменений (тот же тип)
"""

import logging
from typing import Any

from exactcalc.builtins.catalogue import BUILTINS, CATALOGUE, Builtin, BuiltinStyle
from exactcalc.core.domain import coerce_argument
from exactcalc.core.errors import ArgumentCountError, UnknownBuiltinError

logger = logging.getLogger("BuiltinDispatcher")


def lookup(name: str) -> Builtin:
    """
    Запись каталога по имени.

    Raises:
        UnknownBuiltinError: Если имени нет в каталоге
    """
    try:
        return CATALOGUE[name]
    except KeyError:
        raise UnknownBuiltinError(f"unknown builtin: {name!r}") from None


def builtin_names(style: BuiltinStyle | None = None) -> list[str]:
    """Имена builtin (все или только заданного стиля) в порядке каталога."""
    return [builtin.name for builtin in BUILTINS if style is None or builtin.style is style]


def dispatch(name: str, *args: Any, **kwargs: Any) -> Any:
    """
    Вызов builtin по имени.

    Args:
        name: Имя из каталога
        *args: Аргументы; для instance-style первый — получатель
        **kwargs: Именованные аргументы (eps, flags, ...)

    Returns:
        Результат builtin

    Raises:
        UnknownBuiltinError: Если имени нет в каталоге
        ArgumentCountError: Если instance-style builtin вызван без аргументов

    Examples:
        >>> dispatch("sqrt", 16)
        Rational(4)
        >>> dispatch("avg", 1, 2, 3)
        Rational(2)
    """
    builtin = lookup(name)

    if builtin.style is BuiltinStyle.MODULE:
        logger.debug("dispatch %s: module-style, %d args", name, len(args))
        return builtin.target(*args, **kwargs)

    if not args:
        raise ArgumentCountError(f"{name} requires at least one argument")

    receiver = coerce_argument(args[0])
    logger.debug("dispatch %s: %s receiver", name, receiver.kind.name)
    return getattr(receiver, builtin.target)(*args[1:], **kwargs)
