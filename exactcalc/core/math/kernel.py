"""
Kernel — Epsilon-ограниченные вычисления через sympy

Адаптер к внешнему арифметическому движку. Точная арифметика выполняется
на int/Fraction; трансцендентные функции и константы вычисляются sympy
(evalf) с количеством значащих цифр, достаточным для заданного epsilon,
после чего результат точно переводится в Fraction и округляется до
кратного epsilon.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. eps > 0, иначе DomainError
2. Каждая компонента результата — точное кратное eps
3. Бесконечности и NaN никогда не возвращаются (DomainError)
4. Точные корни (perfect powers) вычисляются без приближения
"""

import logging
from fractions import Fraction
from typing import Callable, Final, Optional

import sympy

from exactcalc.core.errors import DomainError
from exactcalc.core.math import rounding

logger = logging.getLogger(__name__)

# =============================================================================
# ПАРАМЕТРЫ ТОЧНОСТИ
# =============================================================================

# Точность по умолчанию для трансцендентных функций
DEFAULT_EPSILON: Final[Fraction] = Fraction(1, 10**20)

# Дополнительные значащие цифры сверх необходимых для eps
GUARD_DIGITS: Final[int] = 10

# Тип пары (re, im)
Parts = tuple[Fraction, Fraction]


# =============================================================================
# ТАБЛИЦА ТРАНСЦЕНДЕНТНЫХ ФУНКЦИЙ
# =============================================================================


def _log10(z: sympy.Expr) -> sympy.Expr:
    return sympy.log(z, 10)


def _gd(z: sympy.Expr) -> sympy.Expr:
    # Gudermannian: 2 * atan(tanh(z / 2))
    return 2 * sympy.atan(sympy.tanh(z / 2))


def _agd(z: sympy.Expr) -> sympy.Expr:
    # обратная Gudermannian: 2 * atanh(tan(z / 2))
    return 2 * sympy.atanh(sympy.tan(z / 2))


TRANSCENDENTALS: Final[dict[str, Callable[[sympy.Expr], sympy.Expr]]] = {
    # тригонометрические
    "sin": sympy.sin,
    "cos": sympy.cos,
    "tan": sympy.tan,
    "cot": sympy.cot,
    "sec": sympy.sec,
    "csc": sympy.csc,
    # обратные тригонометрические
    "asin": sympy.asin,
    "acos": sympy.acos,
    "atan": sympy.atan,
    "acot": sympy.acot,
    "asec": sympy.asec,
    "acsc": sympy.acsc,
    # гиперболические
    "sinh": sympy.sinh,
    "cosh": sympy.cosh,
    "tanh": sympy.tanh,
    "coth": sympy.coth,
    "sech": sympy.sech,
    "csch": sympy.csch,
    # обратные гиперболические
    "asinh": sympy.asinh,
    "acosh": sympy.acosh,
    "atanh": sympy.atanh,
    "acoth": sympy.acoth,
    "asech": sympy.asech,
    "acsch": sympy.acsch,
    # экспонента и логарифмы
    "exp": sympy.exp,
    "ln": sympy.log,
    "log": _log10,
    # Gudermannian
    "gd": _gd,
    "agd": _agd,
}


# =============================================================================
# ВАЛИДАЦИЯ И ПРЕОБРАЗОВАНИЯ
# =============================================================================


def validate_eps(eps: Fraction) -> Fraction:
    """
    Проверка epsilon.

    Raises:
        DomainError: Если eps <= 0
    """
    if eps <= 0:
        raise DomainError(f"eps must be positive, got {eps}")
    return eps


def decimal_digits(eps: Fraction) -> int:
    """
    Количество десятичных знаков, достаточное для различения кратных eps.

    Examples:
        >>> decimal_digits(Fraction(1, 10**20))
        21
        >>> decimal_digits(Fraction(1))
        1
    """
    validate_eps(eps)
    return len(str(eps.denominator // eps.numerator))


def to_sympy(re: Fraction, im: Fraction = Fraction(0)) -> sympy.Expr:
    """Точное sympy-представление числа re + im*i."""
    value = sympy.Rational(re.numerator, re.denominator)
    if im:
        value = value + sympy.I * sympy.Rational(im.numerator, im.denominator)
    return value


def _to_fraction(value: sympy.Expr) -> Fraction:
    # Rational(Float) использует точное двоичное значение
    exact = sympy.Rational(value)
    return Fraction(int(exact.p), int(exact.q))


def _integer_digits(value: Fraction) -> int:
    whole = abs(value.numerator) // value.denominator
    return len(str(whole)) if whole else 0


# =============================================================================
# ВЫЧИСЛЕНИЕ
# =============================================================================


def _evaluate_parts(expr: sympy.Expr, digits: int) -> Parts:
    value = sympy.N(expr, digits)
    if value.has(sympy.nan, sympy.zoo, sympy.oo, -sympy.oo):
        raise DomainError(f"result is not finite: {expr}")
    re, im = value.as_real_imag()
    if not (re.is_Number and im.is_Number):
        raise DomainError(f"result cannot be evaluated numerically: {expr}")
    return _to_fraction(re), _to_fraction(im)


def approximate(
    expr: sympy.Expr,
    eps: Fraction,
    flags: int = rounding.DEFAULT_APPROX_MODE,
) -> Parts:
    """
    Приближение значения sympy-выражения кратными eps.

    Значащих цифр берётся decimal_digits(eps) + GUARD_DIGITS; если модуль
    результата >= 1, вычисление повторяется с добавлением цифр целой части.

    Args:
        expr: Точное sympy-выражение (например, sympy.sin(Rational(1, 2)))
        eps: Точность (> 0)
        flags: Флаги округления компонент (default: 24)

    Returns:
        (re, im) — точные кратные eps

    Raises:
        DomainError: Если eps <= 0 или результат бесконечен/не определён
    """
    digits = decimal_digits(eps) + GUARD_DIGITS
    re, im = _evaluate_parts(expr, digits)

    magnitude = max(_integer_digits(re), _integer_digits(im))
    if magnitude:
        logger.debug("re-evaluating %s with %d extra digits", expr, magnitude)
        re, im = _evaluate_parts(expr, digits + magnitude)

    return rounding.appr(re, eps, flags), rounding.appr(im, eps, flags)


def evaluate(name: str, re: Fraction, im: Fraction, eps: Fraction) -> Parts:
    """
    Вычисление трансцендентной функции из TRANSCENDENTALS.

    Args:
        name: Имя функции ("sin", "ln", "agd", ...)
        re: Вещественная часть аргумента
        im: Мнимая часть аргумента
        eps: Точность

    Returns:
        (re, im) результата

    Raises:
        DomainError: Если функция не определена в точке
    """
    function = TRANSCENDENTALS[name]
    return approximate(function(to_sympy(re, im)), eps)


def power(base: Parts, exponent: Parts, eps: Fraction) -> Parts:
    """Главное значение base ** exponent с точностью eps."""
    expr = sympy.Pow(to_sympy(*base), to_sympy(*exponent))
    return approximate(expr, eps)


def pi(eps: Fraction) -> Fraction:
    """Число pi с точностью eps."""
    return approximate(sympy.pi, eps)[0]


def exact_root(value: Fraction, n: int) -> Optional[Fraction]:
    """
    Точный корень степени n, если он рационален.

    Для отрицательного value и нечётного n возвращает отрицательный корень.

    Returns:
        Fraction или None, если корень иррационален (или не вещественен)

    Examples:
        >>> exact_root(Fraction(81), 4)
        Fraction(3, 1)
        >>> exact_root(Fraction(-8, 27), 3)
        Fraction(-2, 3)
        >>> exact_root(Fraction(2), 2) is None
        True
    """
    if value < 0:
        if n % 2 == 0:
            return None
        root = exact_root(-value, n)
        return -root if root is not None else None

    num_root, num_exact = sympy.integer_nthroot(value.numerator, n)
    if not num_exact:
        return None
    den_root, den_exact = sympy.integer_nthroot(value.denominator, n)
    if not den_exact:
        return None
    return Fraction(int(num_root), int(den_root))


def exact_sqrt(value: Parts) -> Optional[Parts]:
    """
    Точный главный квадратный корень комплексного числа, если он рационален.

    sqrt(a + bi) = sqrt((|z| + a) / 2) + sign(b) * sqrt((|z| - a) / 2) * i

    Examples:
        >>> exact_sqrt((Fraction(0), Fraction(8)))
        (Fraction(2, 1), Fraction(2, 1))
        >>> exact_sqrt((Fraction(-4), Fraction(0)))
        (Fraction(0, 1), Fraction(2, 1))
    """
    re, im = value
    modulus = exact_root(re * re + im * im, 2)
    if modulus is None:
        return None
    real_part = exact_root((modulus + re) / 2, 2)
    imag_part = exact_root((modulus - re) / 2, 2)
    if real_part is None or imag_part is None:
        return None
    return real_part, -imag_part if im < 0 else imag_part


def root_approximation(value: Parts, n: int, eps: Fraction, flags: int) -> Parts:
    """Главный корень степени n с округлением компонент по flags."""
    expr = sympy.Pow(to_sympy(*value), sympy.Rational(1, n))
    return approximate(expr, eps, flags)


def atan2(y: Fraction, x: Fraction, eps: Fraction) -> Fraction:
    """Угол точки (x, y); atan2(0, 0) = 0."""
    if x == 0 and y == 0:
        validate_eps(eps)
        return Fraction(0)
    return approximate(sympy.atan2(to_sympy(y), to_sympy(x)), eps)[0]


def hypot(x: Fraction, y: Fraction, eps: Fraction) -> Fraction:
    """sqrt(x**2 + y**2): точно, если корень рационален."""
    validate_eps(eps)
    square = x * x + y * y
    exact = exact_root(square, 2)
    if exact is not None:
        return exact
    return approximate(sympy.sqrt(to_sympy(square)), eps)[0]


def leg_to_leg(x: Fraction, eps: Fraction) -> Fraction:
    """
    sqrt(1 - x**2): второй катет при гипотенузе 1, точно, если корень рационален.

    Raises:
        DomainError: Если |x| > 1
    """
    if abs(x) > 1:
        raise DomainError(f"ltol requires |x| <= 1, got {x}")
    validate_eps(eps)
    square = 1 - x * x
    exact = exact_root(square, 2)
    if exact is not None:
        return exact
    return approximate(sympy.sqrt(to_sympy(square)), eps)[0]


def polar(radius: Fraction, angle: Fraction, eps: Fraction) -> Parts:
    """radius * (cos(angle) + i*sin(angle)) с точностью eps."""
    validate_eps(eps)
    expr = to_sympy(radius) * sympy.exp(sympy.I * to_sympy(angle))
    return approximate(expr, eps)
