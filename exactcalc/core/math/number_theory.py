"""
Number Theory — Целочисленные функции через sympy

Комбинаторика, специальные последовательности, простота и делимость.
Все функции принимают и возвращают int/Fraction; проверка того, что
аргумент целый, выполняется вызывающим кодом (NumericValue).

Граничные значения:
- bernoulli(1) = -1/2, bernoulli(n) = 0 для нечётных n > 1 и n < 0
- bernoulli / euler / catalan при n >= 2**31 → DomainError
- fib(-n) = (-1)**(n+1) * fib(n)
- catalan(n < 0) = 0
"""

import math
from fractions import Fraction
from typing import Final, Optional

import sympy

from exactcalc.core.errors import DomainError

# Граница индексов для bernoulli/euler/catalan
SEQUENCE_INDEX_LIMIT: Final[int] = 2**31

# Граница поиска делителя factor() по умолчанию
DEFAULT_FACTOR_LIMIT: Final[int] = 2**32


# =============================================================================
# КОМБИНАТОРИКА
# =============================================================================


def factorial(n: int) -> int:
    """
    n!

    Raises:
        DomainError: Если n < 0
    """
    if n < 0:
        raise DomainError(f"factorial of negative number: {n}")
    return int(sympy.factorial(n))


def binomial(n: int, k: int) -> int:
    """Биномиальный коэффициент C(n, k) для n >= 0; 0 при k < 0 или k > n."""
    if k < 0 or k > n:
        return 0
    return int(sympy.binomial(n, k))


def falling_factorial(n: int, k: int) -> int:
    """n * (n - 1) * ... * (n - k + 1)."""
    if k < 0:
        raise DomainError(f"perm count must be non-negative, got {k}")
    return int(sympy.ff(n, k))


def fibonacci(n: int) -> int:
    """
    Числа Фибоначчи, включая отрицательные индексы.

    Examples:
        >>> fibonacci(10)
        55
        >>> fibonacci(-10)
        -55
    """
    if n >= 0:
        return int(sympy.fibonacci(n))
    value = int(sympy.fibonacci(-n))
    return value if n % 2 else -value


def _check_sequence_index(name: str, n: int) -> None:
    if n >= SEQUENCE_INDEX_LIMIT:
        raise DomainError(f"{name} index too large: {n}")


def bernoulli(n: int) -> Fraction:
    """
    Числа Бернулли B(n) с B(1) = -1/2.

    Raises:
        DomainError: Если n чётное и n >= 2**31
    """
    if n < 0:
        return Fraction(0)
    if n == 1:
        return Fraction(-1, 2)
    if n % 2:
        return Fraction(0)
    _check_sequence_index("bernoulli", n)
    value = sympy.bernoulli(n)
    return Fraction(int(value.p), int(value.q))


def euler(n: int) -> int:
    """Числа Эйлера E(n); 0 для нечётных и отрицательных n."""
    if n < 0 or n % 2:
        return 0
    _check_sequence_index("euler", n)
    return int(sympy.euler(n))


def catalan(n: int) -> int:
    """Числа Каталана; 0 для отрицательных n."""
    if n < 0:
        return 0
    _check_sequence_index("catalan", n)
    return int(sympy.catalan(n))


# =============================================================================
# ПРОСТОТА И ДЕЛИМОСТЬ
# =============================================================================


def is_prime(n: int) -> bool:
    """Простота |n|."""
    return bool(sympy.isprime(abs(n)))


def smallest_factor(n: int, limit: int = DEFAULT_FACTOR_LIMIT) -> int:
    """
    Наименьший простой делитель |n|, не превышающий limit.

    Returns:
        Делитель или 1, если такого делителя нет

    Examples:
        >>> smallest_factor(35, 4)
        1
        >>> smallest_factor(-35)
        5
    """
    n = abs(n)
    if n < 2 or limit < 2:
        return 1
    if n <= limit and sympy.isprime(n):
        return n
    found = [
        int(p) for p in sympy.factorint(n, limit=limit)
        if p <= limit and sympy.isprime(p)
    ]
    return min(found) if found else 1


def factor_count(n: int, d: int) -> int:
    """Сколько раз |d| делит n (0 для n == 0 или |d| < 2)."""
    d = abs(d)
    if n == 0 or d < 2:
        return 0
    count = 0
    while n % d == 0:
        n //= d
        count += 1
    return count


def remove_factor(n: int, d: int) -> int:
    """|n| без всех множителей |d|."""
    n, d = abs(n), abs(d)
    if n == 0 or d < 2:
        return n
    while n % d == 0:
        n //= d
    return n


def jacobi(a: int, b: int) -> int:
    """Символ Якоби (a/b); 0 если b чётное или b <= 0."""
    if b <= 0 or b % 2 == 0:
        return 0
    return int(sympy.jacobi_symbol(a % b, b))


def modular_inverse(a: int, m: int) -> Optional[int]:
    """Обратный к a по модулю |m| или None, если он не существует."""
    m = abs(m)
    if m == 0 or math.gcd(a, m) != 1:
        return None
    return int(sympy.mod_inverse(a, m))


def integer_root(n: int, k: int) -> int:
    """Целая часть корня степени k из n >= 0."""
    root, _ = sympy.integer_nthroot(n, k)
    return int(root)


def integer_log(n: int, b: int) -> int:
    """
    Наибольшее k с b**k <= n (n >= 1, b >= 2).

    Examples:
        >>> integer_log(1000, 10)
        3
        >>> integer_log(999, 10)
        2
    """
    # b**k < 2**(k * bitlen(b)) <= n: нижняя оценка
    k = max((n.bit_length() - 1) // b.bit_length(), 0)
    value = b**k
    while value * b <= n:
        value *= b
        k += 1
    return k


def is_square(n: int) -> bool:
    """n — точный квадрат (n >= 0)."""
    if n < 0:
        return False
    _, exact = sympy.integer_nthroot(n, 2)
    return bool(exact)


def hnrmod(v: int, h: int, n: int, r: int) -> int:
    """
    v mod (h * 2**n + r) — остаток по модулю вида h*2^n + r.

    Raises:
        DomainError: Если h < 1, n < 1 или r не в {-1, 0, 1}
    """
    if h < 1:
        raise DomainError(f"hnrmod h must be positive, got {h}")
    if n < 1:
        raise DomainError(f"hnrmod n must be positive, got {n}")
    if r not in (-1, 0, 1):
        raise DomainError(f"hnrmod r must be -1, 0 or 1, got {r}")
    return v % (h * 2**n + r)


def gcd_remainder(n: int, m: int) -> int:
    """
    Наибольший делитель |n|, взаимно простой с m (0 для n == 0).

    Examples:
        >>> gcd_remainder(630, 6)
        35
        >>> gcd_remainder(6, 15)
        2
    """
    n = abs(n)
    if n == 0:
        return 0
    common = math.gcd(n, m)
    while common > 1:
        n //= common
        common = math.gcd(n, common)
    return n


def lcm_factorial(n: int) -> int:
    """
    lcm(1, 2, ..., n); 1 для n == 0.

    Raises:
        DomainError: Если n < 0
    """
    if n < 0:
        raise DomainError(f"lcmfact of negative number: {n}")
    result = 1
    for p in sympy.primerange(2, n + 1):
        power = int(p)
        while power * p <= n:
            power *= int(p)
        result *= power
    return result


def least_prime_factor(n: int, count: int) -> int:
    """
    Наименьший простой делитель |n| среди первых count простых чисел.

    Returns:
        Делитель или 1, если такого нет (и для |n| < 2)

    Raises:
        DomainError: Если count < 0
    """
    if count < 0:
        raise DomainError(f"lfactor count must be non-negative, got {count}")
    n = abs(n)
    if n < 2 or count == 0:
        return 1
    for p in sympy.primerange(2, int(sympy.prime(count)) + 1):
        if n % p == 0:
            return int(p)
    return 1
