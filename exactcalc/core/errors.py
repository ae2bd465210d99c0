"""
Errors — Таксономия ошибок числовой башни

Все ошибки наследуются от MathError, а также от соответствующего
встроенного исключения Python, чтобы вызывающий код мог ловить их
привычным образом (ZeroDivisionError, ValueError, TypeError, LookupError).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ошибки пропагируют к вызывающему коду без изменений
2. Coercion и dispatcher никогда не переклассифицируют ошибки
"""


class MathError(Exception):
    """Базовая ошибка всех операций exactcalc."""


class DivisionByZero(MathError, ZeroDivisionError):
    """
    Деление на ноль.

    Возникает при:
    - Конструировании Rational с нулевым знаменателем
    - Делении, целочисленном делении и modulo на ноль
    - inverse(0) и возведении нуля в отрицательную степень
    """


class DomainError(MathError, ValueError):
    """
    Операция не определена для данных аргументов.

    Примеры: acoth(1), fact(-1), bernoulli(2**31), eps <= 0,
    невалидное значение конфигурации.
    """


class TypeCoercionError(MathError, TypeError):
    """
    Операнд нельзя привести ни к одному виду NumericValue.

    Также возникает при упорядочивании не-вещественных значений и при
    вызове методов, определённых только для вещественных чисел, на Complex.
    """


class ArgumentCountError(MathError, TypeError):
    """Вариадический builtin вызван со слишком малым числом аргументов."""


class OutOfRangeError(MathError, ValueError):
    """Аргумент дискретной операции вне допустимого диапазона (char вне 0–255)."""


class UnknownBuiltinError(MathError, LookupError):
    """Имя отсутствует в каталоге builtin-функций."""
