"""
Catalogue — Фиксированный каталог builtin-функций

Каждая запись — Builtin(name, style, target, summary):
- INSTANCE: target — имя метода Rational/Complex; dispatch приводит первый
  аргумент через coerce_argument и вызывает метод
- MODULE: target — функция; dispatch передаёт ей все аргументы

Каталог — таблица данных, а не рефлексия по доступным методам.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Final, Union

from exactcalc.builtins import aggregates, polynomial, special


class BuiltinStyle(str, Enum):
    """Способ вызова builtin."""

    INSTANCE = "instance"
    MODULE = "module"


@dataclass(frozen=True)
class Builtin:
    """Запись каталога."""

    name: str
    style: BuiltinStyle
    target: Union[str, Callable[..., Any]]
    summary: str


def _method(name: str, summary: str) -> Builtin:
    return Builtin(name=name, style=BuiltinStyle.INSTANCE, target=name, summary=summary)


def _function(name: str, target: Callable[..., Any], summary: str) -> Builtin:
    return Builtin(name=name, style=BuiltinStyle.MODULE, target=target, summary=summary)


# =============================================================================
# КАТАЛОГ
# =============================================================================

BUILTINS: Final[tuple[Builtin, ...]] = (
    # Арифметика и компоненты
    _method("abs", "модуль"),
    _method("conj", "комплексно сопряжённое"),
    _method("den", "знаменатель"),
    _method("frac", "дробная часть"),
    _method("im", "мнимая часть"),
    _method("int", "целая часть"),
    _method("inverse", "1 / x"),
    _method("norm", "re**2 + im**2"),
    _method("num", "числитель"),
    _method("quomod", "частное и остаток"),
    _method("re", "вещественная часть"),
    _method("cmp", "покомпонентное сравнение"),
    # Округление
    _method("appr", "приближение кратным y"),
    _method("bround", "округление до двоичных знаков"),
    _method("ceil", "округление вверх"),
    _method("cfappr", "приближение цепными дробями"),
    _method("cfsim", "упрощение цепными дробями"),
    _method("floor", "округление вниз"),
    _method("mmin", "наименьший по модулю вычет"),
    _method("mod", "остаток"),
    _method("quo", "частное"),
    _method("round", "округление до десятичных знаков"),
    # Тригонометрические
    _method("sin", "синус"),
    _method("cos", "косинус"),
    _method("tan", "тангенс"),
    _method("cot", "котангенс"),
    _method("sec", "секанс"),
    _method("csc", "косеканс"),
    _method("asin", "арксинус"),
    _method("acos", "арккосинус"),
    _method("atan", "арктангенс"),
    _method("acot", "арккотангенс"),
    _method("asec", "арксеканс"),
    _method("acsc", "арккосеканс"),
    _method("atan2", "угол точки (x, y)"),
    # Гиперболические
    _method("sinh", "гиперболический синус"),
    _method("cosh", "гиперболический косинус"),
    _method("tanh", "гиперболический тангенс"),
    _method("coth", "гиперболический котангенс"),
    _method("sech", "гиперболический секанс"),
    _method("csch", "гиперболический косеканс"),
    _method("asinh", "обратный гиперболический синус"),
    _method("acosh", "обратный гиперболический косинус"),
    _method("atanh", "обратный гиперболический тангенс"),
    _method("acoth", "обратный гиперболический котангенс"),
    _method("asech", "обратный гиперболический секанс"),
    _method("acsch", "обратный гиперболический косеканс"),
    _method("gd", "функция Гудермана"),
    _method("agd", "обратная функция Гудермана"),
    # Экспонента, логарифмы, степени
    _method("exp", "экспонента"),
    _method("ln", "натуральный логарифм"),
    _method("log", "десятичный логарифм"),
    _method("ilog", "целый логарифм по основанию"),
    _method("ilog10", "целый десятичный логарифм"),
    _method("ilog2", "целый двоичный логарифм"),
    _method("power", "степень"),
    _method("root", "корень степени n"),
    _method("sqrt", "квадратный корень"),
    _method("isqrt", "целый квадратный корень"),
    _method("iroot", "целый корень степени n"),
    _method("hypot", "sqrt(x**2 + y**2)"),
    _method("ltol", "sqrt(1 - x**2)"),
    _method("arg", "аргумент"),
    # Теория чисел и комбинаторика
    _method("bernoulli", "число Бернулли"),
    _method("catalan", "число Каталана"),
    _method("comb", "биномиальный коэффициент"),
    _method("euler", "число Эйлера"),
    _method("fact", "факториал"),
    _method("factor", "наименьший простой делитель"),
    _method("fcnt", "кратность делителя"),
    _method("fib", "число Фибоначчи"),
    _method("frem", "удаление делителя"),
    _method("gcd", "наибольший общий делитель"),
    _method("gcdrem", "наибольший делитель, взаимно простой с y"),
    _method("jacobi", "символ Якоби"),
    _method("lcm", "наименьшее общее кратное"),
    _method("lcmfact", "lcm(1, ..., x)"),
    _method("lfactor", "наименьший делитель среди первых n простых"),
    _method("minv", "обратный по модулю"),
    _method("perm", "число размещений"),
    # Биты, цифры, символы
    _method("bit", "бит n"),
    _method("char", "символ с кодом x"),
    _method("digit", "цифра в позиции n"),
    _method("digits", "количество цифр"),
    _method("estr", "выражение-конструктор"),
    _method("highbit", "старший бит"),
    _method("lowbit", "младший бит"),
    _method("xor", "побитовое исключающее ИЛИ"),
    # Предикаты (0/1)
    _method("iseven", "чётное"),
    _method("isimag", "чисто мнимое"),
    _method("isint", "целое"),
    _method("ismult", "кратное y"),
    _method("isodd", "нечётное"),
    _method("isprime", "простое"),
    _method("isreal", "вещественное"),
    _method("isrel", "взаимно простые"),
    _method("issq", "квадрат"),
    _method("meq", "сравнимы по модулю"),
    _method("mne", "несравнимы по модулю"),
    # Module-style
    _function("avg", aggregates.avg, "среднее арифметическое"),
    _function("config", special.config, "параметр конфигурации"),
    _function("hmean", aggregates.hmean, "среднее гармоническое"),
    _function("hnrmod", special.hnrmod, "v mod (h * 2**n + r)"),
    _function("max", aggregates.max_, "наибольший аргумент"),
    _function("min", aggregates.min_, "наименьший аргумент"),
    _function("pi", special.pi, "число pi"),
    _function("polar", special.polar, "число по модулю и аргументу"),
    _function("poly", polynomial.poly, "значение полинома"),
    _function("ssq", aggregates.ssq, "сумма квадратов"),
    _function("sum", aggregates.sum_, "сумма"),
)

CATALOGUE: Final[dict[str, Builtin]] = {builtin.name: builtin for builtin in BUILTINS}
