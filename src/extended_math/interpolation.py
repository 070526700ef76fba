"""
Interpolation — clamp, difference, lerp, normalize

Все функции модуля gated: любой аргумент, не являющийся конечным
вещественным числом, даёт math.nan. Исключения не бросаются.
"""

import math
import warnings

from extended_math.ieee import ieee_divide
from extended_math.validation import all_valid_input_numbers


def clamp(value: float, min_value: float, max_value: float) -> float:
    """
    Ограничение значения диапазоном [min_value, max_value] (включительно).

    ±Inf не допускаются ни как значение, ни как граница.

    Args:
        value: Исходное значение
        min_value: Нижняя граница
        max_value: Верхняя граница

    Returns:
        Значение в диапазоне, или math.nan если любой аргумент невалиден

    Examples:
        >>> clamp(3.141592654, -1, 3)
        3
        >>> clamp(-1.337, -4.2, 6.9)
        -1.337
        >>> clamp(-800, -2.8, 1)
        -2.8
        >>> clamp(1, 2, float('inf'))
        nan
    """
    if not all_valid_input_numbers(value, min_value, max_value):
        return math.nan

    if value < min_value:
        return min_value
    if value > max_value:
        return max_value
    return value


def difference(a: float, b: float) -> float:
    """
    Положительная разность двух чисел: |b - a|.

    Examples:
        >>> difference(3, 9)
        6
        >>> difference(4, -4)
        8
        >>> difference(float('inf'), 4)
        nan
    """
    if not all_valid_input_numbers(a, b):
        return math.nan
    return abs(b - a)


def distance(a: float, b: float) -> float:
    """
    Устаревший алиас difference.

    Переименован, чтобы не подразумевать единицы измерения значений.
    Результат идентичен difference; вызов выдаёт DeprecationWarning.
    """
    warnings.warn(
        "distance() is deprecated, use difference() instead",
        DeprecationWarning,
        stacklevel=2,
    )
    return difference(a, b)


def lerp(a: float, b: float, amount: float) -> float:
    """
    Линейная интерполяция между a и b.

    amount не ограничивается [0, 1]: экстраполяция допустима.
    При amount == 0 и amount == 1 возвращаются ровно a и b
    (без накопления ошибки округления).

    Args:
        a: Нижний конец шкалы
        b: Верхний конец шкалы
        amount: Множитель интерполяции

    Returns:
        a + (b - a) * amount, или math.nan если любой аргумент невалиден

    Examples:
        >>> lerp(0, 1.5, 2)
        3.0
        >>> lerp(-4, 8, 0.5)
        2.0
        >>> lerp(0.5, 1.5, 0.75)
        1.25
    """
    if not all_valid_input_numbers(a, b, amount):
        return math.nan

    if amount == 0:
        return a
    if amount == 1:
        return b

    return a + (b - a) * amount


def normalize(value: float, min_value: float, max_value: float) -> float:
    """
    Нормализация значения относительно [min_value, max_value].

    Результат может выходить за [0, 1], если value вне диапазона.
    При min_value == max_value результат соответствует IEEE-делению
    на ноль: ±Inf (знак числителя × знак нулевого делителя) для
    ненулевого числителя, NaN для нулевого.

    Examples:
        >>> normalize(1, 0, 2)
        0.5
        >>> normalize(-3, -4, 0)
        0.25
        >>> normalize(16, 0, 4)
        4.0
    """
    if not all_valid_input_numbers(value, min_value, max_value):
        return math.nan

    numerator = value - min_value
    denominator = max_value - min_value

    return ieee_divide(numerator, denominator)
