"""
Conversions — Градусы ↔ радианы

Две независимые пары конверсий с разной политикой валидации:

- radians_to_degrees / degrees_to_radians (gated):
  невалидный аргумент → math.nan
- deg2rad / rad2deg (ungated):
  формула применяется напрямую, Inf остаётся Inf, NaN остаётся NaN,
  нечисловой аргумент → NaN

Пары намеренно не объединены: вызывающий код может зависеть от любого
из двух поведений на граничных значениях.
"""

import math

from extended_math.constants import DEGREES_PER_RADIAN, RADIANS_PER_DEGREE
from extended_math.ieee import as_native_float
from extended_math.validation import is_valid_input_number


# =============================================================================
# GATED
# =============================================================================


def radians_to_degrees(value: float) -> float:
    """
    Конверсия угла из радиан в градусы.

    Args:
        value: Угол в радианах

    Returns:
        Угол в градусах, или math.nan если value не валидное число

    Examples:
        >>> radians_to_degrees(math.pi * 2)
        360.0
        >>> radians_to_degrees(math.pi / 2)
        90.0
    """
    if not is_valid_input_number(value):
        return math.nan
    return value * DEGREES_PER_RADIAN


def degrees_to_radians(value: float) -> float:
    """
    Конверсия угла из градусов в радианы.

    Args:
        value: Угол в градусах

    Returns:
        Угол в радианах, или math.nan если value не валидное число

    Examples:
        >>> degrees_to_radians(180)
        3.141592653589793
        >>> degrees_to_radians(float('inf'))
        nan
    """
    if not is_valid_input_number(value):
        return math.nan
    return value * RADIANS_PER_DEGREE


# =============================================================================
# UNGATED
# =============================================================================


def deg2rad(degrees: float) -> float:
    """
    Градусы → радианы без валидации.

    Нечисловой аргумент → NaN, числа вне диапазона float → ±Inf.

    Examples:
        >>> deg2rad(360) == math.pi * 2
        True
        >>> deg2rad(float('-inf'))
        -inf
    """
    degrees = as_native_float(degrees)
    return degrees * math.pi / 180


def rad2deg(radians: float) -> float:
    """
    Радианы → градусы без валидации.

    Examples:
        >>> rad2deg(math.pi)
        180.0
        >>> rad2deg(float('inf'))
        inf
    """
    radians = as_native_float(radians)
    return radians * 180 / math.pi
