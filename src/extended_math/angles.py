"""
Angles — Круговое сравнение углов

Сравнение учитывает периодичность (mod 360° / mod 2π) и выражает взаимную
ориентацию углов, а не их численную величину:

    +1  a лежит "слева" от b по короткой дуге: sin(a - b) < 0
    -1  a лежит "справа" от b: sin(a - b) > 0
     0  углы совпадают после приведения к [0, 360]

Ориентация определяется знаком cos(θ + π/2) = -sin(θ), где θ = a - b в
радианах. Это тот же тест, что и знак векторного произведения единичных
векторов под углами a и b; обратные тригонометрические функции не нужны.
"""

import math

from extended_math.constants import FULL_TURN_DEGREES
from extended_math.conversions import degrees_to_radians, radians_to_degrees
from extended_math.ieee import as_native_float
from extended_math.validation import all_valid_input_numbers


def reduce_angle_degrees(angle: float) -> float:
    """
    Приведение угла в градусах к диапазону [0, 360].

    Остаток берётся с усечением (знак делимого), затем к отрицательному
    остатку прибавляется 360. Для очень малого отрицательного остатка
    сумма округляется до 360.0 (reduce_angle_degrees(-1e-20) == 360.0),
    поэтому верхняя граница достижима.

    Для ±Inf, NaN и нечисловых значений возвращается math.nan.

    Examples:
        >>> reduce_angle_degrees(370)
        10.0
        >>> reduce_angle_degrees(-90)
        270.0
    """
    angle = as_native_float(angle)
    if math.isinf(angle):
        return math.nan

    reduced = math.fmod(angle, FULL_TURN_DEGREES)
    if reduced < 0:
        reduced += FULL_TURN_DEGREES
    return reduced


def compare_angles_degrees(a: float, b: float) -> float:
    """
    Сравнение двух углов в градусах.

    Углы вне [0, 360] приводятся к этому диапазону перед проверкой
    на равенство.

    Args:
        a: Угол в градусах
        b: Угол в градусах, с которым сравнивается a

    Returns:
        0, 1 или -1 (см. модуль), или math.nan если аргумент невалиден

    Examples:
        >>> compare_angles_degrees(0, 360)
        0
        >>> compare_angles_degrees(-90, 90)
        1
        >>> compare_angles_degrees(120, 30)
        -1
    """
    if not all_valid_input_numbers(a, b):
        return math.nan

    if a == b:
        return 0

    if reduce_angle_degrees(a) == reduce_angle_degrees(b):
        return 0

    orientation = math.cos(degrees_to_radians(a - b) + (math.pi / 2))
    return -1 if orientation < 0 else 1


def compare_angles_radians(a: float, b: float) -> float:
    """
    Сравнение двух углов в радианах.

    Оба угла переводятся в градусы (gated-конверсией) и сравниваются
    через compare_angles_degrees.

    Examples:
        >>> compare_angles_radians(0, math.pi * 2)
        0
        >>> compare_angles_radians(-(math.pi / 2), math.pi / 2)
        1
    """
    if not all_valid_input_numbers(a, b):
        return math.nan

    return compare_angles_degrees(radians_to_degrees(a), radians_to_degrees(b))
