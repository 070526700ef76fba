"""
IEEE — Нативная семантика float для ungated-функций

Ungated-функции не проверяют аргументы, но и не бросают исключений:
результат такой, какой дала бы IEEE-754 арифметика.

- Нечисловой аргумент → NaN
- int / Fraction вне диапазона float → ±Inf
- Деление на ноль → ±Inf (знак числителя × знак нулевого делителя), 0/0 → NaN

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. NaN и ±Inf проходят без изменений
2. Ни одна функция модуля не бросает исключений на числовых входах
"""

import math
from numbers import Real
from typing import Any


def as_native_float(value: Any) -> float:
    """
    Приведение аргумента ungated-функции к float.

    Args:
        value: Любое значение

    Returns:
        float(value); math.nan для нечисловых значений;
        ±Inf для чисел, не представимых во float

    Examples:
        >>> as_native_float('foo')
        nan
        >>> as_native_float(10 ** 400)
        inf
        >>> as_native_float(float('-inf'))
        -inf
    """
    if not isinstance(value, Real):
        return math.nan

    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def ieee_divide(numerator: float, denominator: float) -> float:
    """
    Деление по правилам IEEE-754.

    Встроенное деление бросает ZeroDivisionError; здесь результат
    ±Inf или NaN, как в нативной float-арифметике.

    Examples:
        >>> ieee_divide(1.0, -0.0)
        -inf
        >>> ieee_divide(0.0, 0.0)
        nan
    """
    try:
        return numerator / denominator
    except ZeroDivisionError:
        # 0 / 0 и NaN / 0 не проходят ни одно из сравнений
        if numerator > 0:
            return math.copysign(math.inf, denominator)
        if numerator < 0:
            return -math.copysign(math.inf, denominator)
        return math.nan
