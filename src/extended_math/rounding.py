"""
Rounding — around, rint

Округление "half up": половина округляется в сторону +Inf
(2.5 → 3, -2.5 → -2), а не банковское округление встроенного round().

Функции ungated: NaN остаётся NaN, ±Inf остаётся ±Inf, нечисловой
аргумент даёт NaN. Исключения не бросаются, в том числе при precision,
для которой 10^precision не представимо во float.
"""

import math

from extended_math.ieee import as_native_float, ieee_divide


def round_half_up(value: float) -> float:
    """
    Округление до ближайшего целого, половина — вверх.

    Дробная часть сравнивается с 0.5 напрямую, без value + 0.5:
    для 0.49999999999999994 сумма с 0.5 округляется до 1.0 ещё до floor.

    Returns:
        float; NaN и ±Inf возвращаются без изменений,
        нечисловой аргумент → NaN
    """
    value = as_native_float(value)
    if not math.isfinite(value):
        return value

    floor_value = math.floor(value)
    if value - floor_value >= 0.5:
        floor_value += 1
    return float(floor_value)


def around(value: float, precision: int = 0) -> float:
    """
    Округление до заданного числа знаков после запятой.

    Args:
        value: Округляемое значение
        precision: Количество знаков (default: 0)

    Returns:
        round_half_up(value * 10^precision) / 10^precision

    Examples:
        >>> around(1.2345)
        1.0
        >>> around(1.2345, 2)
        1.23
        >>> around(1.2345, 3)
        1.235
        >>> around(float('-inf'))
        -inf
    """
    value = as_native_float(value)
    precision = as_native_float(precision)

    try:
        factor = math.pow(10, precision)
    except OverflowError:
        factor = math.inf

    # precision за пределами float: Inf / Inf и 0 / 0 дают NaN
    return ieee_divide(round_half_up(value * factor), factor)


def rint(value: float) -> float:
    """
    Округление до целого (half up).

    Examples:
        >>> rint(1.2345)
        1.0
        >>> rint(float('nan'))
        nan
    """
    return round_half_up(value)
