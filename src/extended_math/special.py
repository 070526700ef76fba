"""
Special Functions — I0 (Modified Bessel, first kind, order 0) и sinc

I0 вычисляется классической двухветочной полиномиальной аппроксимацией
(Abramowitz & Stegun 9.8.1 / 9.8.2):

    |x| <= 3.75:  I0(x) ≈ P6(t),                      t = (x / 3.75)^2
    |x| >  3.75:  I0(x) ≈ exp(|x|) / sqrt(|x|) * P8(t), t = 3.75 / |x|

Коэффициенты (constants.I0_SMALL_COEFFS / I0_LARGE_COEFFS) воспроизводятся
точно: замена их на более точные значения меняет контракт точности.

Обе функции ungated. Там, где math бросает исключение для случая, который
IEEE-арифметика определяет (переполнение exp, sin(±Inf)), возвращается
IEEE-результат. Нечисловой аргумент даёт NaN.
"""

import logging
import math
from typing import Sequence

from extended_math.constants import (
    I0_BRANCH_THRESHOLD,
    I0_LARGE_COEFFS,
    I0_SMALL_COEFFS,
)
from extended_math.ieee import as_native_float

logger = logging.getLogger(__name__)


def _horner(coeffs: Sequence[float], t: float) -> float:
    # coeffs от свободного члена к старшему
    result = 0.0
    for coeff in reversed(coeffs):
        result = coeff + t * result
    return result


def i0(x: float) -> float:
    """
    Модифицированная функция Бесселя первого рода нулевого порядка.

    Args:
        x: Аргумент

    Returns:
        Приближение I0(x); I0(±Inf) = Inf, I0(NaN) = NaN,
        нечисловой x → NaN

    Examples:
        >>> i0(0)
        1.0
        >>> i0(float('-inf'))
        inf
    """
    x = as_native_float(x)
    y = abs(x)

    if y <= I0_BRANCH_THRESHOLD:
        t = x / I0_BRANCH_THRESHOLD
        t *= t
        return _horner(I0_SMALL_COEFFS, t)

    if math.isinf(y):
        return math.inf

    t = I0_BRANCH_THRESHOLD / y
    try:
        scale = math.exp(y) / math.sqrt(y)
    except OverflowError:
        logger.debug("i0(%r): exp overflow, returning inf", x)
        return math.inf

    return scale * _horner(I0_LARGE_COEFFS, t)


def sinc(x: float) -> float:
    """
    sin(x) / x, с sinc(0) = 1.

    Examples:
        >>> sinc(0)
        1.0
        >>> sinc(1)
        0.8414709848078965
        >>> sinc(float('inf'))
        nan
    """
    x = as_native_float(x)
    if x == 0:
        return 1.0

    if math.isinf(x):
        return math.nan

    return math.sin(x) / x
