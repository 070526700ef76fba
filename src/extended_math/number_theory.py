"""
Number Theory — gcd, lcm

Алгоритм Евклида на |x|, |y|. Функции ungated и работают как с int,
так и с float: для двух int результат gcd — int, lcm — точное
целочисленное деление.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. gcd(x, 0) == |x|
2. lcm(x, y) == 0, если x или y численно равен нулю
3. NaN не считается нулём: NaN в аргументах даёт NaN в результате
4. Нечисловой аргумент даёт NaN, исключение не бросается
"""

import logging
import math
from numbers import Real

logger = logging.getLogger(__name__)


def gcd(x: float, y: float) -> float:
    """
    Наибольший общий делитель.

    Повторяет (x, y) ← (y, x mod y), пока y != 0.
    Если по ходу появляется NaN (NaN-аргумент или Inf mod y),
    возвращается math.nan.

    Args:
        x: Первое число
        y: Второе число

    Returns:
        НОД(|x|, |y|)

    Examples:
        >>> gcd(12, 18)
        6
        >>> gcd(-7, 0)
        7
    """
    if not (isinstance(x, Real) and isinstance(y, Real)):
        return math.nan

    x = abs(x)
    y = abs(y)

    while y:
        if isinstance(y, float) and math.isnan(y):
            logger.debug("gcd: NaN reached in Euclid loop, returning nan")
            return math.nan
        x, y = y, x % y

    if isinstance(x, float) and math.isnan(x):
        return math.nan
    return x


def lcm(x: float, y: float) -> float:
    """
    Наименьшее общее кратное.

    Returns:
        0 если x или y равен нулю, иначе |x * y| / gcd(x, y)

    Examples:
        >>> lcm(4, 6)
        12
        >>> lcm(0, 5)
        0
    """
    if not (isinstance(x, Real) and isinstance(y, Real)):
        return math.nan

    if x == 0 or y == 0:
        return 0

    product = abs(x * y)
    divisor = gcd(x, y)

    if isinstance(product, int) and isinstance(divisor, int):
        return product // divisor
    return product / divisor
