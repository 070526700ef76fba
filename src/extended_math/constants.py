"""
Constants — Числовые константы extended_math

Все константы объявлены один раз на уровне модуля и не изменяются.
Значения π-кратных констант заданы литералами (а не вычислены из math.pi),
чтобы совпадать с опубликованными значениями побитово после округления до float.
"""

import math
from typing import Final

# =============================================================================
# π-КОНСТАНТЫ
# =============================================================================

# π / 2
HALF_PI: Final[float] = 1.57079632679489661923

# π / 4
QUARTER_PI: Final[float] = 0.78539816339744830962

# 2π
TWO_PI: Final[float] = 6.28318530717958647693


# =============================================================================
# УГЛЫ
# =============================================================================

# Полный оборот в градусах (период для сравнения углов)
FULL_TURN_DEGREES: Final[float] = 360.0

# Множители для gated-конверсий: value * (180 / π), value * (π / 180)
DEGREES_PER_RADIAN: Final[float] = 180 / math.pi
RADIANS_PER_DEGREE: Final[float] = math.pi / 180


# =============================================================================
# I0 (Modified Bessel, first kind, order 0)
# =============================================================================

# Граница между полиномиальной и асимптотической ветками
I0_BRANCH_THRESHOLD: Final[float] = 3.75

# Ветка |x| <= 3.75: полином степени 6 по t = (x / 3.75)^2
# Порядок: от свободного члена к старшему
I0_SMALL_COEFFS: Final[tuple[float, ...]] = (
    1.0,
    3.5156229,
    3.0899424,
    1.2067492,
    0.2659732,
    0.0360768,
    0.0045813,
)

# Ветка |x| > 3.75: exp(|x|) / sqrt(|x|) * полином степени 8 по t = 3.75 / |x|
I0_LARGE_COEFFS: Final[tuple[float, ...]] = (
    0.39894228,
    0.01328592,
    0.00225319,
    -0.00157565,
    0.00916281,
    -0.02057706,
    0.02635537,
    -0.01647633,
    0.00392377,
)
