"""
extended_math — числовые примитивы поверх встроенного math

Плоское пространство имён чистых функций и трёх констант (HALF_PI,
QUARTER_PI, TWO_PI). Состояния нет, I/O нет, функции безопасны для
вызова из любых потоков.
"""

import logging

# Constants
from extended_math.constants import (
    HALF_PI,
    QUARTER_PI,
    TWO_PI,
)

# Validation
from extended_math.validation import (
    InvalidNumberError,
    all_valid_input_numbers,
    is_valid_input_number,
    validate_input_number,
)

# Conversions
from extended_math.conversions import (
    deg2rad,
    degrees_to_radians,
    rad2deg,
    radians_to_degrees,
)

# Interpolation
from extended_math.interpolation import (
    clamp,
    difference,
    distance,
    lerp,
    normalize,
)

# Angles
from extended_math.angles import (
    compare_angles_degrees,
    compare_angles_radians,
    reduce_angle_degrees,
)

# Rounding
from extended_math.rounding import (
    around,
    rint,
    round_half_up,
)

# Special functions
from extended_math.special import (
    i0,
    sinc,
)

# Number theory
from extended_math.number_theory import (
    gcd,
    lcm,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Constants
    "HALF_PI",
    "QUARTER_PI",
    "TWO_PI",
    # Validation
    "InvalidNumberError",
    "all_valid_input_numbers",
    "is_valid_input_number",
    "validate_input_number",
    # Conversions — gated
    "degrees_to_radians",
    "radians_to_degrees",
    # Conversions — ungated
    "deg2rad",
    "rad2deg",
    # Interpolation
    "clamp",
    "difference",
    "distance",
    "lerp",
    "normalize",
    # Angles
    "compare_angles_degrees",
    "compare_angles_radians",
    "reduce_angle_degrees",
    # Rounding
    "around",
    "rint",
    "round_half_up",
    # Special functions
    "i0",
    "sinc",
    # Number theory
    "gcd",
    "lcm",
]
