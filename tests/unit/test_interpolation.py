"""
Тесты для Interpolation — clamp, difference, lerp, normalize

Проверяемые инварианты:
1. clamp включителен на обеих границах и идемпотентен
2. difference симметрична
3. lerp(a, b, 0) == a и lerp(a, b, 1) == b точно
4. normalize(lerp(a, b, t), a, b) ≈ t
5. Любой невалидный аргумент → NaN
"""

import math

import pytest

from extended_math.interpolation import (
    clamp,
    difference,
    distance,
    lerp,
    normalize,
)


# =============================================================================
# ТЕСТЫ: clamp
# =============================================================================


class TestClamp:
    """Тесты для clamp"""

    def test_above_max(self) -> None:
        assert clamp(3.141592654, -1, 3) == 3

    def test_inside_range(self) -> None:
        assert clamp(-1.337, -4.2, 6.9) == -1.337

    def test_below_min(self) -> None:
        assert clamp(-800, -2.8, 1) == -2.8

    def test_inclusive_bounds(self) -> None:
        """Значения на границах возвращаются как есть"""
        assert clamp(0.0, 0.0, 1.0) == 0.0
        assert clamp(1.0, 0.0, 1.0) == 1.0

    def test_idempotent(self) -> None:
        for value in (-10.0, -0.5, 0.25, 0.99, 7.0):
            once = clamp(value, -0.5, 1.0)
            assert clamp(once, -0.5, 1.0) == once

    def test_infinite_bounds_return_nan(self) -> None:
        """±Inf не допускаются как границы"""
        assert math.isnan(clamp(1, 2, math.inf))
        assert math.isnan(clamp(1, -math.inf, 4))

    def test_invalid_value_returns_nan(self) -> None:
        assert math.isnan(clamp(math.inf, 0, 1))
        assert math.isnan(clamp(math.nan, 0, 1))
        assert math.isnan(clamp("1", 0, 1))


# =============================================================================
# ТЕСТЫ: difference / distance
# =============================================================================


class TestDifference:
    """Тесты для difference"""

    def test_known_values(self) -> None:
        assert difference(3, 9) == 6
        assert difference(4, -4) == 8

    def test_symmetric(self) -> None:
        for a, b in ((3, 9), (-2.5, 7.25), (0, 0), (1e6, -1e-6)):
            assert difference(a, b) == difference(b, a)

    def test_invalid_returns_nan(self) -> None:
        assert math.isnan(difference(math.inf, 4))
        assert math.isnan(difference(math.nan, 8080))


class TestDistance:
    """Тесты для устаревшего алиаса distance"""

    def test_same_result_as_difference(self) -> None:
        with pytest.deprecated_call():
            assert distance(3, 9) == 6
        with pytest.deprecated_call():
            assert distance(4, -4) == difference(4, -4)

    def test_invalid_returns_nan(self) -> None:
        with pytest.deprecated_call():
            assert math.isnan(distance(math.inf, 4))


# =============================================================================
# ТЕСТЫ: lerp
# =============================================================================


class TestLerp:
    """Тесты для lerp"""

    def test_known_values(self) -> None:
        assert lerp(0, 1.5, 2) == 3
        assert lerp(-4, 8, 0.5) == 2
        assert lerp(0.5, 1.5, 0.75) == 1.25

    def test_exact_endpoints(self) -> None:
        """amount 0 и 1 возвращают ровно a и b"""
        a, b = 0.1, 0.7
        assert lerp(a, b, 0) == a
        assert lerp(a, b, 1) == b
        assert lerp(1e16, 1.0, 1) == 1.0

    def test_extrapolation_allowed(self) -> None:
        assert lerp(0, 10, -0.5) == -5
        assert lerp(0, 10, 1.5) == 15

    def test_invalid_returns_nan(self) -> None:
        assert math.isnan(lerp(0, 1, math.inf))
        assert math.isnan(lerp(math.nan, 320, 240))


# =============================================================================
# ТЕСТЫ: normalize
# =============================================================================


class TestNormalize:
    """Тесты для normalize"""

    def test_known_values(self) -> None:
        assert normalize(1, 0, 2) == 0.5
        assert normalize(4, 1, 5) == 0.75
        assert normalize(-3, -4, 0) == 0.25

    def test_outside_range(self) -> None:
        """Результат не ограничивается [0, 1]"""
        assert normalize(16, 0, 4) == 4

    def test_round_trip_with_lerp(self) -> None:
        for a, b in ((0.0, 1.0), (-4.0, 8.0), (100.0, -3.5)):
            for t in (0.0, 0.1, 0.5, 0.9, 1.0, 2.0):
                assert normalize(lerp(a, b, t), a, b) == pytest.approx(t)

    def test_empty_range_follows_ieee(self) -> None:
        """min == max: ±Inf для ненулевого числителя, NaN для нулевого"""
        assert normalize(2, 1, 1) == math.inf
        assert normalize(0, 1, 1) == -math.inf
        assert math.isnan(normalize(1, 1, 1))

    def test_empty_range_uses_sign_of_zero_divisor(self) -> None:
        """Знак результата учитывает знак нулевого делителя max - min"""
        assert normalize(1, 0.0, -0.0) == -math.inf
        assert normalize(-1, 0.0, -0.0) == math.inf
        assert normalize(1, -0.0, 0.0) == math.inf

    def test_invalid_returns_nan(self) -> None:
        assert math.isnan(normalize(math.nan, 0, 1))
        assert math.isnan(normalize(1, -math.inf, 2))
