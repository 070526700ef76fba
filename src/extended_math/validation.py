"""
Validation — Проверка входных чисел

Модуль определяет понятие "валидного числа" для всех gated-операций пакета:
конечное вещественное число (не NaN, не +Inf, не -Inf).

Две политики сосуществуют:
- Мягкая (gated-функции): невалидный аргумент → возвращается math.nan,
  исключение не бросается
- Строгая (validate_input_number): невалидный аргумент → InvalidNumberError

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. bool не считается числом, хотя является подклассом int
2. is_valid_input_number никогда не бросает исключений
   (в том числе для int / Fraction, не представимых во float)
"""

import math
from numbers import Real
from typing import Any


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidNumberError(ValueError):
    """
    Аргумент не является конечным вещественным числом.

    Бросается только строгой валидацией; gated-функции вместо этого
    возвращают math.nan.
    """
    pass


# =============================================================================
# ПРОВЕРКИ
# =============================================================================


def is_valid_input_number(value: Any) -> bool:
    """
    Проверка, является ли значение валидным числом.

    Args:
        value: Проверяемое значение (любого типа)

    Returns:
        True если value — конечное вещественное число, иначе False

    Examples:
        >>> is_valid_input_number(3.5)
        True
        >>> is_valid_input_number(float('inf'))
        False
        >>> is_valid_input_number('42')
        False
        >>> is_valid_input_number(True)
        False
    """
    if isinstance(value, bool) or not isinstance(value, Real):
        return False

    try:
        return math.isfinite(value)
    except OverflowError:
        # int / Fraction вне диапазона float
        return False


def all_valid_input_numbers(*values: Any) -> bool:
    """True если каждый аргумент проходит is_valid_input_number."""
    return all(is_valid_input_number(v) for v in values)


def validate_input_number(value: Any, name: str) -> None:
    """
    Строгая валидация числа.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        InvalidNumberError: Если value не число, NaN или Inf
    """
    if not is_valid_input_number(value):
        raise InvalidNumberError(
            f"{name} must be a valid number (not NaN/Inf), got {value!r}"
        )
