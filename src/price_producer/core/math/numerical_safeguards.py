"""
Numerical Safeguards — проверки валидности float

Модуль обеспечивает защиту от распространения NaN/Inf в расчётах котировок:
- Проверка отдельного значения (is_valid_float)
- Проверка набора значений (all_finite)

КРИТИЧЕСКИЙ ИНВАРИАНТ:
NaN/Inf никогда не попадают в PriceLimit (отсекаются до сравнений).
"""

import math
from typing import Iterable


# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf

    Examples:
        >>> is_valid_float(1.1234)
        True
        >>> is_valid_float(float('nan'))
        False
        >>> is_valid_float(float('-inf'))
        False
    """
    return math.isfinite(value)


def all_finite(values: Iterable[float]) -> bool:
    """
    Проверка, что все значения конечны.

    Args:
        values: Набор значений (bid, ask, spread, ...)

    Returns:
        True если ни одно значение не NaN/Inf
    """
    return all(is_valid_float(v) for v in values)
