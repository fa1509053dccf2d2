"""
SpreadTable — таблица спредов по умолчанию

Используется, когда вызывающая сторона не задала spread явно:
spread подбирается по величине (magnitude) — либо abs(bid - ask),
либо abs(bid), в зависимости от вызывающего кода.

Таблица масштабируется с величиной: spread = threshold / 1000,
кроме нулевого порога (spread = 0, такой PriceLimit не пройдёт валидацию).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Пороги отсортированы по убыванию и покрывают [0, ∞) (последний порог — 0)
2. spread_for не берёт abs() сам: отрицательная величина или NaN → InvalidMagnitudeError
   (+inf допустима и попадает в старший порог)
3. Таблица неизменяема и инициализируется один раз при импорте
"""

import math
from typing import Final


# =============================================================================
# ТАБЛИЦА СПРЕДОВ
# =============================================================================

# (threshold, spread), пороги по убыванию
SPREAD_TABLE: Final[tuple[tuple[float, float], ...]] = (
    (100000.0, 100.0),
    (10000.0, 10.0),
    (1000.0, 1.0),
    (100.0, 0.1),
    (10.0, 0.01),
    (1.0, 0.001),
    (0.1, 0.0001),
    (0.01, 0.00001),
    (0.001, 0.000001),
    (0.0001, 0.0000001),
    (0.0, 0.0),
)

BASIS_POINTS_PER_UNIT: Final[float] = 10000.0


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidMagnitudeError(ValueError):
    """Величина для поиска спреда отрицательна или равна NaN."""


# =============================================================================
# LOOKUP
# =============================================================================


def spread_for(magnitude: float) -> float:
    """
    Спред по умолчанию для заданной величины.

    Просматривает пороги от большего к меньшему и возвращает spread
    первого порога, который <= magnitude. Так как 0 всегда присутствует
    в таблице, функция тотальна на magnitude >= 0.

    Args:
        magnitude: Неотрицательная величина (abs(bid - ask) или abs(bid))

    Returns:
        Спред из таблицы

    Raises:
        InvalidMagnitudeError: Если magnitude < 0 или NaN

    Examples:
        >>> spread_for(101.0)
        0.1
        >>> spread_for(1.0)
        0.001
        >>> spread_for(0.0)
        0.0
    """
    if math.isnan(magnitude):
        raise InvalidMagnitudeError(f"magnitude must be a number, got {magnitude}")
    if magnitude < 0:
        raise InvalidMagnitudeError(
            f"magnitude must be non-negative, got {magnitude} (pass abs() of the value)"
        )

    for threshold, spread in SPREAD_TABLE:
        if threshold <= magnitude:
            return spread

    # Недостижимо: последний порог равен 0
    raise AssertionError("SPREAD_TABLE must end with a zero threshold")


def bps_to_spread(bps: float) -> float:
    """
    Конверсия basis points в абсолютный спред.

    Args:
        bps: Basis points (например, 5 bps)

    Returns:
        Спред (например, 5 bps → 0.0005)
    """
    return bps / BASIS_POINTS_PER_UNIT
