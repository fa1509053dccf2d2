"""
LimitValidator — проверка инвариантов PriceLimit

Чистая функция проверки кортежа (bid, ask, spread, min_inclusive, max_inclusive).
Проверки выполняются по порядку, до первого нарушения:

0. Все значения конечны (не NaN/Inf)
1. spread > 0
2. min_inclusive > 0 и max_inclusive > 0
3. min_inclusive < max_inclusive
4. bid > 0 и ask > 0
5. bid < ask (строго)
6. bid и ask лежат в [min_inclusive, max_inclusive]
7. spread различим на уровне max_inclusive: spread >= ulp(max_inclusive),
   иначе bid + spread == bid и порядок bid < ask после тика не восстановить

Результат структурированный: какое именно условие нарушено и с какими значениями.
Логирование — ответственность validate_limits, check_limits побочных эффектов не имеет.
"""

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from price_producer.core.math.numerical_safeguards import all_finite


logger = logging.getLogger(__name__)


# =============================================================================
# ENUMS
# =============================================================================


class LimitViolation(str, Enum):
    """Нарушенный инвариант PriceLimit"""

    NON_FINITE = "non_finite"
    SPREAD_NOT_POSITIVE = "spread_not_positive"
    RANGE_NOT_POSITIVE = "range_not_positive"
    RANGE_INVERTED = "range_inverted"
    PRICE_NOT_POSITIVE = "price_not_positive"
    BID_NOT_BELOW_ASK = "bid_not_below_ask"
    PRICE_OUT_OF_RANGE = "price_out_of_range"


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class LimitCheckResult:
    """Результат проверки инвариантов PriceLimit."""

    is_valid: bool
    violation: Optional[LimitViolation]

    # Диагностика
    details: str

    def __bool__(self) -> bool:
        return self.is_valid


def _failed(violation: LimitViolation, details: str) -> LimitCheckResult:
    return LimitCheckResult(is_valid=False, violation=violation, details=details)


# =============================================================================
# VALIDATION
# =============================================================================


def check_limits(
    bid: float,
    ask: float,
    spread: float,
    min_inclusive: float,
    max_inclusive: float,
) -> LimitCheckResult:
    """
    Проверка инвариантов PriceLimit без побочных эффектов.

    Все сравнения записаны в позитивной форме ("условие выполнено"),
    поэтому NaN не может случайно пройти проверку.

    Args:
        bid: Начальный bid
        ask: Начальный ask
        spread: Максимальное расстояние между bid и ask
        min_inclusive: Нижняя граница диапазона (включительно)
        max_inclusive: Верхняя граница диапазона (включительно)

    Returns:
        LimitCheckResult с is_valid=True или первым нарушенным инвариантом
    """
    if not all_finite((bid, ask, spread, min_inclusive, max_inclusive)):
        return _failed(
            LimitViolation.NON_FINITE,
            f"All values must be finite. Bid: {bid}, Ask: {ask}, Spread: {spread}, "
            f"MinInclusive: {min_inclusive}, MaxInclusive: {max_inclusive}",
        )

    if not spread > 0:
        return _failed(
            LimitViolation.SPREAD_NOT_POSITIVE,
            f"Spread must be greater than 0. Spread: {spread}",
        )

    if not (min_inclusive > 0 and max_inclusive > 0):
        return _failed(
            LimitViolation.RANGE_NOT_POSITIVE,
            f"MinInclusive and MaxInclusive must be greater than 0. "
            f"MinInclusive: {min_inclusive}, MaxInclusive: {max_inclusive}",
        )

    if not min_inclusive < max_inclusive:
        return _failed(
            LimitViolation.RANGE_INVERTED,
            f"MinInclusive must be less than MaxInclusive. "
            f"MinInclusive: {min_inclusive}, MaxInclusive: {max_inclusive}",
        )

    if not (bid > 0 and ask > 0):
        return _failed(
            LimitViolation.PRICE_NOT_POSITIVE,
            f"Bid and Ask must be greater than 0. Bid: {bid}, Ask: {ask}",
        )

    if not bid < ask:
        return _failed(
            LimitViolation.BID_NOT_BELOW_ASK,
            f"Bid must be less than Ask. Bid: {bid}, Ask: {ask}",
        )

    if not (
        min_inclusive <= bid <= max_inclusive
        and min_inclusive <= ask <= max_inclusive
    ):
        return _failed(
            LimitViolation.PRICE_OUT_OF_RANGE,
            f"Bid and Ask must be within the range. Bid: {bid}, Ask: {ask}, "
            f"MinInclusive: {min_inclusive}, MaxInclusive: {max_inclusive}",
        )

    if not spread >= math.ulp(max_inclusive):
        return _failed(
            LimitViolation.SPREAD_NOT_POSITIVE,
            f"Spread is below float resolution at the price level. "
            f"Spread: {spread}, MaxInclusive: {max_inclusive}",
        )

    return LimitCheckResult(
        is_valid=True,
        violation=None,
        details=(
            f"Limits valid: bid={bid}, ask={ask}, spread={spread}, "
            f"range=[{min_inclusive}, {max_inclusive}]"
        ),
    )


def validate_limits(
    bid: float,
    ask: float,
    spread: float,
    min_inclusive: float,
    max_inclusive: float,
    log: Optional[logging.Logger] = None,
) -> bool:
    """
    Проверка инвариантов с записью диагностики при нарушении.

    Args:
        bid, ask, spread, min_inclusive, max_inclusive: см. check_limits
        log: Приёмник диагностики (по умолчанию — логгер модуля)

    Returns:
        True только если все инварианты выполнены
    """
    result = check_limits(bid, ask, spread, min_inclusive, max_inclusive)
    if not result.is_valid:
        (log or logger).error(
            "Invalid price limit (%s): %s", result.violation.value, result.details
        )
    return result.is_valid