"""
LimitFactory — создание PriceLimit из неполных параметров

Единая точка входа set_price_limit с опциональными параметрами:
недостающие spread/ask/диапазон заполняются значениями по умолчанию,
после чего выполняется единственная проверка инвариантов.

Правила заполнения:
- ask не задан:     spread = spread_for(abs(bid)) (если не задан), ask = bid + spread
- spread не задан:  spread = spread_for(abs(bid - ask))
- min не задан:     min(bid, ask) * (1 - margin_pct)
- max не задан:     max(bid, ask) * (1 + margin_pct)

Невалидный конверт → None (без исключений), диагностика — в логгер.
"""

import logging
from typing import Final, Optional

from price_producer.core.domain.limits import validate_limits
from price_producer.core.domain.price_limit import PriceLimit
from price_producer.core.math.numerical_safeguards import is_valid_float
from price_producer.core.math.spread_table import bps_to_spread, spread_for


logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

# Допуск вокруг bid/ask при неявном диапазоне (10%)
DEFAULT_MARGIN_PCT: Final[float] = 0.10


# =============================================================================
# FACTORY
# =============================================================================


def set_price_limit(
    bid: float,
    ask: Optional[float] = None,
    spread: Optional[float] = None,
    min_inclusive: Optional[float] = None,
    max_inclusive: Optional[float] = None,
    *,
    spread_bps: Optional[float] = None,
    margin_pct: float = DEFAULT_MARGIN_PCT,
    log: Optional[logging.Logger] = None,
) -> Optional[PriceLimit]:
    """
    Создание PriceLimit с заполнением недостающих параметров.

    Args:
        bid: Начальный bid
        ask: Начальный ask (None → bid + spread)
        spread: Максимальный спред (None → из SpreadTable)
        min_inclusive: Нижняя граница (None → min(bid, ask) * (1 - margin_pct))
        max_inclusive: Верхняя граница (None → max(bid, ask) * (1 + margin_pct))
        spread_bps: Альтернатива spread в basis points
        margin_pct: Допуск для неявного диапазона, в долях
        log: Приёмник диагностики (по умолчанию — логгер модуля)

    Returns:
        PriceLimit или None, если инварианты нарушены

    Raises:
        ValueError: Если заданы одновременно spread и spread_bps,
            или margin_pct вне [0, 1)
    """
    sink = log or logger

    if spread is not None and spread_bps is not None:
        raise ValueError("Pass either spread or spread_bps, not both")
    if not (is_valid_float(margin_pct) and 0.0 <= margin_pct < 1.0):
        raise ValueError(f"margin_pct must be in [0, 1), got {margin_pct}")

    if spread_bps is not None:
        spread = bps_to_spread(spread_bps)

    # Отрицательные/NaN цены не должны ронять lookup — их отсечёт валидация
    if ask is None:
        if spread is None:
            spread = _default_spread(abs(bid))
        ask = bid + spread
    elif spread is None:
        spread = _default_spread(abs(bid - ask))

    if min_inclusive is None:
        min_inclusive = min(bid, ask) * (1.0 - margin_pct)
    if max_inclusive is None:
        max_inclusive = max(bid, ask) * (1.0 + margin_pct)

    if not validate_limits(bid, ask, spread, min_inclusive, max_inclusive, log=sink):
        return None

    price_limit = PriceLimit(
        bid=bid,
        ask=ask,
        spread=spread,
        min_inclusive=min_inclusive,
        max_inclusive=max_inclusive,
    )
    sink.debug("Price limit created: %s", price_limit)
    return price_limit


def _default_spread(magnitude: float) -> float:
    # NaN/Inf: пропускаем дальше как NaN, check_limits вернёт NON_FINITE
    if not is_valid_float(magnitude):
        return float("nan")
    return spread_for(magnitude)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def set_price_limit_for_bid(
    bid: float, log: Optional[logging.Logger] = None
) -> Optional[PriceLimit]:
    """PriceLimit по одному bid: spread из таблицы по abs(bid), ask = bid + spread."""
    return set_price_limit(bid, log=log)


def set_price_limit_for_bid_ask(
    bid: float, ask: float, log: Optional[logging.Logger] = None
) -> Optional[PriceLimit]:
    """PriceLimit по bid/ask: spread из таблицы по abs(bid - ask)."""
    return set_price_limit(bid, ask, log=log)


def set_price_limit_for_bid_ask_spread(
    bid: float, ask: float, spread: float, log: Optional[logging.Logger] = None
) -> Optional[PriceLimit]:
    """PriceLimit по bid/ask/spread: диапазон ±DEFAULT_MARGIN_PCT вокруг bid/ask."""
    return set_price_limit(bid, ask, spread, log=log)


def set_price_limit_for_bid_ask_spread_range(
    bid: float,
    ask: float,
    spread: float,
    min_inclusive: float,
    max_inclusive: float,
    log: Optional[logging.Logger] = None,
) -> Optional[PriceLimit]:
    """PriceLimit по всем параметрам — только проверка инвариантов."""
    return set_price_limit(bid, ask, spread, min_inclusive, max_inclusive, log=log)
