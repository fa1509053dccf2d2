"""
Pricer — создание PriceLimit и генерация следующих котировок.
"""

from price_producer.pricer.limit_factory import (
    DEFAULT_MARGIN_PCT,
    set_price_limit,
    set_price_limit_for_bid,
    set_price_limit_for_bid_ask,
    set_price_limit_for_bid_ask_spread,
    set_price_limit_for_bid_ask_spread_range,
)
from price_producer.pricer.pricer import Pricer, PricerConfig
from price_producer.pricer.tick_updater import apply_tick, next_price

__all__ = [
    # LimitFactory
    "DEFAULT_MARGIN_PCT",
    "set_price_limit",
    "set_price_limit_for_bid",
    "set_price_limit_for_bid_ask",
    "set_price_limit_for_bid_ask_spread",
    "set_price_limit_for_bid_ask_spread_range",
    # TickUpdater
    "apply_tick",
    "next_price",
    # Facade
    "Pricer",
    "PricerConfig",
]
