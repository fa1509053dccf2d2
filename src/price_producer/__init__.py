"""
price_producer — synthetic bid/ask quote generator.

Derives and validates a PriceLimit (the legal envelope for a quote) from
partial inputs, and applies signed perturbations to one side of a quote
while restoring the envelope's invariants.
"""

from price_producer.core.domain import (
    LimitCheckResult,
    LimitViolation,
    PriceLimit,
    Quote,
    check_limits,
    validate_limits,
)
from price_producer.core.math import InvalidMagnitudeError, bps_to_spread, spread_for
from price_producer.pricer import (
    DEFAULT_MARGIN_PCT,
    Pricer,
    PricerConfig,
    apply_tick,
    next_price,
    set_price_limit,
    set_price_limit_for_bid,
    set_price_limit_for_bid_ask,
    set_price_limit_for_bid_ask_spread,
    set_price_limit_for_bid_ask_spread_range,
)

__version__ = "1.0.0"

__all__ = [
    # Domain
    "LimitCheckResult",
    "LimitViolation",
    "PriceLimit",
    "Quote",
    "check_limits",
    "validate_limits",
    # Spread table
    "InvalidMagnitudeError",
    "bps_to_spread",
    "spread_for",
    # Pricer
    "DEFAULT_MARGIN_PCT",
    "Pricer",
    "PricerConfig",
    "apply_tick",
    "next_price",
    "set_price_limit",
    "set_price_limit_for_bid",
    "set_price_limit_for_bid_ask",
    "set_price_limit_for_bid_ask_spread",
    "set_price_limit_for_bid_ask_spread_range",
]
