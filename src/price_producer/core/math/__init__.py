"""
Core math modules для price_producer

Численные примитивы: NaN/Inf проверки и таблица спредов по умолчанию.
"""

# Numerical Safeguards
from price_producer.core.math.numerical_safeguards import (
    all_finite,
    is_valid_float,
)

# Spread Table
from price_producer.core.math.spread_table import (
    BASIS_POINTS_PER_UNIT,
    SPREAD_TABLE,
    InvalidMagnitudeError,
    bps_to_spread,
    spread_for,
)

__all__ = [
    # Numerical Safeguards
    "all_finite",
    "is_valid_float",
    # Spread Table — Constants
    "BASIS_POINTS_PER_UNIT",
    "SPREAD_TABLE",
    # Spread Table — Exceptions
    "InvalidMagnitudeError",
    # Spread Table — Functions
    "bps_to_spread",
    "spread_for",
]
