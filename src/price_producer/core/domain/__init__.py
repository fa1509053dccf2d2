"""
Domain models and value objects.

Contains the quote envelope (PriceLimit), the Quote record and the
invariant check that guards PriceLimit construction.
"""

from price_producer.core.domain.limits import (
    LimitCheckResult,
    LimitViolation,
    check_limits,
    validate_limits,
)
from price_producer.core.domain.price_limit import PriceLimit, Quote

__all__ = [
    # Limits
    "LimitCheckResult",
    "LimitViolation",
    "check_limits",
    "validate_limits",
    # Models
    "PriceLimit",
    "Quote",
]
