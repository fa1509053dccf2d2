"""
Contract Validation Module

Модуль для валидации JSON контрактов price_producer.
"""

from .validators import (
    ContractValidator,
    PriceLimitValidator,
    ProducerConfigValidator,
    SchemaLoader,
    validate_price_limit,
    validate_producer_config,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "PriceLimitValidator",
    "ProducerConfigValidator",
    # Functions
    "validate_price_limit",
    "validate_producer_config",
]
