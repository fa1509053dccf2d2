"""
PriceLimit & Quote — доменные модели котировки

Immutable Pydantic модели:
- PriceLimit: проверенный конверт (диапазон + spread), ограничивающий следующие тики
- Quote: пара bid/ask, передаваемая по значению

PriceLimit создаётся фабрикой только после успешной проверки инвариантов.
Повторная проверка в model_validator гарантирует, что прямое создание
с невалидными полями никогда не даёт частично валидный объект.
"""

from typing import Sequence

from pydantic import BaseModel, Field, model_validator

from price_producer.core.domain.limits import check_limits


# =============================================================================
# PRICE LIMIT
# =============================================================================


class PriceLimit(BaseModel):
    """
    Конверт допустимых значений котировки.

    Инварианты (на момент создания):
    - 0 < bid < ask
    - spread > 0
    - 0 < min_inclusive < max_inclusive
    - min_inclusive <= bid, ask <= max_inclusive
    """

    bid: float = Field(..., description="Начальный bid")
    ask: float = Field(..., description="Начальный ask, строго больше bid")
    spread: float = Field(..., description="Максимальное расстояние между bid и ask")
    min_inclusive: float = Field(..., description="Нижняя граница для bid и ask")
    max_inclusive: float = Field(..., description="Верхняя граница для bid и ask")

    model_config = {"frozen": True}  # Immutable

    @model_validator(mode="after")
    def validate_invariants(self) -> "PriceLimit":
        """Проверка всех инвариантов конверта одной функцией (check_limits)"""
        result = check_limits(
            self.bid, self.ask, self.spread, self.min_inclusive, self.max_inclusive
        )
        if not result.is_valid:
            raise ValueError(f"{result.violation.value}: {result.details}")
        return self

    def contains(self, price: float) -> bool:
        """
        Проверка, лежит ли цена в [min_inclusive, max_inclusive].

        Args:
            price: Проверяемая цена

        Returns:
            True если цена в диапазоне
        """
        return self.min_inclusive <= price <= self.max_inclusive


# =============================================================================
# QUOTE
# =============================================================================


class Quote(BaseModel):
    """
    Котировка bid/ask.

    Без ограничений на значения: в режиме без PriceLimit тик может
    увести bid/ask куда угодно, инварианты — забота вызывающего.
    """

    bid: float = Field(..., description="Bid")
    ask: float = Field(..., description="Ask")

    model_config = {"frozen": True}  # Immutable

    @classmethod
    def from_rates(cls, rates: Sequence[float]) -> "Quote":
        """
        Создание из буфера [bid, ask].

        Raises:
            ValueError: Если в буфере не два элемента
        """
        if len(rates) != 2:
            raise ValueError(f"rates must hold exactly [bid, ask], got {len(rates)} values")
        return cls(bid=rates[0], ask=rates[1])

    def as_rates(self) -> list[float]:
        """Буфер [bid, ask]"""
        return [self.bid, self.ask]

    def gap(self) -> float:
        """Текущее расстояние ask - bid"""
        return self.ask - self.bid
