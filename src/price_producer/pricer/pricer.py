"""Pricer — фасад над LimitFactory и TickUpdater.

Объединяет создание PriceLimit (с настраиваемым допуском диапазона
и логгером диагностики) и применение тиков, включая поток тиков
для консольного драйвера.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, MutableSequence, Optional

from price_producer.core.domain.price_limit import PriceLimit, Quote
from price_producer.pricer import limit_factory, tick_updater
from price_producer.pricer.limit_factory import DEFAULT_MARGIN_PCT


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class PricerConfig:
    """Конфигурация Pricer.

    margin_pct — допуск вокруг bid/ask, когда диапазон не задан явно.
    logger_name — имя логгера, в который пишется диагностика невалидных конвертов.
    """

    margin_pct: float = DEFAULT_MARGIN_PCT
    logger_name: str = "price_producer.pricer"

    def __post_init__(self) -> None:
        if not 0.0 <= self.margin_pct < 1.0:
            raise ValueError(f"margin_pct must be in [0, 1), got {self.margin_pct}")


# =============================================================================
# PRICER
# =============================================================================


class Pricer:
    """Создание PriceLimit и генерация следующих котировок.

    Не хранит изменяемого состояния: все методы — чистые функции входов
    и конфигурации, котировка и конверт принадлежат вызывающему.
    """

    def __init__(self, config: Optional[PricerConfig] = None):
        """
        Args:
            config: конфигурация (по умолчанию PricerConfig())
        """
        self.config = config or PricerConfig()
        self._logger = logging.getLogger(self.config.logger_name)

    # -------------------------------------------------------------------------
    # Setup
    # -------------------------------------------------------------------------

    def set_price_limit(
        self,
        bid: float,
        ask: Optional[float] = None,
        spread: Optional[float] = None,
        min_inclusive: Optional[float] = None,
        max_inclusive: Optional[float] = None,
        *,
        spread_bps: Optional[float] = None,
    ) -> Optional[PriceLimit]:
        """См. limit_factory.set_price_limit; допуск и логгер берутся из конфигурации."""
        return limit_factory.set_price_limit(
            bid,
            ask,
            spread,
            min_inclusive,
            max_inclusive,
            spread_bps=spread_bps,
            margin_pct=self.config.margin_pct,
            log=self._logger,
        )

    def set_price_limit_for_bid(self, bid: float) -> Optional[PriceLimit]:
        return self.set_price_limit(bid)

    def set_price_limit_for_bid_ask(self, bid: float, ask: float) -> Optional[PriceLimit]:
        return self.set_price_limit(bid, ask)

    def set_price_limit_for_bid_ask_spread(
        self, bid: float, ask: float, spread: float
    ) -> Optional[PriceLimit]:
        return self.set_price_limit(bid, ask, spread)

    def set_price_limit_for_bid_ask_spread_range(
        self,
        bid: float,
        ask: float,
        spread: float,
        min_inclusive: float,
        max_inclusive: float,
    ) -> Optional[PriceLimit]:
        return self.set_price_limit(bid, ask, spread, min_inclusive, max_inclusive)

    # -------------------------------------------------------------------------
    # Ticks
    # -------------------------------------------------------------------------

    def next_price(
        self,
        quote: Quote,
        delta: float,
        apply_to_bid: bool,
        limit: Optional[PriceLimit] = None,
    ) -> Quote:
        return tick_updater.next_price(quote, delta, apply_to_bid, limit)

    def apply_tick(
        self,
        rates: MutableSequence[float],
        delta: float,
        apply_to_bid: bool,
        limit: Optional[PriceLimit] = None,
    ) -> None:
        tick_updater.apply_tick(rates, delta, apply_to_bid, limit)

    def produce_ticks(
        self,
        quote: Quote,
        deltas: Iterable[float],
        sides: Iterable[bool],
        limit: Optional[PriceLimit] = None,
    ) -> Iterator[Quote]:
        """Поток котировок для пар (delta, apply_to_bid).

        Останавливается на более коротком из deltas/sides.

        Args:
            quote: начальная котировка (в поток не попадает)
            deltas: знаковые изменения
            sides: True → к bid, False → к ask
            limit: конверт ограничений

        Yields:
            Котировку после каждого тика
        """
        current = quote
        for delta, apply_to_bid in zip(deltas, sides):
            current = tick_updater.next_price(current, delta, apply_to_bid, limit)
            self._logger.debug(
                "Tick %+.8f to %s -> bid=%s ask=%s",
                delta,
                "bid" if apply_to_bid else "ask",
                current.bid,
                current.ask,
            )
            yield current
