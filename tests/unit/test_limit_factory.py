"""
Юнит-тесты для LimitFactory

Проверяет:
1. Заполнение spread/ask из SpreadTable
2. Неявный диапазон ±margin_pct
3. None (без исключений) при нарушенных инвариантах
4. Ошибки программирования: spread вместе с spread_bps, margin_pct вне [0, 1)
5. Диагностику невалидного конверта
"""

import logging
import math

import pytest

from price_producer.core.domain import PriceLimit
from price_producer.pricer import (
    DEFAULT_MARGIN_PCT,
    set_price_limit,
    set_price_limit_for_bid,
    set_price_limit_for_bid_ask,
    set_price_limit_for_bid_ask_spread,
    set_price_limit_for_bid_ask_spread_range,
)


class TestForBid:
    """PriceLimit по одному bid"""

    def test_returns_price_limit(self) -> None:
        limit = set_price_limit_for_bid(10.2)
        assert isinstance(limit, PriceLimit)

    def test_spread_and_ask_derived(self) -> None:
        limit = set_price_limit_for_bid(10.2)
        assert limit.spread == pytest.approx(0.01, abs=1e-12)
        assert limit.ask == pytest.approx(10.21, abs=1e-12)

    def test_range_derived_from_margin(self) -> None:
        limit = set_price_limit_for_bid(10.2)
        assert limit.min_inclusive == pytest.approx(10.2 * 0.9, abs=1e-12)
        assert limit.max_inclusive == pytest.approx(10.21 * 1.1, abs=1e-12)

    def test_negative_bid_returns_none(self) -> None:
        """Отрицательный bid не роняет lookup спреда, конверт отклоняется"""
        assert set_price_limit_for_bid(-5.0) is None

    def test_tiny_bid_returns_none(self) -> None:
        """Для bid < 0.0001 спред из таблицы равен 0 → конверт невалиден"""
        assert set_price_limit_for_bid(0.00005) is None

    def test_nan_bid_returns_none(self) -> None:
        assert set_price_limit_for_bid(math.nan) is None


class TestForBidAsk:
    """PriceLimit по bid/ask"""

    def test_returns_price_limit(self) -> None:
        limit = set_price_limit_for_bid_ask(10.2, 10.4)
        assert limit is not None
        assert limit.bid == 10.2
        assert limit.ask == 10.4

    def test_spread_from_distance(self) -> None:
        """abs(10.2 - 10.4) = 0.2 попадает в порог 0.1"""
        limit = set_price_limit_for_bid_ask(10.2, 10.4)
        assert limit.spread == pytest.approx(0.0001, abs=1e-12)

    def test_equal_bid_ask_returns_none(self) -> None:
        assert set_price_limit_for_bid_ask(10.2, 10.2) is None

    def test_inverted_bid_ask_returns_none(self) -> None:
        assert set_price_limit_for_bid_ask(10.4, 10.2) is None


class TestForBidAskSpread:
    """PriceLimit по bid/ask/spread"""

    def test_returns_price_limit(self) -> None:
        limit = set_price_limit_for_bid_ask_spread(10.2, 10.2004, 0.0005)
        assert limit is not None
        assert limit.spread == 0.0005

    def test_percentage_margin(self) -> None:
        limit = set_price_limit_for_bid_ask_spread(100.0, 101.0, 0.5)
        assert DEFAULT_MARGIN_PCT == 0.10
        assert limit.min_inclusive == pytest.approx(90.0, abs=1e-9)
        assert limit.max_inclusive == pytest.approx(111.1, abs=1e-9)

    def test_zero_spread_returns_none(self) -> None:
        assert set_price_limit_for_bid_ask_spread(10.2, 10.2004, 0.0) is None


class TestForBidAskSpreadRange:
    """Каноническая точка входа"""

    def test_valid_limit(self) -> None:
        limit = set_price_limit_for_bid_ask_spread_range(100, 101, 5, 99, 102)
        assert limit == PriceLimit(
            bid=100, ask=101, spread=5, min_inclusive=99, max_inclusive=102
        )

    def test_small_prices_valid(self) -> None:
        assert set_price_limit_for_bid_ask_spread_range(10.2, 10.2004, 0.0005, 9.8, 10.7)

    def test_bid_below_min_returns_none(self) -> None:
        assert set_price_limit_for_bid_ask_spread_range(1.1234, 1.1236, 0.0003, 1.1235, 1.3) is None

    def test_zero_min_returns_none(self) -> None:
        assert set_price_limit_for_bid_ask_spread_range(100, 100.1, 0.1, 0, 102) is None

    def test_spread_below_price_resolution_returns_none(self) -> None:
        assert set_price_limit_for_bid_ask_spread_range(1e16, 1e16 + 2, 0.5, 1.0, 2e16) is None

    def test_failure_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.ERROR, logger="price_producer.pricer.limit_factory"):
            set_price_limit_for_bid_ask_spread_range(100, 100.1, 0.1, 0, 102)
        assert any("range_not_positive" in r.getMessage() for r in caplog.records)

    def test_failure_logged_to_injected_logger(self, caplog: pytest.LogCaptureFixture) -> None:
        sink = logging.getLogger("tests.factory_sink")
        with caplog.at_level(logging.ERROR, logger="tests.factory_sink"):
            set_price_limit_for_bid_ask_spread_range(100, 99, 0.1, 98, 102, log=sink)
        assert [r.name for r in caplog.records] == ["tests.factory_sink"]


class TestCanonicalSetPriceLimit:
    """Единая точка входа с опциональными параметрами"""

    def test_conveniences_match_canonical(self) -> None:
        assert set_price_limit_for_bid(10.2) == set_price_limit(10.2)
        assert set_price_limit_for_bid_ask(10.2, 10.4) == set_price_limit(10.2, 10.4)
        assert set_price_limit_for_bid_ask_spread(10.2, 10.4, 0.3) == set_price_limit(
            10.2, 10.4, 0.3
        )

    def test_spread_bps(self) -> None:
        limit = set_price_limit(10.2, 10.2004, spread_bps=5)
        assert limit.spread == pytest.approx(0.0005, abs=1e-12)

    def test_spread_and_spread_bps_rejected(self) -> None:
        with pytest.raises(ValueError, match="either spread or spread_bps"):
            set_price_limit(10.2, 10.2004, 0.0005, spread_bps=5)

    def test_bid_with_explicit_spread(self) -> None:
        """ask не задан, spread задан: ask = bid + spread"""
        limit = set_price_limit(100.0, spread=0.5)
        assert limit.ask == pytest.approx(100.5)
        assert limit.spread == 0.5

    def test_partial_range(self) -> None:
        """Задан только min: max берётся из margin"""
        limit = set_price_limit(100.0, 101.0, 0.5, min_inclusive=99.0)
        assert limit.min_inclusive == 99.0
        assert limit.max_inclusive == pytest.approx(111.1, abs=1e-9)

    def test_custom_margin(self) -> None:
        limit = set_price_limit(100.0, 101.0, 0.5, margin_pct=0.02)
        assert limit.min_inclusive == pytest.approx(98.0, abs=1e-9)
        assert limit.max_inclusive == pytest.approx(103.02, abs=1e-9)

    def test_zero_margin_keeps_bid_ask_as_bounds(self) -> None:
        limit = set_price_limit(100.0, 101.0, 0.5, margin_pct=0.0)
        assert limit.min_inclusive == 100.0
        assert limit.max_inclusive == 101.0

    def test_invalid_margin_rejected(self) -> None:
        with pytest.raises(ValueError, match="margin_pct"):
            set_price_limit(100.0, 101.0, 0.5, margin_pct=1.0)
        with pytest.raises(ValueError, match="margin_pct"):
            set_price_limit(100.0, 101.0, 0.5, margin_pct=-0.1)

    def test_success_logged_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="price_producer.pricer.limit_factory"):
            set_price_limit(100.0, 101.0, 0.5)
        assert any(r.levelno == logging.DEBUG for r in caplog.records)
        assert not any(r.levelno >= logging.ERROR for r in caplog.records)
