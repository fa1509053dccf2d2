"""
TickUpdater — применение тика к котировке

Тик = прибавление знакового delta к одной стороне котировки (bid или ask).

Режимы:
- Без PriceLimit: delta просто прибавляется к выбранной стороне, без коррекций.
- С PriceLimit: изменённая сторона ограничивается диапазоном, затем
  противоположная сторона восстанавливает порядок bid < ask и спред.

Коррекция для bid (для ask — симметрично):
    bid += delta
    bid < min  → bid = min
    bid > max  → bid = max - spread   (место для ask внутри диапазона)
    bid >= ask            → ask = bid + spread
    ask - bid > spread    → ask = bid + spread
    иначе                 → ask не меняется

ВАЖНО: гарантируется bid < ask после тика с PriceLimit. Неизменённая сторона
может выйти за [min_inclusive, max_inclusive] при восстановлении спреда.
Ошибок функция не порождает.
"""

from typing import MutableSequence, Optional

from price_producer.core.domain.price_limit import PriceLimit, Quote


# =============================================================================
# NEXT PRICE
# =============================================================================


def next_price(
    quote: Quote,
    delta: float,
    apply_to_bid: bool,
    limit: Optional[PriceLimit] = None,
) -> Quote:
    """
    Следующая котировка после тика.

    Args:
        quote: Текущая котировка
        delta: Знаковое изменение (положительное или отрицательное)
        apply_to_bid: True → delta применяется к bid, False → к ask
        limit: Конверт ограничений (None → без коррекций)

    Returns:
        Новая котировка (исходная не изменяется)
    """
    bid = quote.bid
    ask = quote.ask

    if limit is None:
        if apply_to_bid:
            return Quote(bid=bid + delta, ask=ask)
        return Quote(bid=bid, ask=ask + delta)

    spread = limit.spread

    if apply_to_bid:
        bid += delta
        if bid < limit.min_inclusive:
            bid = limit.min_inclusive
        elif bid > limit.max_inclusive:
            bid = limit.max_inclusive - spread

        # bid догнал ask или разрыв шире спреда: ask = bid + spread
        if bid >= ask or ask - bid > spread:
            ask = bid + spread
    else:
        ask += delta
        if ask < limit.min_inclusive:
            ask = limit.min_inclusive + spread
        elif ask > limit.max_inclusive:
            ask = limit.max_inclusive

        # ask опустился до bid или разрыв шире спреда: bid = ask - spread
        if bid >= ask or ask - bid > spread:
            bid = ask - spread

    return Quote(bid=bid, ask=ask)


def apply_tick(
    rates: MutableSequence[float],
    delta: float,
    apply_to_bid: bool,
    limit: Optional[PriceLimit] = None,
) -> None:
    """
    Тик для изменяемого буфера [bid, ask] (изменение на месте).

    Args:
        rates: Буфер, rates[0] — bid, rates[1] — ask
        delta: Знаковое изменение
        apply_to_bid: True → delta применяется к bid, False → к ask
        limit: Конверт ограничений (None → без коррекций)

    Raises:
        ValueError: Если в буфере не два элемента
    """
    updated = next_price(Quote.from_rates(rates), delta, apply_to_bid, limit)
    rates[0] = updated.bid
    rates[1] = updated.ask
