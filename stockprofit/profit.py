"""Theoretical max profit from one buy and one later sell over a trading day.

The day is modelled as a run of *spreads*.  A spread opens at a low price and
closes when a strictly lower price shows up or the day ends; at that point the
best profit for the spread is scored and a new spread opens at the current
price.  The day's answer is the best score over all spreads, which may be
negative when prices only fall.

Prices are one per minute since the open, so a position in the series is the
minute a trade would happen at.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from decimal import Decimal, localcontext

from .prices import MAX_VALID_PRICE, check_ceiling, check_series, validate_price

__all__ = ["Spread", "iter_spreads", "compute_max_profit", "find_best_trade"]

log = logging.getLogger(__name__)

_NO_SELL = Decimal("-Infinity")


@dataclass(frozen=True)
class Spread:
    """One scored spread: buy at ``buy_index``, sell at ``sell_index``."""

    buy_index: int
    sell_index: int
    buy_price: Decimal
    sell_price: Decimal

    @property
    def profit(self) -> Decimal:
        sell, buy = self.sell_price, self.buy_price
        # enough digits for the exact difference, whatever the inputs carry
        digits = (
            max(sell.adjusted(), buy.adjusted())
            - min(sell.as_tuple().exponent, buy.as_tuple().exponent)
            + 2
        )
        with localcontext() as ctx:
            ctx.prec = max(ctx.prec, digits)
            return sell - buy


# ──────────────────────────────────────────────────────────────────────────────
#  Spread scan
# ──────────────────────────────────────────────────────────────────────────────
def iter_spreads(prices, *, max_valid_price=MAX_VALID_PRICE) -> Iterator[Spread]:
    """Yield every scored spread of ``prices`` in time order.

    Each price is validated when the scan reaches it, so an invalid sample
    raises :class:`InvalidInputError` from the generator at that minute.
    The series is read once and never modified.
    """
    # container checks happen on the first next(), like the element checks
    ceiling = check_ceiling(max_valid_price)
    last = check_series(prices) - 1

    samples = iter(prices)
    buy = validate_price(next(samples), 0, max_valid_price=ceiling)
    buy_index = 0
    sell, sell_index = _NO_SELL, None

    for i, value in enumerate(samples, start=1):
        price = validate_price(value, i, max_valid_price=ceiling)

        if price < buy or i == last:
            # the closing price still counts as a sell for this spread
            if price > sell:
                sell, sell_index = price, i
            spread = Spread(buy_index, sell_index, buy, sell)
            if log.isEnabledFor(logging.DEBUG):
                log.debug(
                    "Spread closed minutes=%d-%d buy=%s sell=%s profit=%s",
                    buy_index, i, buy, sell, spread.profit,
                )
            yield spread

            buy, buy_index = price, i
            sell, sell_index = _NO_SELL, None
        elif price > sell:
            # price >= buy here, so the buy side stays put
            sell, sell_index = price, i


# ──────────────────────────────────────────────────────────────────────────────
#  Public operations
# ──────────────────────────────────────────────────────────────────────────────
def find_best_trade(prices, *, max_valid_price=MAX_VALID_PRICE) -> Spread:
    """Return the spread with the highest profit (earliest one on ties).

    The whole series is validated before anything is returned.
    """
    best = None
    for spread in iter_spreads(prices, max_valid_price=max_valid_price):
        if best is None or spread.profit > best.profit:
            best = spread

    log.debug(
        "Best trade over %d prices: buy minute %d, sell minute %d, profit %s",
        len(prices), best.buy_index, best.sell_index, best.profit,
    )
    return best


def compute_max_profit(prices, *, max_valid_price=MAX_VALID_PRICE) -> Decimal:
    """Return the theoretical max profit (or least loss) for the day.

    Parameters
    ----------
    prices : sequence of numbers or pandas.Series
        Dense prices, one per minute since trading began.  At least two
        values, each greater than zero and below ``max_valid_price``.
    max_valid_price : Decimal, optional
        Exclusive price ceiling, by default ``MAX_VALID_PRICE``.

    Returns
    -------
    Decimal
        ``sell - buy`` for the best buy-before-sell pair.  Negative when
        prices never rise.

    Raises
    ------
    InvalidInputError
        If ``prices`` is missing, shorter than two values, or holds any
        value outside ``(0, max_valid_price)``.
    """
    max_profit = _NO_SELL
    for spread in iter_spreads(prices, max_valid_price=max_valid_price):
        max_profit = max(max_profit, spread.profit)

    log.debug("Max profit over %d prices: %s", len(prices), max_profit)
    return max_profit
