"""Stock trading exercises: best profit from one or at most two trades."""

from __future__ import annotations

from itertools import accumulate
from typing import Sequence


def max_profit(prices: Sequence[int]) -> int:
    """Return the best profit from buying once and selling later; 0 if no gain is possible."""
    if not prices:
        return 0
    lowest = prices[0]
    best = 0
    for price in prices[1:]:
        if price < lowest:
            lowest = price
        else:
            best = max(best, price - lowest)
    return best


def max_profit_twice(prices: Sequence[int]) -> int:
    """Return the best total profit from at most two non-overlapping trades."""
    if len(prices) <= 1:
        return 0
    running_min = accumulate(prices, min)
    best_until = list(
        accumulate((price - low for price, low in zip(prices, running_min)), max)
    )
    reversed_prices = list(reversed(prices))
    running_max = accumulate(reversed_prices, max)
    best_from = list(
        accumulate((high - price for price, high in zip(reversed_prices, running_max)), max)
    )
    best_from.reverse()
    return max(0, max(a + b for a, b in zip(best_until, best_from)))