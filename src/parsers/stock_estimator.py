"""Suggested reorder threshold for newly extracted items."""

import math

MIN_STOCK_RATIO = 0.2


def estimate_min_stock(quantity: float) -> int:
    """Return max(1, floor(20% of the purchased quantity))."""
    return max(1, math.floor(quantity * MIN_STOCK_RATIO))
