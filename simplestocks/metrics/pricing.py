"""Volume-weighted price and All-Share Index calculations"""

import math
from collections.abc import Iterable
from datetime import datetime

from ..models.trade import Trade


def trades_since(trades: Iterable[Trade], bound: datetime) -> list[Trade]:
    """
    Select trades at or after a time bound.

    Args:
        trades: Trade history in any order
        bound: Inclusive lower timestamp bound

    Returns:
        Trades with timestamp >= bound, in their original order
    """
    return [t for t in trades if t.timestamp >= bound]


def calculate_volume_weighted_price(trades: Iterable[Trade]) -> float:
    """
    Calculate Volume Weighted Price

    VWP = sum(price * quantity) / sum(quantity)

    Args:
        trades: Trades to aggregate (already filtered to the window)

    Returns:
        Volume weighted price, or 0.0 if no units were traded
    """
    total_value = 0.0
    total_quantity = 0

    for trade in trades:
        total_value += trade.price * trade.quantity
        total_quantity += trade.quantity

    if total_quantity <= 0:
        return 0.0

    return total_value / total_quantity


def calculate_geometric_mean(prices: Iterable[float]) -> float:
    """
    Calculate the geometric mean of a set of prices.

    GM = (p1 * p2 * ... * pn) ^ (1/n)

    Computed in log space so large catalogs do not overflow the product.

    Args:
        prices: Non-negative prices

    Returns:
        Geometric mean, 0.0 for an empty set or if any price is 0
    """
    values = list(prices)
    if not values:
        return 0.0

    if any(p == 0 for p in values):
        return 0.0

    log_sum = math.fsum(math.log(p) for p in values)
    return math.exp(log_sum / len(values))
