"""Pricing analytics over trade history"""

from .pricing import (
    calculate_geometric_mean,
    calculate_volume_weighted_price,
    trades_since,
)

__all__ = [
    "calculate_geometric_mean",
    "calculate_volume_weighted_price",
    "trades_since",
]
