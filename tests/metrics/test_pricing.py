"""Tests for volume weighted price and geometric mean calculations"""

import itertools
import math
from datetime import timedelta

import pytest

from simplestocks.metrics.pricing import (
    calculate_geometric_mean,
    calculate_volume_weighted_price,
    trades_since,
)
from simplestocks.models.enums import TradeSide
from simplestocks.models.trade import Trade


def make_trades(instrument, t0, specs):
    """Build trades from (price, quantity, seconds offset) tuples."""
    return [
        Trade(instrument, TradeSide.BUY, qty, price, t0 + timedelta(seconds=offset))
        for price, qty, offset in specs
    ]


class TestVolumeWeightedPrice:
    """Test volume weighted price aggregation"""

    def test_single_trade(self, ale, t0):
        trades = make_trades(ale, t0, [(100.0, 10, 0)])
        assert calculate_volume_weighted_price(trades) == 100.0

    def test_weighted_by_quantity(self, ale, t0):
        trades = make_trades(ale, t0, [(100.0, 10, 0), (1000.0, 10, 1), (1000.0, 11, 2), (100.0, 11, 3)])
        # (1000 + 10000 + 11000 + 1100) / 42
        assert calculate_volume_weighted_price(trades) == pytest.approx(550.0)

    def test_empty_returns_zero(self):
        assert calculate_volume_weighted_price([]) == 0.0

    def test_zero_priced_trades(self, ale, t0):
        trades = make_trades(ale, t0, [(0.0, 5, 0), (0.0, 7, 1)])
        assert calculate_volume_weighted_price(trades) == 0.0

    def test_order_invariant(self, ale, t0):
        trades = make_trades(ale, t0, [(10.0, 3, 0), (25.5, 8, 1), (7.25, 1, 2), (100.0, 4, 3)])
        expected = calculate_volume_weighted_price(trades)

        for perm in itertools.permutations(trades):
            assert calculate_volume_weighted_price(perm) == pytest.approx(expected)

    def test_accepts_generator(self, ale, t0):
        trades = make_trades(ale, t0, [(2.0, 1, 0), (4.0, 1, 1)])
        assert calculate_volume_weighted_price(t for t in trades) == 3.0


class TestTradesSince:
    """Test trailing window selection"""

    def test_bound_is_inclusive(self, ale, t0):
        trades = make_trades(ale, t0, [(1.0, 1, -1), (2.0, 1, 0), (3.0, 1, 1)])
        selected = trades_since(trades, t0)

        assert [t.price for t in selected] == [2.0, 3.0]

    def test_preserves_order(self, ale, t0):
        trades = make_trades(ale, t0, [(3.0, 1, 5), (1.0, 1, 1), (2.0, 1, 3)])
        selected = trades_since(trades, t0)

        assert [t.price for t in selected] == [3.0, 1.0, 2.0]

    def test_nothing_in_window(self, ale, t0):
        trades = make_trades(ale, t0, [(1.0, 1, -60)])
        assert trades_since(trades, t0) == []


class TestGeometricMean:
    """Test geometric mean for the All-Share Index"""

    def test_empty_returns_zero(self):
        assert calculate_geometric_mean([]) == 0.0

    def test_single_price(self):
        assert calculate_geometric_mean([42.0]) == pytest.approx(42.0)

    def test_two_prices(self):
        assert calculate_geometric_mean([10.0, 20.0]) == pytest.approx(math.sqrt(200))

    def test_matches_product_formula(self):
        prices = [100.0, 20.0, 200.0, 200.0, 2000.0]
        expected = math.prod(prices) ** (1 / len(prices))
        assert calculate_geometric_mean(prices) == pytest.approx(expected)

    def test_zero_price_zeroes_index(self):
        assert calculate_geometric_mean([10.0, 0.0, 30.0]) == 0.0

    def test_large_catalog_does_not_overflow(self):
        prices = [1e300] * 10
        assert calculate_geometric_mean(prices) == pytest.approx(1e300)
