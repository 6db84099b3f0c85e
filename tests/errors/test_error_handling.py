"""
Error handling tests for the exchange ledger.

Covers the error hierarchy and the explicit failures raised by the ledger in
place of silent nulls, NaNs or infinities.
"""

import math
from datetime import timedelta

import pytest

from simplestocks.errors import (
    CatalogError,
    ExchangeError,
    InvalidQueryTimeError,
    InvalidTradeError,
    InvalidWindowError,
    UndefinedRatioError,
    UnknownInstrumentError,
)


class TestErrorClassification:
    """Test error classification system."""

    def test_exchange_error_base(self):
        error = ExchangeError("base error")
        assert error.recoverable is True
        assert error.context == {}
        assert str(error) == "base error"

    @pytest.mark.parametrize("error", [
        UnknownInstrumentError("missing", symbol="XYZ"),
        InvalidTradeError("bad", field="quantity", value=0),
        UndefinedRatioError("undefined", ratio_name="dividend_yield", price=0.0),
        InvalidWindowError("window", window_minutes=0),
        InvalidQueryTimeError("as_of", as_of="yesterday"),
        CatalogError("catalog", errors=[]),
    ])
    def test_hierarchy(self, error):
        assert isinstance(error, ExchangeError)

    def test_specific_attributes(self):
        assert UnknownInstrumentError("m", symbol="XYZ").symbol == "XYZ"

        trade_error = InvalidTradeError("m", field="price", value=-1, context={"a": 1})
        assert trade_error.field == "price"
        assert trade_error.value == -1
        assert trade_error.context == {"a": 1}

        ratio_error = UndefinedRatioError("m", ratio_name="dividend_yield", price=0.0)
        assert ratio_error.ratio_name == "dividend_yield"
        assert ratio_error.price == 0.0

        assert InvalidWindowError("m", window_minutes=-1).window_minutes == -1
        assert InvalidQueryTimeError("m", as_of="yesterday").as_of == "yesterday"

    def test_catalog_error_unrecoverable(self):
        error = CatalogError("bad catalog")
        assert error.recoverable is False
        assert error.errors == []


class TestLedgerFailures:
    """Ledger operations fail explicitly."""

    @pytest.mark.parametrize("call", [
        lambda se, ts: se.buy("XYZ", 1.0, 1, ts),
        lambda se, ts: se.sell("XYZ", 1.0, 1, ts),
        lambda se, ts: se.volume_weighted_price("XYZ"),
        lambda se, ts: se.dividend_yield("XYZ", 10),
        lambda se, ts: se.pe_ratio("XYZ", 10),
        lambda se, ts: se.trades_for("XYZ"),
        lambda se, ts: se.latest_trade("XYZ"),
    ])
    def test_unknown_instrument(self, exchange, t0, call):
        with pytest.raises(UnknownInstrumentError):
            call(exchange, t0)

    def test_failed_trade_leaves_state_untouched(self, exchange, t0):
        exchange.buy("ALE", 10.0, 5, t0)

        with pytest.raises(InvalidTradeError):
            exchange.buy("ALE", -10.0, 5, t0 + timedelta(seconds=1))

        assert len(exchange.trades_for("ALE")) == 1
        assert exchange.latest_price("ALE") == 10.0

    def test_zero_price_yield_is_explicit(self, exchange):
        with pytest.raises(UndefinedRatioError) as exc_info:
            exchange.dividend_yield("TEA", 0)

        assert exc_info.value.price == 0

    def test_results_are_finite(self, exchange, t0):
        exchange.buy("TEA", 0.0, 5, t0)

        assert math.isfinite(exchange.volume_weighted_price("TEA"))
        assert math.isfinite(exchange.all_share_index())
        assert math.isfinite(exchange.pe_ratio("TEA", 0))
