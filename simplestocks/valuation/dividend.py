"""
Dividend yield and P/E ratio calculations.

Formulas by category:
    ORDINARY   dividend = last_dividend
    PREFERRED  dividend = fixed_rate / 100 * par_value

    yield = dividend / price
    P/E   = price / dividend   (0 when dividend is 0)

Floating point precision is not a concern here; plain float maths is used.
"""

import math
from typing import TYPE_CHECKING, Callable

from ..errors import UndefinedRatioError
from ..models.enums import InstrumentCategory

if TYPE_CHECKING:
    from ..models.instrument import Instrument


def _ordinary_dividend(instrument: "Instrument") -> float:
    return float(instrument.last_dividend)


def _preferred_dividend(instrument: "Instrument") -> float:
    if not instrument.has_fixed_rate:
        return 0.0
    return (instrument.fixed_rate / 100) * instrument.par_value


_DIVIDEND_BY_CATEGORY: dict[InstrumentCategory, Callable[["Instrument"], float]] = {
    InstrumentCategory.ORDINARY: _ordinary_dividend,
    InstrumentCategory.PREFERRED: _preferred_dividend,
}


def current_dividend(instrument: "Instrument") -> float:
    """
    Dividend per unit used for yield and P/E.

    Args:
        instrument: Instrument to evaluate

    Returns:
        Last declared dividend (ORDINARY) or fixed-rate dividend on par (PREFERRED)
    """
    return _DIVIDEND_BY_CATEGORY[instrument.category](instrument)


def dividend_yield(instrument: "Instrument", price: float) -> float:
    """
    Calculate dividend yield at a market price.

    Args:
        instrument: Instrument to evaluate
        price: Market price per unit

    Returns:
        Dividend divided by price

    Raises:
        UndefinedRatioError: price is zero, negative or not finite
    """
    if not math.isfinite(price) or price <= 0:
        raise UndefinedRatioError(
            f"Dividend yield for {instrument.symbol} is undefined at price {price}",
            ratio_name="dividend_yield",
            price=price,
            context={"symbol": instrument.symbol},
        )

    return current_dividend(instrument) / price


def pe_ratio(instrument: "Instrument", price: float) -> float:
    """
    Calculate P/E ratio at a market price.

    Args:
        instrument: Instrument to evaluate
        price: Market price per unit

    Returns:
        Price divided by dividend, or 0.0 if the dividend is zero
    """
    dividend = current_dividend(instrument)
    if dividend == 0:
        return 0.0

    return price / dividend
