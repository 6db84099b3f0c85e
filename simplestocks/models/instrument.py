"""
Listed instrument model.

Pricing information is not held on the instrument; the exchange derives
prices from its trade history.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING, Optional

from ..valuation.dividend import dividend_yield, pe_ratio
from .enums import InstrumentCategory, TradeSide

if TYPE_CHECKING:
    from .trade import Trade

# Fixed dividend rate sentinel for instruments without a fixed return
NO_FIXED_RATE = -1.0


@dataclass(frozen=True)
class Instrument:
    """A tradable security and its dividend model."""
    symbol: str                                  # Unique key within an exchange
    category: InstrumentCategory
    par_value: int                               # Minor currency units
    last_dividend: int                           # Minor currency units
    fixed_rate: float = NO_FIXED_RATE            # Percent, PREFERRED only

    @property
    def has_fixed_rate(self) -> bool:
        """True when a fixed dividend rate applies."""
        return self.fixed_rate != NO_FIXED_RATE

    def dividend_yield(self, price: float) -> float:
        """Dividend yield at the given market price."""
        return dividend_yield(self, price)

    def pe_ratio(self, price: float) -> float:
        """P/E ratio at the given market price."""
        return pe_ratio(self, price)

    def trade(
        self,
        price: float,
        quantity: int,
        side: TradeSide,
        timestamp: Optional[datetime] = None
    ) -> "Trade":
        """
        Create a trade for this instrument.

        Args:
            price: Price per unit
            quantity: Number of units traded
            side: Buy or sell
            timestamp: Time of trade. When omitted the trade is stamped with
                wall-clock UTC time (get_market_time), not an exchange clock;
                pass a timestamp to keep an injected clock authoritative.

        Returns:
            Validated, immutable Trade
        """
        from .trade import Trade

        if timestamp is None:
            return Trade.now(self, side, quantity, price)
        return Trade(
            instrument=self,
            side=side,
            quantity=quantity,
            price=price,
            timestamp=timestamp,
        )
