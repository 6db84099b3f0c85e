"""
Trade record model.

Trades are logically immutable facts; nothing may be set after construction.
"""

import math
from dataclasses import dataclass
from datetime import datetime
from numbers import Real

from ..errors import InvalidTradeError
from ..utils.time import get_market_time, is_aware
from .enums import TradeSide
from .instrument import Instrument


@dataclass(frozen=True)
class Trade:
    """A single executed trade against a listed instrument."""
    instrument: Instrument       # Non-owning back-reference
    side: TradeSide
    quantity: int                # Units, > 0
    price: float                 # Currency per unit, >= 0
    timestamp: datetime          # UTC market timestamp

    def __post_init__(self) -> None:
        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int):
            raise InvalidTradeError(
                f"Trade quantity must be an integer, got {self.quantity!r}",
                field="quantity",
                value=self.quantity,
            )
        if self.quantity <= 0:
            raise InvalidTradeError(
                f"Trade quantity must be positive, got {self.quantity}",
                field="quantity",
                value=self.quantity,
            )

        if isinstance(self.price, bool) or not isinstance(self.price, Real):
            raise InvalidTradeError(
                f"Trade price must be a number, got {self.price!r}",
                field="price",
                value=self.price,
            )
        if not math.isfinite(self.price) or self.price < 0:
            raise InvalidTradeError(
                f"Trade price must be finite and non-negative, got {self.price}",
                field="price",
                value=self.price,
            )

        if not isinstance(self.timestamp, datetime) or not is_aware(self.timestamp):
            raise InvalidTradeError(
                "Trade timestamp must be a timezone-aware datetime",
                field="timestamp",
                value=self.timestamp,
            )

        if not isinstance(self.side, TradeSide):
            raise InvalidTradeError(
                f"Trade side must be a TradeSide, got {self.side!r}",
                field="side",
                value=self.side,
            )

    @classmethod
    def now(
        cls,
        instrument: Instrument,
        side: TradeSide,
        quantity: int,
        price: float
    ) -> "Trade":
        """Create a trade stamped with the current wall-clock UTC time.

        This reads get_market_time() directly and ignores any exchange clock.
        """
        return cls(
            instrument=instrument,
            side=side,
            quantity=quantity,
            price=price,
            timestamp=get_market_time(),
        )

    @property
    def symbol(self) -> str:
        """Symbol of the traded instrument."""
        return self.instrument.symbol

    @property
    def value(self) -> float:
        """Traded value, price times quantity."""
        return self.price * self.quantity
