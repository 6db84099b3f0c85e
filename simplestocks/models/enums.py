"""Enumerations shared by instruments, trades and valuation."""

from enum import Enum


class InstrumentCategory(str, Enum):
    """Dividend model of a listed instrument."""
    ORDINARY = "ordinary"
    PREFERRED = "preferred"


class TradeSide(str, Enum):
    """Direction of a recorded trade."""
    BUY = "buy"
    SELL = "sell"
