"""
Error classification for the exchange ledger.

All errors are raised synchronously to the immediate caller; nothing in the
ledger retries or degrades silently.
"""

from .exchange import (
    ExchangeError,
    UnknownInstrumentError,
    InvalidTradeError,
    UndefinedRatioError,
    InvalidWindowError,
    InvalidQueryTimeError,
    CatalogError,
)

__all__ = [
    "ExchangeError",
    "UnknownInstrumentError",
    "InvalidTradeError",
    "UndefinedRatioError",
    "InvalidWindowError",
    "InvalidQueryTimeError",
    "CatalogError",
]
