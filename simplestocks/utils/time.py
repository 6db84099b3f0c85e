"""
Time utilities for trade timestamps and trailing windows.

The ledger never reads the wall clock directly; it asks an injected clock,
which defaults to get_market_time here.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional


def get_market_time(market_ts: Optional[datetime] = None) -> datetime:
    """
    Get the current market time, preferring an explicit timestamp.

    Args:
        market_ts: Optional market timestamp supplied by the caller

    Returns:
        Market time as UTC datetime, falling back to wall-clock time
    """
    if market_ts is not None:
        return market_ts

    return datetime.now(timezone.utc)


def is_aware(ts: datetime) -> bool:
    """Return True if the datetime carries a usable UTC offset."""
    return ts.tzinfo is not None and ts.tzinfo.utcoffset(ts) is not None


def window_start(reference: datetime, window_minutes: float) -> datetime:
    """
    Calculate the inclusive lower bound of a trailing window.

    Args:
        reference: End of the window (usually "now")
        window_minutes: Window length in minutes

    Returns:
        reference minus window_minutes, clamped to the earliest
        representable time when the window reaches past it
    """
    try:
        return reference - timedelta(minutes=window_minutes)
    except OverflowError:
        return datetime.min.replace(tzinfo=timezone.utc)


def format_market_time(market_ts: datetime) -> str:
    """
    Format market timestamp for reports and logging.

    Args:
        market_ts: Market timestamp to format

    Returns:
        ISO8601 formatted string
    """
    return market_ts.isoformat()
