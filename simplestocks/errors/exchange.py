"""
Exchange error classifications.

These exceptions separate caller mistakes (unknown symbols, malformed trades,
bad query windows) from undefined analytics such as a yield at zero price.
"""

from typing import Optional, Dict, Any


class ExchangeError(Exception):
    """Base class for all ledger and analytics errors."""
    
    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = True


class UnknownInstrumentError(ExchangeError):
    """Symbol is not present in the instrument catalog."""
    
    def __init__(self, message: str, symbol: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.symbol = symbol


class InvalidTradeError(ExchangeError):
    """Trade fields violate the quantity, price or timestamp invariants."""
    
    def __init__(self, message: str, field: Optional[str] = None, 
                 value: Any = None, **kwargs):
        super().__init__(message, **kwargs)
        self.field = field
        self.value = value


class UndefinedRatioError(ExchangeError):
    """Valuation ratio has no finite value for the given inputs."""
    
    def __init__(self, message: str, ratio_name: Optional[str] = None, 
                 price: Optional[float] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.ratio_name = ratio_name
        self.price = price


class InvalidWindowError(ExchangeError):
    """Trailing window length is not a positive number of minutes."""
    
    def __init__(self, message: str, window_minutes: Any = None, **kwargs):
        super().__init__(message, **kwargs)
        self.window_minutes = window_minutes


class InvalidQueryTimeError(ExchangeError):
    """Query reference time is not a timezone-aware datetime."""
    
    def __init__(self, message: str, as_of: Any = None, **kwargs):
        super().__init__(message, **kwargs)
        self.as_of = as_of


class CatalogError(ExchangeError):
    """Instrument catalog or exchange configuration failed validation."""
    
    def __init__(self, message: str, errors: Optional[list] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.errors = errors or []
        self.recoverable = False
