"""Dividend yield and P/E valuation by instrument category"""

from .dividend import current_dividend, dividend_yield, pe_ratio

__all__ = [
    "current_dividend",
    "dividend_yield",
    "pe_ratio",
]
