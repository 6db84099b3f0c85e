"""
Exchange reporting.

Builds a point-in-time report from the ledger's query operations and renders
it as text.
"""
from .report import ExchangeReport, build_report, format_report, print_report

__all__ = ["ExchangeReport", "build_report", "format_report", "print_report"]
