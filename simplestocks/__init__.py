"""
Simple Stocks - Trade Ledger and Pricing Analytics

A small stock exchange model that records trades against a fixed catalog of
listed instruments and derives pricing analytics from the trade history:
volume-weighted price over a trailing window, the All-Share Index, dividend
yield and P/E ratio.
"""

__version__ = "0.1.0"
__author__ = "Simple Stocks Team"
