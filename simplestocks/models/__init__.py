"""
Data models module.

Immutable data structures for listed instruments and recorded trades.
Follows functional programming principles with frozen dataclasses.
"""
