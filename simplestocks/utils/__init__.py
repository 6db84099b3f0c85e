"""
Utility functions module.

Time Semantics:
- Trade timestamps are always timezone-aware UTC datetimes
- Wall-clock time is only read at the outer boundary (default clock)
- Window bounds are computed from an explicit reference time
"""
