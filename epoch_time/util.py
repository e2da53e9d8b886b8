"""Utility constants for epoch-time.

Time unit constants represent fixed durations in seconds. Months and years
have no fixed length and are deliberately absent here; see
:mod:`epoch_time.arithmetic` for how they are applied.
"""

# Time unit constants (all values in seconds)
SECOND = 1
MINUTE = 60
HOUR = 3600
DAY = 86400
WEEK = 604800

# Epochs are signed 64-bit integers
EPOCH_MIN = -(2**63)
EPOCH_MAX = 2**63 - 1
