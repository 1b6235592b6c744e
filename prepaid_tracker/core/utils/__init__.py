"""
Core utility functions for the prepaid tracker.
"""

from .date_utils import DateUtils, MonthColumn, utcnow

__all__ = [
    "DateUtils",
    "MonthColumn",
    "utcnow",
]
