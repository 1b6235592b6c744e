"""
Stateless numeric helpers for the prepaid and accrual trackers.
"""

from .shared import (
    BALANCE_TOLERANCE,
    VarianceResult,
    calculate_variance,
    format_currency,
    format_percentage,
    generate_id,
    parse_number,
)

__version__ = "0.1.0"

__all__ = [
    "BALANCE_TOLERANCE",
    "VarianceResult",
    "calculate_variance",
    "format_currency",
    "format_percentage",
    "generate_id",
    "parse_number",
]
