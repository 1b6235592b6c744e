"""
Shared utilities module.

Stateless numeric helpers used by the prepaid and accrual trackers:
currency formatting, lenient number parsing, ID generation and
balance variance.
"""

from .formatters import (
    DEFAULT_CURRENCY_PRECISION,
    format_currency,
    format_percentage,
    parse_number,
)
from .identifiers import ID_SUFFIX_LENGTH, generate_id
from .variance import BALANCE_TOLERANCE, VarianceResult, calculate_variance

__all__ = [
    # Formatters
    "DEFAULT_CURRENCY_PRECISION",
    "format_currency",
    "format_percentage",
    "parse_number",
    # Identifiers
    "ID_SUFFIX_LENGTH",
    "generate_id",
    # Variance
    "BALANCE_TOLERANCE",
    "VarianceResult",
    "calculate_variance",
]
