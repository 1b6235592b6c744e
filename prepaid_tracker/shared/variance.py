"""
Balance variance between a tracker balance and the balance sheet.

The 0.01 tolerance is shared with downstream reconciliation reports and
must not change.
"""

from dataclasses import dataclass
from typing import Any, Final

import structlog

from .formatters import format_percentage

logger = structlog.get_logger()

BALANCE_TOLERANCE: Final[float] = 0.01


@dataclass(frozen=True)
class VarianceResult:
    """Variance of a prepaid (or accrual) balance against the balance sheet."""

    variance: float
    is_balanced: bool
    percentage: float

    @property
    def percentage_display(self) -> str:
        """Percentage formatted for the reconciliation summary (e.g. "+1.0%")."""
        return format_percentage(self.percentage)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary using the keys reporting consumers expect."""
        return {
            "variance": self.variance,
            "isBalanced": self.is_balanced,
            "percentage": self.percentage,
        }


def calculate_variance(
    prepaid_balance: float, balance_sheet_amount: float
) -> VarianceResult:
    """
    Calculate variance between a prepaid balance and the balance sheet amount.

    Args:
        prepaid_balance: Balance computed from the tracker
        balance_sheet_amount: Reference amount from the balance sheet

    Returns:
        VarianceResult with the signed variance, whether it is within
        BALANCE_TOLERANCE, and the variance as a percentage of the balance
        sheet amount (0 when that amount is 0)

    Examples:
        >>> calculate_variance(101, 100)
        VarianceResult(variance=1, is_balanced=False, percentage=1.0)
        >>> calculate_variance(50, 0)
        VarianceResult(variance=50, is_balanced=False, percentage=0)
    """
    variance = prepaid_balance - balance_sheet_amount
    is_balanced = abs(variance) < BALANCE_TOLERANCE

    if balance_sheet_amount != 0:
        percentage = (variance / balance_sheet_amount) * 100
    else:
        logger.debug(
            "variance_zero_reference",
            prepaid_balance=prepaid_balance,
            variance=variance,
        )
        percentage = 0

    return VarianceResult(
        variance=variance,
        is_balanced=is_balanced,
        percentage=percentage,
    )
