"""
Date utility functions for the tracker tables.
Builds month column keys ("1/25") and their en-US display labels.
"""

from dataclasses import dataclass
from datetime import UTC, datetime

import structlog

logger = structlog.get_logger()

MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)
MONTH_ABBREVIATIONS = tuple(name[:3] for name in MONTH_NAMES)


def utcnow() -> datetime:
    """Current time in UTC; the default year for month columns comes from here."""
    return datetime.now(UTC)


@dataclass(frozen=True)
class MonthColumn:
    """One month column of a tracker table."""

    key: str
    month: int
    year: int
    display_name: str
    full_name: str


class DateUtils:
    """Utility class for month keys and date labels."""

    @staticmethod
    def generate_month_columns(year: int | None = None) -> list[MonthColumn]:
        """
        Build the twelve month columns for a year.

        Args:
            year: Four-digit year (defaults to the current UTC year)

        Returns:
            Columns keyed "<month>/<yy>", January first
        """
        target_year = year or utcnow().year
        short_year = str(target_year)[-2:]

        columns = []
        for month in range(1, 13):
            key = f"{month}/{short_year}"
            columns.append(
                MonthColumn(
                    key=key,
                    month=month,
                    year=target_year,
                    display_name=key,
                    full_name=f"{MONTH_NAMES[month - 1]} {target_year}",
                )
            )
        return columns

    @staticmethod
    def get_month_name(month_key: str) -> str:
        """
        Convert a month key to a short label ("1/25" -> "Jan 25").

        Malformed keys are returned unchanged.
        """
        try:
            month_str, year_str = month_key.split("/")
            month = int(month_str)
            year = int(year_str)
        except (AttributeError, ValueError):
            logger.debug("month_key_malformed", month_key=month_key)
            return month_key

        if not 1 <= month <= 12:
            logger.debug("month_key_malformed", month_key=month_key)
            return month_key

        return f"{MONTH_ABBREVIATIONS[month - 1]} {year % 100:02d}"

    @staticmethod
    def format_date(iso_string: str) -> str:
        """
        Format an ISO date string for display ("2025-03-07" -> "Mar 7, 2025").

        Returns "Invalid Date" when the string cannot be parsed.
        """
        try:
            parsed = datetime.fromisoformat(iso_string)
        except (TypeError, ValueError):
            logger.debug("date_unparseable", value=iso_string)
            return "Invalid Date"

        return f"{MONTH_ABBREVIATIONS[parsed.month - 1]} {parsed.day}, {parsed.year}"
