"""
Shared formatting utilities.

Provides currency formatting, lenient number parsing, and percentage display
helpers used by the prepaid and accrual tracker tables.

All helpers always succeed: invalid or missing input yields a safe default
("" or 0) instead of an exception.
"""

import math
import re
from decimal import ROUND_HALF_UP, Decimal, localcontext

import structlog

logger = structlog.get_logger()

DEFAULT_CURRENCY_PRECISION = 2

# Characters dropped before parsing: dollar signs, thousands separators,
# whitespace and the byte-order mark left on CSV-imported cells
_STRIP_PATTERN = re.compile(r"[$,\s\ufeff]")
_BLANK_PATTERN = re.compile(r"[\s\ufeff]*")

# Longest leading float literal, same grammar as JavaScript parseFloat
_FLOAT_PREFIX = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def format_currency(
    amount: float | int,
    show_zero: bool = False,
    *,
    show_sign: bool = False,
    precision: int = DEFAULT_CURRENCY_PRECISION,
) -> str:
    """
    Format an amount with en-US digit grouping and fixed decimal places.

    No currency symbol is prefixed. Rounding follows Intl.NumberFormat:
    the exact decimal value of the float is rounded half away from zero.

    Args:
        amount: Amount to format
        show_zero: Render zero as "0.00" instead of an empty string
        show_sign: Prefix positive amounts with "+"
        precision: Number of decimal places

    Returns:
        Formatted string, or "" for zero when show_zero is False

    Examples:
        >>> format_currency(1234.5)
        '1,234.50'
        >>> format_currency(-5)
        '-5.00'
        >>> format_currency(0)
        ''
        >>> format_currency(0, show_zero=True)
        '0.00'
        >>> format_currency(42, show_sign=True)
        '+42.00'
    """
    if amount == 0 and not show_zero:
        return ""

    if math.isnan(amount):
        return "NaN"
    if math.isinf(amount):
        return "∞" if amount > 0 else "-∞"

    exact = Decimal(amount)
    quantum = Decimal(1).scaleb(-precision)
    with localcontext() as ctx:
        # Enough significant digits for every integer digit plus the decimals
        ctx.prec = max(ctx.prec, exact.adjusted() + precision + 2)
        rounded = exact.quantize(quantum, rounding=ROUND_HALF_UP)
    formatted = f"{rounded:,.{precision}f}"

    if show_sign and amount > 0:
        return f"+{formatted}"
    return formatted


def format_percentage(
    value: float | None,
    decimal_places: int = 1,
    include_sign: bool = True,
) -> str:
    """
    Render a variance percentage for the reconciliation summary.

    Args:
        value: Variance as a percentage of the balance sheet amount
        decimal_places: Digits after the decimal point
        include_sign: Prefix balances at or above the sheet amount with "+"

    Returns:
        Display string such as "+1.0%" (over) or "-10.0%" (short)

    Examples:
        >>> format_percentage(1.0)
        '+1.0%'
        >>> format_percentage(-0.25, decimal_places=2)
        '-0.25%'
        >>> format_percentage(None)
        'N/A'
    """
    if value is None:
        return "N/A"

    sign = ""
    if include_sign and value >= 0:
        sign = "+"

    return f"{sign}{value:.{decimal_places}f}%"


def parse_number(value: str | None, *, accounting_negatives: bool = False) -> float:
    """
    Leniently parse a number from a user-entered or imported string.

    Strips dollar signs, commas and whitespace, then reads the longest
    leading float literal (parsing stops at the first non-numeric
    character). Never raises: empty, missing or unparseable input is 0.

    Args:
        value: Raw string (e.g. "$1,234.56", " 12 ", "")
        accounting_negatives: Treat "(1,200.00)" as -1200

    Returns:
        Parsed value, or 0 when nothing numeric can be read

    Examples:
        >>> parse_number("$1,234.56")
        1234.56
        >>> parse_number("12abc")
        12.0
        >>> parse_number("abc")
        0
        >>> parse_number("(500)", accounting_negatives=True)
        -500.0
    """
    if not value or _BLANK_PATTERN.fullmatch(value):
        return 0

    cleaned = _STRIP_PATTERN.sub("", value)

    if accounting_negatives and "(" in value and ")" in value:
        cleaned = "-" + cleaned.replace("(", "").replace(")", "")

    match = _FLOAT_PREFIX.match(cleaned)
    if match is None:
        logger.debug("parse_number_fallback", value=value, reason="no_numeric_prefix")
        return 0

    parsed = float(match.group(0))

    if not math.isfinite(parsed):
        logger.debug("parse_number_fallback", value=value, reason="not_finite")
        return 0

    return parsed
