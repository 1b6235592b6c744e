"""
Identifier generation for tracker records.

IDs are best-effort unique: a millisecond timestamp plus a short random
base-36 suffix. Not cryptographically secure and no collision detection.
"""

import random
import string
import time

ID_SUFFIX_LENGTH = 9

_BASE36_DIGITS = string.digits + string.ascii_lowercase


def _base36_fraction(fraction: float, length: int) -> str:
    """Expand a fraction in [0, 1) into its first `length` base-36 digits."""
    digits = []
    for _ in range(length):
        fraction *= 36
        digit = int(fraction)
        digits.append(_BASE36_DIGITS[digit])
        fraction -= digit
    return "".join(digits)


def generate_id(prefix: str | None = None) -> str:
    """
    Generate a practically unique record identifier.

    Args:
        prefix: Optional record-type tag (e.g. "accrual")

    Returns:
        "<epoch_millis>_<9 base-36 chars>", or
        "<prefix>_<epoch_millis>_<9 base-36 chars>" when prefix is given

    Examples:
        >>> generate_id()  # doctest: +SKIP
        '1760870400000_k3f9x0a2b'
        >>> generate_id("accrual")  # doctest: +SKIP
        'accrual_1760870400000_4mz81qpd0'
    """
    millis = time.time_ns() // 1_000_000
    suffix = _base36_fraction(random.random(), ID_SUFFIX_LENGTH)
    if prefix:
        return f"{prefix}_{millis}_{suffix}"
    return f"{millis}_{suffix}"
