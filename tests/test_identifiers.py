"""
Unit tests for identifier generation.

Tests ID structure, prefixing, and the base-36 suffix expansion.
"""

import re
from unittest.mock import patch

from prepaid_tracker.shared.identifiers import (
    ID_SUFFIX_LENGTH,
    _base36_fraction,
    generate_id,
)

ID_PATTERN = re.compile(r"^\d+_[0-9a-z]{9}$")


class TestGenerateId:
    """Test generate_id function"""

    def test_structure(self):
        """Test <millis>_<9 base-36 chars> format"""
        assert ID_PATTERN.match(generate_id())

    def test_successive_ids_differ(self):
        """Test two calls in a row produce distinct IDs"""
        ids = {generate_id() for _ in range(100)}
        assert len(ids) == 100

    def test_prefix(self):
        """Test record-type prefix"""
        generated = generate_id("accrual")
        assert generated.startswith("accrual_")
        assert ID_PATTERN.match(generated.removeprefix("accrual_"))

    def test_empty_prefix_ignored(self):
        """Test empty prefix behaves like no prefix"""
        assert ID_PATTERN.match(generate_id(""))

    def test_uses_clock_and_random_source(self):
        """Test ID is built from epoch millis and a random fraction"""
        # Arrange
        with (
            patch(
                "prepaid_tracker.shared.identifiers.time.time_ns",
                return_value=1_760_870_400_123_456_789,
            ),
            patch(
                "prepaid_tracker.shared.identifiers.random.random",
                return_value=0.5,
            ),
        ):
            # Act
            generated = generate_id()

        # Assert
        assert generated == "1760870400123_i00000000"


class TestBase36Fraction:
    """Test base-36 fraction expansion"""

    def test_zero(self):
        """Test zero expands to all zeros"""
        assert _base36_fraction(0.0, ID_SUFFIX_LENGTH) == "000000000"

    def test_known_fractions(self):
        """Test exact fractions"""
        assert _base36_fraction(0.5, 3) == "i00"
        assert _base36_fraction(0.75, 2) == "r0"

    def test_length(self):
        """Test the requested number of digits is always produced"""
        assert len(_base36_fraction(0.999999999, ID_SUFFIX_LENGTH)) == 9
        assert len(_base36_fraction(1e-12, ID_SUFFIX_LENGTH)) == 9
