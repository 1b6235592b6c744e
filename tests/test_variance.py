"""
Unit tests for balance variance calculation.

Tests the fixed 0.01 tolerance, percentage calculation, and the
zero-reference fallback.
"""

import dataclasses

import pytest

from prepaid_tracker.shared.variance import (
    BALANCE_TOLERANCE,
    VarianceResult,
    calculate_variance,
)


class TestCalculateVariance:
    """Test calculate_variance function"""

    def test_equal_amounts(self):
        """Test identical balances are balanced with zero variance"""
        result = calculate_variance(100, 100)

        assert result.variance == 0
        assert result.is_balanced is True
        assert result.percentage == 0

    def test_within_tolerance(self):
        """Test sub-cent variance counts as balanced"""
        result = calculate_variance(100, 99.995)

        assert result.is_balanced is True
        assert result.variance == pytest.approx(0.005)

    def test_outside_tolerance(self):
        """Test one-unit variance with 1% difference"""
        result = calculate_variance(101, 100)

        assert result.variance == 1
        assert result.is_balanced is False
        assert result.percentage == 1

    def test_exactly_at_tolerance_is_not_balanced(self):
        """Test tolerance is a strict upper bound"""
        result = calculate_variance(0.01, 0)

        assert result.is_balanced is False

    def test_negative_variance(self):
        """Test balance below the balance sheet gives negative values"""
        result = calculate_variance(90, 100)

        assert result.variance == -10
        assert result.is_balanced is False
        assert result.percentage == -10

    def test_zero_balance_sheet_amount(self):
        """Test division-by-zero fallback leaves percentage at 0"""
        result = calculate_variance(50, 0)

        assert result == VarianceResult(variance=50, is_balanced=False, percentage=0)

    def test_negative_balance_sheet_amount(self):
        """Test percentage is relative to the signed reference amount"""
        result = calculate_variance(-90, -100)

        assert result.variance == 10
        assert result.percentage == -10

    def test_tolerance_constant(self):
        """Test tolerance is the fixed cutoff used by reporting"""
        assert BALANCE_TOLERANCE == 0.01


class TestVarianceResult:
    """Test VarianceResult value object"""

    def test_to_dict_keys(self):
        """Test reporting keys"""
        result = calculate_variance(100, 100)

        assert result.to_dict() == {
            "variance": 0,
            "isBalanced": True,
            "percentage": 0,
        }

    def test_immutable(self):
        """Test result cannot be modified"""
        result = calculate_variance(101, 100)

        with pytest.raises(dataclasses.FrozenInstanceError):
            result.variance = 0

    def test_percentage_display(self):
        """Test formatted percentage"""
        assert calculate_variance(101, 100).percentage_display == "+1.0%"
        assert calculate_variance(90, 100).percentage_display == "-10.0%"
        assert calculate_variance(50, 0).percentage_display == "+0.0%"
