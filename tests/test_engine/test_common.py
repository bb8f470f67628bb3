"""Tests for the shared numeric helpers."""

import math

import pytest
from engine.common import UNDEFINED, ieee_divide, is_undefined


class TestSentinel:
    """Tests for the not-a-number sentinel."""

    def test_sentinel_not_equal_to_itself(self):
        """Test the sentinel never compares equal, even to itself."""
        assert UNDEFINED != UNDEFINED
        assert is_undefined(UNDEFINED)

    def test_numbers_are_defined(self):
        """Test finite and infinite values are not undefined."""
        assert not is_undefined(0.0)
        assert not is_undefined(math.inf)


class TestIeeeDivide:
    """Tests for IEEE-754 division."""

    def test_regular_division(self):
        """Test ordinary division."""
        assert ieee_divide(10.0, 4.0) == 2.5

    @pytest.mark.parametrize(
        "numerator,expected",
        [(1.0, math.inf), (-1.0, -math.inf)],
    )
    def test_division_by_zero_is_signed_infinity(self, numerator, expected):
        """Test x / 0 gives signed infinity."""
        assert ieee_divide(numerator, 0.0) == expected

    def test_zero_by_zero_is_nan(self):
        """Test 0 / 0 gives NaN."""
        assert math.isnan(ieee_divide(0.0, 0.0))
