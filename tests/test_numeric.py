"""Tests for numeric convenience constraints."""

import pytest

from dataknobs_constraints import (
    EVEN,
    NEGATIVE,
    ODD,
    POSITIVE,
    POWER_OF_TWO,
    Even,
    Odd,
)


class TestSignConstraints:
    """Test POSITIVE and NEGATIVE."""

    def test_positive(self):
        """Test that zero is neither positive nor negative."""
        assert POSITIVE.description() == "positive"
        assert POSITIVE.is_valid(1)
        assert POSITIVE.is_valid(0.5)
        assert not POSITIVE.is_valid(0)
        assert not POSITIVE.is_valid(-1)

    def test_negative(self):
        """Test NEGATIVE."""
        assert NEGATIVE.description() == "negative"
        assert NEGATIVE.is_valid(-1)
        assert NEGATIVE.is_valid(-0.5)
        assert not NEGATIVE.is_valid(0)
        assert not NEGATIVE.is_valid(1)


class TestParity:
    """Test EVEN and ODD."""

    @pytest.mark.parametrize("value", [-4, -2, 0, 2, 10])
    def test_even_values(self, value):
        """Test even values, including negatives."""
        assert EVEN.is_valid(value)
        assert not ODD.is_valid(value)

    @pytest.mark.parametrize("value", [-3, -1, 1, 7])
    def test_odd_values(self, value):
        """Test odd values, including negatives."""
        assert ODD.is_valid(value)
        assert not EVEN.is_valid(value)

    def test_descriptions(self):
        """Test parity descriptions."""
        assert EVEN.description() == "even"
        assert ODD.description() == "odd"
        assert Even().description() == "even"
        assert Odd().description() == "odd"


class TestPowerOfTwo:
    """Test POWER_OF_TWO."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (0, False),
            (1, True),
            (2, True),
            (3, False),
            (4, True),
            (6, False),
            (1024, True),
            (-2, False),
            (-4, False),
        ],
    )
    def test_power_of_two(self, value, expected):
        """Test that exactly one bit set qualifies."""
        assert POWER_OF_TWO.is_valid(value) is expected

    def test_description(self):
        """Test the description."""
        assert POWER_OF_TWO.description() == "power of two"
