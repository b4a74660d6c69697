"""Tests for length constraints."""

import pytest

from dataknobs_constraints import (
    ConstraintConfigurationError,
    Length,
    LengthConstraint,
    LengthRange,
    MaxLength,
    MinLength,
)


class TestLengthDescriptions:
    """Test how length bounds are described."""

    def test_exact(self):
        """Test equal bounds."""
        assert Length(3).description() == "length 3"
        assert LengthRange(4, 4).description() == "length 4"

    def test_min(self):
        """Test a lower bound only."""
        assert MinLength(5).description() == "min length 5"

    def test_max(self):
        """Test an upper bound only."""
        assert MaxLength(10).description() == "max length 10"

    def test_between(self):
        """Test both bounds."""
        assert LengthRange(6, 32).description() == "length between 6 and 32"


class TestLengthValidation:
    """Test length checks over sized values."""

    def test_exact_length(self):
        """Test Length."""
        c = Length(3)
        assert c.is_valid("abc")
        assert not c.is_valid("ab")
        assert not c.is_valid("abcd")

    def test_bounds_are_inclusive(self):
        """Test LengthRange at the edges."""
        c = LengthRange(2, 4)
        assert not c.is_valid("a")
        assert c.is_valid("ab")
        assert c.is_valid("abcd")
        assert not c.is_valid("abcde")

    def test_min_length(self):
        """Test that MinLength has no upper limit."""
        c = MinLength(2)
        assert not c.is_valid("")
        assert c.is_valid("ab")
        assert c.is_valid("a" * 1000)

    def test_max_length(self):
        """Test that MaxLength accepts empty values."""
        c = MaxLength(2)
        assert c.is_valid("")
        assert c.is_valid("ab")
        assert not c.is_valid("abc")

    def test_other_sized_values(self):
        """Test lists, bytes and dicts."""
        c = LengthRange(1, 2)
        assert c.is_valid([1, 2])
        assert c.is_valid(b"x")
        assert not c.is_valid({})
        assert not c.is_valid((1, 2, 3))

    def test_length_counts_characters(self):
        """Test that length is measured in characters, not bytes."""
        assert Length(2).is_valid("éü")


class TestLengthConfiguration:
    """Test invalid length configurations."""

    def test_negative_bound(self):
        """Test that a negative length is rejected."""
        with pytest.raises(ConstraintConfigurationError, match="zero or a positive integer") as exc_info:
            MinLength(-1)
        assert exc_info.value.parameter == "min_length"

    def test_negative_exact(self):
        """Test a negative exact length."""
        with pytest.raises(ConstraintConfigurationError):
            Length(-3)

    def test_non_integer_bound(self):
        """Test that non-integer bounds are rejected."""
        with pytest.raises(ConstraintConfigurationError, match="must be an integer"):
            MaxLength(2.5)
        with pytest.raises(ConstraintConfigurationError, match="must be an integer"):
            MaxLength(True)

    def test_inverted_bounds(self):
        """Test that min greater than max is rejected."""
        with pytest.raises(ConstraintConfigurationError, match="cannot be greater"):
            LengthRange(10, 5)

    def test_no_bounds(self):
        """Test that at least one bound is required."""
        with pytest.raises(ConstraintConfigurationError, match="At least one"):
            LengthConstraint()

    def test_error_context(self):
        """Test that the offending parameter is in the error context."""
        with pytest.raises(ConstraintConfigurationError) as exc_info:
            LengthRange(0, -1)
        assert exc_info.value.context["parameter"] == "max_length"
