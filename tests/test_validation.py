"""Tests for validation entry points and ValidationResult."""

import pytest

from dataknobs_constraints import (
    NON_BLANK,
    NON_EMPTY,
    AnyOf,
    ConstraintSet,
    GreaterThan,
    LessThan,
    MinLength,
    Range,
    SupportsValidateAll,
    ValidationResult,
    ViolationError,
    check,
    ensure_valid,
    extract_violated_constraint,
    is_valid,
    validate_or_error,
)


class TestIsValid:
    """Test the is_valid function."""

    def test_delegates_to_constraint(self):
        """Test is_valid agrees with the constraint."""
        c = Range(0, 10)
        assert is_valid(c, 5)
        assert not is_valid(c, 11)


class TestValidateOrError:
    """Test validate_or_error."""

    def test_valid_value(self, name_set):
        """Test that a valid value yields no error."""
        assert validate_or_error("hello", name_set) is None
        assert validate_or_error(5, Range(0, 10)) is None

    def test_set_reports_every_violation(self, name_set):
        """Test that the error wraps only the violated members."""
        error = validate_or_error("", name_set)
        assert isinstance(error, ViolationError)
        violated = error.violated_constraint()
        assert isinstance(violated, ConstraintSet)
        assert violated is not name_set
        members = violated.constraint_list()
        assert members[0] is NON_EMPTY
        assert members[1] is name_set.constraint_list()[1]
        assert len(members) == 2
        assert str(error) == "required to be non-empty, min length 5"

    def test_blank_value(self, name_set):
        """Test a value that is long enough but blank."""
        error = validate_or_error("      ", name_set)
        assert error.violated_constraint().constraint_list() == [NON_BLANK]
        assert str(error) == "required to be non-blank"

    def test_single_constraint(self):
        """Test that a plain constraint is wrapped as-is."""
        c = GreaterThan(0)
        error = validate_or_error(-1, c)
        assert error.violated_constraint() is c
        assert str(error) == "required to be greater than 0"
        assert error.value == -1

    def test_any_of_wrapped_as_is(self):
        """Test that AnyOf is not broken into members."""
        c = AnyOf(LessThan(0), GreaterThan(100))
        error = validate_or_error(50, c)
        assert error.violated_constraint() is c
        assert str(error) == "required to be less than 0 or greater than 100"

    def test_none_constraint(self):
        """Test a missing constraint."""
        error = validate_or_error("x", None)
        assert error.violated_constraint() is None
        assert str(error) == "constraint violation: <undefined>"

    def test_custom_validate_all(self):
        """Test any constraint with validate_all gets per-member reporting."""

        class Pair(ConstraintSet):
            pass

        assert isinstance(Pair(), SupportsValidateAll)
        c = Pair(GreaterThan(0), LessThan(0))
        error = validate_or_error(5, c)
        assert str(error) == "required to be less than 0"

    @pytest.mark.parametrize(
        "constraint,value",
        [
            (Range(0, 10), 11),
            (LessThan(0), 0),
            (MinLength(5), "abc"),
            (NON_EMPTY, ""),
            (AnyOf(LessThan(0), GreaterThan(100)), 50),
        ],
    )
    def test_violated_constraint_round_trip(self, constraint, value):
        """Test that the failed constraint can be recovered from the error."""
        error = validate_or_error(value, constraint)
        assert extract_violated_constraint(error) is constraint

    @pytest.mark.parametrize("value", ["", " ", "abc", "     ", "hello", " hello "])
    def test_error_exactly_when_invalid(self, name_set, value):
        """Test that an error is returned exactly for invalid values."""
        error = validate_or_error(value, name_set)
        assert (error is None) == name_set.is_valid(value)
        if error is not None:
            assert error.violated_constraint().constraint_list() == name_set.validate_all(value)


class TestCheck:
    """Test check and ValidationResult."""

    def test_success(self, name_set):
        """Test a successful check."""
        result = check("hello", name_set)
        assert result.valid
        assert bool(result)
        assert result.value == "hello"
        assert result.violations == []
        assert result.error is None
        assert result.messages == []

    def test_failure_with_set(self, name_set):
        """Test a failed check against a set."""
        result = check("", name_set)
        assert not result
        assert result.violations == name_set.validate_all("")
        assert result.messages == [
            "required to be non-empty",
            "required to be min length 5",
        ]
        assert str(result.error) == "required to be non-empty, min length 5"

    def test_single_set_violation_is_grouped(self, name_set):
        """Test that one violated set member is reported like validate_or_error does."""
        result = check("     ", name_set)
        assert result.violations == [NON_BLANK]
        violated = result.error.violated_constraint()
        assert isinstance(violated, ConstraintSet)
        assert violated.constraint_list() == [NON_BLANK]
        assert violated == validate_or_error("     ", name_set).violated_constraint()
        assert extract_violated_constraint(result.error) == violated
        assert str(result.error) == "required to be non-blank"

    def test_failure_with_single_constraint(self):
        """Test a failed check against a plain constraint."""
        c = Range(0, 10)
        result = check(11, c)
        assert result.violations == [c]
        assert result.error.violated_constraint() is c
        assert str(result.error) == "required to be from 0 to 10"


class TestValidationResult:
    """Test ValidationResult construction and merging."""

    def test_factories(self):
        """Test success and failure constructors."""
        ok = ValidationResult.success(1)
        assert ok.valid and ok.violations == []
        bad = ValidationResult.failure(1, [NON_EMPTY])
        assert not bad.valid
        assert bad.violations == [NON_EMPTY]

    def test_failure_copies_violations(self):
        """Test that the violations list is copied."""
        violations = [NON_EMPTY]
        result = ValidationResult.failure("", violations)
        violations.append(NON_BLANK)
        assert result.violations == [NON_EMPTY]

    def test_merge(self):
        """Test combining results."""
        first = ValidationResult.failure("", [NON_EMPTY])
        second = ValidationResult.failure("", [MinLength(5)])
        merged = first.merge(second)
        assert not merged.valid
        assert len(merged.violations) == 2
        assert merged.value == ""
        assert merged.merge(ValidationResult.success("")).valid is False
        assert ValidationResult.success(1).merge(ValidationResult.success(2)).valid


class TestEnsureValid:
    """Test ensure_valid."""

    def test_returns_value(self, name_set):
        """Test that a valid value is returned."""
        assert ensure_valid("hello", name_set) == "hello"

    def test_raises_violation(self, name_set):
        """Test that an invalid value raises."""
        with pytest.raises(ViolationError, match="required to be non-empty, min length 5") as exc_info:
            ensure_valid("", name_set)
        assert exc_info.value.value == ""
