"""Validation entry points.

A failed validation is an expected outcome, so the primary entry points
return the violation instead of raising it:

- :func:`is_valid` answers yes or no.
- :func:`validate_or_error` returns a :class:`ViolationError` or None.
- :func:`check` returns a :class:`ValidationResult`.

:func:`ensure_valid` is for call sites that prefer an exception.
"""

from __future__ import annotations

from typing import Any

from .base import Constraint, SupportsValidateAll, V
from .composite import ConstraintSet
from .exceptions import ViolationError
from .result import ValidationResult


def is_valid(constraint: Constraint[V], value: V) -> bool:
    """Check a value against a constraint.

    Args:
        constraint: Constraint to check against
        value: Value to check

    Returns:
        True if the value satisfies the constraint
    """
    return constraint.is_valid(value)


def validate_or_error(value: V, constraint: Constraint[V] | None) -> ViolationError | None:
    """Validate a value, returning the violation as an error.

    If the constraint can report every violated member (a ConstraintSet, or
    anything else with ``validate_all``), the error wraps a new ConstraintSet
    holding only the violated members. Otherwise the error wraps the
    constraint itself.

    Args:
        value: Value to validate
        constraint: Constraint to validate against

    Returns:
        None if the value is valid, otherwise a ViolationError. A None
        constraint yields an error whose violated constraint is None.
    """
    if constraint is None:
        return ViolationError(None, value=value)
    if isinstance(constraint, SupportsValidateAll):
        violated = constraint.validate_all(value)
        if violated:
            return ViolationError(ConstraintSet(*violated), value=value)
        return None
    if constraint.is_valid(value):
        return None
    return ViolationError(constraint, value=value)


def check(value: V, constraint: Constraint[V]) -> ValidationResult:
    """Validate a value and collect every violated constraint.

    Args:
        value: Value to validate
        constraint: Constraint to validate against

    Returns:
        ValidationResult whose violations are the violated members of a set,
        or the constraint itself for anything else
    """
    if isinstance(constraint, SupportsValidateAll):
        violated = constraint.validate_all(value)
        if violated:
            return ValidationResult.failure(value, violated, from_set=True)
        return ValidationResult.success(value)
    if constraint.is_valid(value):
        return ValidationResult.success(value)
    return ValidationResult.failure(value, [constraint])


def ensure_valid(value: Any, constraint: Constraint) -> Any:
    """Return the value if it is valid, otherwise raise the violation.

    Raises:
        ViolationError: If the value violates the constraint
    """
    error = validate_or_error(value, constraint)
    if error is not None:
        raise error
    return value


__all__ = ["check", "ensure_valid", "is_valid", "validate_or_error"]
