"""Validation result type carrying the violated constraints.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .base import Constraint
from .composite import ConstraintSet
from .exceptions import ViolationError


@dataclass
class ValidationResult:
    """Outcome of checking a value against a constraint.

    The violations are the constraints the value failed, in the order they
    were evaluated. A successful result has none. ``from_set`` records that
    the violations are members of a set, so the error always groups them.
    """

    valid: bool
    value: Any
    violations: list[Constraint] = field(default_factory=list)
    from_set: bool = False

    def __bool__(self) -> bool:
        """Allow 'if result:' usage to check validity."""
        return self.valid

    @property
    def error(self) -> ViolationError | None:
        """The violation as an error, or None for a successful result.

        Violated members of a set, or several violations, are wrapped in a
        new ConstraintSet holding just the violated constraints. A single
        violation of any other constraint is wrapped as-is.
        """
        if self.valid:
            return None
        if len(self.violations) == 1 and not self.from_set:
            return ViolationError(self.violations[0], value=self.value)
        return ViolationError(ConstraintSet(*self.violations), value=self.value)

    @property
    def messages(self) -> list[str]:
        """One "required to be ..." message per violated constraint."""
        return [str(ViolationError(c, value=self.value)) for c in self.violations]

    def merge(self, other: ValidationResult) -> ValidationResult:
        """Combine results for composite validation.

        Args:
            other: Another ValidationResult to merge with this one

        Returns:
            New ValidationResult with combined state
        """
        return ValidationResult(
            valid=self.valid and other.valid,
            value=self.value,
            violations=self.violations + other.violations,
            from_set=self.from_set or other.from_set,
        )

    @classmethod
    def success(cls, value: Any) -> ValidationResult:
        """Create a successful validation result."""
        return cls(valid=True, value=value, violations=[])

    @classmethod
    def failure(
        cls, value: Any, violations: list[Constraint], from_set: bool = False
    ) -> ValidationResult:
        """Create a failed validation result.

        Args:
            value: The value that failed validation
            violations: Constraints the value violated
            from_set: Whether the violations are members of a set

        Returns:
            Failed ValidationResult
        """
        return cls(valid=False, value=value, violations=list(violations), from_set=from_set)


__all__ = ["ValidationResult"]
