"""Length constraints for sized values (text, bytes, sequences).
"""

from __future__ import annotations

from collections.abc import Sized

from .base import Constraint
from .exceptions import ConstraintConfigurationError


def _check_bound(name: str, bound: int | None) -> None:
    if bound is None:
        return
    if isinstance(bound, bool) or not isinstance(bound, int):
        raise ConstraintConfigurationError(
            f"{name} must be an integer, got {type(bound).__name__}",
            parameter=name,
        )
    if bound < 0:
        raise ConstraintConfigurationError(
            f"{name} must be zero or a positive integer: {bound}",
            parameter=name,
        )


class LengthConstraint(Constraint[Sized]):
    """Length of the value must be within the configured bounds.

    A bound of None is not set, so ``LengthConstraint(min_length=3)`` has no
    upper limit. Both bounds are inclusive.
    """

    def __init__(self, min_length: int | None = None, max_length: int | None = None):
        """Initialize length constraint.

        Args:
            min_length: Minimum length (inclusive), or None for no minimum
            max_length: Maximum length (inclusive), or None for no maximum

        Raises:
            ConstraintConfigurationError: If a bound is negative or not an
                integer, if neither bound is set, or if min_length is greater
                than max_length
        """
        _check_bound("min_length", min_length)
        _check_bound("max_length", max_length)
        if min_length is None and max_length is None:
            raise ConstraintConfigurationError(
                "At least one of min_length and max_length must be set"
            )
        if min_length is not None and max_length is not None and min_length > max_length:
            raise ConstraintConfigurationError(
                f"min_length ({min_length}) cannot be greater than max_length ({max_length})",
                parameter="min_length",
            )
        self._min_length = min_length
        self._max_length = max_length

    @property
    def min_length(self) -> int | None:
        return self._min_length

    @property
    def max_length(self) -> int | None:
        return self._max_length

    def description(self) -> str:
        lo, hi = self._min_length, self._max_length
        if lo == hi:
            return f"length {lo}"
        if lo is None:
            return f"max length {hi}"
        if hi is None:
            return f"min length {lo}"
        return f"length between {lo} and {hi}"

    def is_valid(self, value: Sized) -> bool:
        length = len(value)
        if self._min_length is not None and length < self._min_length:
            return False
        if self._max_length is not None and length > self._max_length:
            return False
        return True


class Length(LengthConstraint):
    """Length must be exactly as specified."""

    def __init__(self, length: int):
        _check_bound("length", length)
        super().__init__(min_length=length, max_length=length)


class MinLength(LengthConstraint):
    """Length must be at least min_length."""

    def __init__(self, min_length: int):
        super().__init__(min_length=min_length)


class MaxLength(LengthConstraint):
    """Length must be at most max_length."""

    def __init__(self, max_length: int):
        super().__init__(max_length=max_length)


class LengthRange(LengthConstraint):
    """Length must be between min_length and max_length, inclusive."""

    def __init__(self, min_length: int, max_length: int):
        super().__init__(min_length=min_length, max_length=max_length)


__all__ = ["Length", "LengthConstraint", "LengthRange", "MaxLength", "MinLength"]
