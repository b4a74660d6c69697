"""Exceptions for the dataknobs_constraints package.

This module defines the constraint error types, built on the common
exception framework from dataknobs_common.

Two kinds of failure are modelled:

- ``ConstraintConfigurationError``: a constraint was constructed with an
  invalid configuration (e.g., a negative length bound). This is a
  programmer error and is raised at construction time.
- ``ViolationError``: a value does not satisfy a constraint. This is the
  expected outcome of validation and is returned (not raised) by
  :func:`dataknobs_constraints.validate_or_error`.

Example:
    ```python
    from dataknobs_constraints import (
        MinLength,
        extract_violated_constraint,
        validate_or_error,
    )

    err = validate_or_error("abc", MinLength(5))
    str(err)
    # 'required to be min length 5'

    try:
        raise RuntimeError("signup failed") from err
    except RuntimeError as wrapped:
        extract_violated_constraint(wrapped)
        # <MinLength: min length 5>
    ```
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from dataknobs_common import (
    ConfigurationError,
    DataknobsError,
    ValidationError,
)

if TYPE_CHECKING:
    from .base import Constraint

# Alias so callers can catch everything raised by this package
ConstraintsError = DataknobsError

_UNSET: Any = object()


class ConstraintConfigurationError(ConfigurationError):
    """Raised when a constraint is constructed with an invalid configuration."""

    def __init__(self, message: str, parameter: str | None = None, **context: Any):
        self.parameter = parameter
        if parameter is not None:
            context["parameter"] = parameter
        super().__init__(message, context=context or None)

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), self.args, self.__dict__)


@runtime_checkable
class SupportsViolatedConstraint(Protocol):
    """Protocol for errors that carry the constraint a value violated."""

    def violated_constraint(self) -> Constraint | None:
        """Return the violated constraint."""
        ...


class ViolationError(ValidationError):
    """A value failed to satisfy a constraint.

    The wrapped constraint is the one that failed. When the failing
    constraint was a set, it is a new set holding only the violated members,
    so it does not tell which members of the original set passed.

    Attributes:
        value: The value that failed validation, kept for diagnostics.
            It is never part of the message.
    """

    def __init__(self, constraint: Constraint | None, value: Any = None):
        self._violated = constraint
        self.value = value
        context = {"constraint": constraint.description()} if constraint is not None else None
        super().__init__(self._render(), context=context)

    def violated_constraint(self) -> Constraint | None:
        """Return the violated constraint, or None if the error is degenerate."""
        return getattr(self, "_violated", None)

    def _render(self) -> str:
        violated = getattr(self, "_violated", _UNSET)
        if violated is _UNSET:
            return "unknown constraint violation"
        if violated is None:
            return "constraint violation: <undefined>"
        return "required to be " + violated.description()

    def __str__(self) -> str:
        return self._render()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._render()!r})"

    def __reduce__(self) -> tuple[Any, ...]:
        # args holds the rendered message, so rebuild from the constraint instead
        return (type(self), (getattr(self, "_violated", None), getattr(self, "value", None)))


def violation_message(error: BaseException | None) -> str:
    """Render an error message, tolerating a missing error.

    Args:
        error: The error to render

    Returns:
        The error text, or "unknown constraint violation" for None
    """
    if error is None:
        return "unknown constraint violation"
    return str(error)


def extract_violated_constraint(error: BaseException | None) -> Constraint | None:
    """Find the violated constraint anywhere in an error's cause chain.

    The chain is followed through ``__cause__`` first, then ``__context__``
    unless the context was suppressed with ``raise ... from None``. The first
    error carrying a violated constraint wins.

    Args:
        error: The outermost error, or None

    Returns:
        The violated constraint, or None if no error in the chain carries one
    """
    seen: set[int] = set()
    current = error
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        if isinstance(current, SupportsViolatedConstraint):
            return current.violated_constraint()
        if current.__cause__ is not None:
            current = current.__cause__
        elif not current.__suppress_context__:
            current = current.__context__
        else:
            current = None
    return None


__all__ = [
    "ConstraintsError",
    "ConstraintConfigurationError",
    "SupportsViolatedConstraint",
    "ViolationError",
    "extract_violated_constraint",
    "violation_message",
]
