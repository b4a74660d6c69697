"""Constraint combinators: conjunction (ConstraintSet) and disjunction (AnyOf).
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from .base import Constraint, V


class _Combinator(Constraint[V]):
    """Shared member handling for combinators.

    Members are held in a tuple, so nothing handed out by
    :meth:`constraint_list` can change the combinator.
    """

    separator = ""

    def __init__(self, *constraints: Constraint[V]):
        self._constraints: tuple[Constraint[V], ...] = tuple(constraints)

    def constraint_list(self) -> list[Constraint[V]]:
        """Return a copy of the member constraints, in declaration order."""
        return list(self._constraints)

    def description(self) -> str:
        return self.separator.join(c.description() for c in self._constraints)

    def __len__(self) -> int:
        return len(self._constraints)

    def __iter__(self) -> Iterator[Constraint[V]]:
        return iter(self._constraints)

    def __eq__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._constraints == other._constraints

    def __hash__(self) -> int:
        return hash((type(self), self._constraints))


class ConstraintSet(_Combinator[V]):
    """All member constraints must pass (AND logic).

    Member order matters only for which violation :meth:`validate` reports
    first. An empty set is valid for every value and has an empty
    description.

    Example:
        ```python
        username = ConstraintSet(NON_EMPTY, MinLength(5), NON_BLANK)
        username.description()
        # 'non-empty, min length 5, non-blank'
        username.validate_all("")
        # [<Func: non-empty>, <MinLength: min length 5>]
        ```
    """

    separator = ", "

    def is_valid(self, value: V) -> bool:
        return self.validate(value) is None

    def validate(self, value: V) -> Constraint[V] | None:
        """Return the first violated member, stopping at the first failure.

        Args:
            value: Value to check

        Returns:
            The first member (in declaration order) the value violates, or
            None if every member passes
        """
        for constraint in self._constraints:
            if not constraint.is_valid(value):
                return constraint
        return None

    def validate_all(self, value: V) -> list[Constraint[V]]:
        """Check every member and return all that the value violates.

        Args:
            value: Value to check

        Returns:
            Violated members in declaration order; empty if all pass
        """
        return [c for c in self._constraints if not c.is_valid(value)]


class AnyOf(_Combinator[V]):
    """At least one member constraint must pass (OR logic).

    An empty AnyOf is invalid for every value, the opposite of an empty
    ConstraintSet.
    """

    separator = " or "

    def is_valid(self, value: V) -> bool:
        return any(c.is_valid(value) for c in self._constraints)


All = ConstraintSet


__all__ = ["All", "AnyOf", "ConstraintSet"]
