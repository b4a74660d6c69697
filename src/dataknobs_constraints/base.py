"""Constraint base class with composable operators.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Generic, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from .composite import AnyOf, ConstraintSet
    from .primitives import Negated

V = TypeVar("V")
V_contra = TypeVar("V_contra", contravariant=True)


class Constraint(ABC, Generic[V]):
    """Base class for all constraints.

    A constraint is an immutable rule over values of type ``V``. It explains
    itself through :meth:`description` and classifies values through
    :meth:`is_valid`. Neither method has side effects, and any configuration
    (reference values, predicates, options) is fixed at construction.

    Constraints compose with operators:

    - ``a & b``: both must hold (a :class:`ConstraintSet`)
    - ``a | b``: at least one must hold (an :class:`AnyOf`)
    - ``~a``: must not hold (a :class:`Negated`)
    """

    @abstractmethod
    def description(self) -> str:
        """Return the value-independent description, e.g. "greater than 5"."""

    @abstractmethod
    def is_valid(self, value: V) -> bool:
        """Check whether a value satisfies this constraint.

        Args:
            value: Value to check

        Returns:
            True if the value is valid
        """

    def __and__(self, other: Constraint[V]) -> ConstraintSet[V]:
        """Combine with AND: both constraints must pass."""
        from .composite import ConstraintSet

        left = self.constraint_list() if isinstance(self, ConstraintSet) else [self]
        right = other.constraint_list() if isinstance(other, ConstraintSet) else [other]
        return ConstraintSet(*left, *right)

    def __or__(self, other: Constraint[V]) -> AnyOf[V]:
        """Combine with OR: at least one constraint must pass."""
        from .composite import AnyOf

        left = self.constraint_list() if isinstance(self, AnyOf) else [self]
        right = other.constraint_list() if isinstance(other, AnyOf) else [other]
        return AnyOf(*left, *right)

    def __invert__(self) -> Negated[V]:
        """Negate this constraint."""
        from .primitives import Negated

        return Negated(self)

    def __str__(self) -> str:
        return self.description()

    def __repr__(self) -> str:
        return f"<{type(self).__name__}: {self.description()}>"


@runtime_checkable
class SupportsValidateAll(Protocol[V_contra]):
    """Protocol for constraints that can report every violated member."""

    def validate_all(self, value: V_contra) -> list[Constraint]:
        """Return every violated member constraint, in order."""
        ...


__all__ = ["Constraint", "SupportsValidateAll", "V"]
