"""Atomic constraint kinds.

These are the building blocks every other constraint is made of: a
predicate function, a fixed reference value, a relational operator, a list
of options, a range, or the negation of another constraint.
"""

from __future__ import annotations

import operator
from collections.abc import Callable
from enum import Enum
from typing import Any, Generic, TypeVar

from .base import Constraint, V
from .exceptions import ConstraintConfigurationError
from .literals import render_literal

O = TypeVar("O")


class Func(Constraint[V]):
    """Constraint backed by an ordinary predicate function.

    A good example is a constraint that accepts only valid identifiers, or a
    regular expression matcher:

        ```python
        import re

        identifier = Func("identifier", str.isidentifier)
        username = Func("username", re.compile(r"^[a-zA-Z][a-zA-Z0-9]+$").match)
        ```

    The predicate result is interpreted for truthiness, so functions returning
    match objects or ``None`` work as-is.
    """

    def __init__(
        self,
        description: str,
        predicate: Callable[[V], Any],
        negate: bool = False,
    ):
        """Initialize the constraint.

        Args:
            description: What the predicate requires, e.g. "valid UTF-8"
            predicate: Callable returning a truthy value for valid values
            negate: If True, the predicate result is inverted
        """
        if not callable(predicate):
            raise ConstraintConfigurationError(
                f"predicate must be callable, got {type(predicate).__name__}",
                parameter="predicate",
            )
        self._description = description
        self._predicate = predicate
        self._negate = negate

    @property
    def predicate(self) -> Callable[[V], Any]:
        return self._predicate

    @property
    def negate(self) -> bool:
        return self._negate

    def description(self) -> str:
        return self._description

    def is_valid(self, value: V) -> bool:
        result = bool(self._predicate(value))
        return not result if self._negate else result


class OperandFunc(Constraint[V], Generic[V, O]):
    """Constraint backed by a two-argument predicate and a fixed operand.

    ``OperandFunc('prefix "x"', "x", str.startswith)`` is valid for values
    where ``str.startswith(value, "x")`` holds.
    """

    def __init__(self, description: str, operand: O, predicate: Callable[[V, O], Any]):
        if not callable(predicate):
            raise ConstraintConfigurationError(
                f"predicate must be callable, got {type(predicate).__name__}",
                parameter="predicate",
            )
        self._description = description
        self._operand = operand
        self._predicate = predicate

    @property
    def operand(self) -> O:
        return self._operand

    def description(self) -> str:
        return self._description

    def is_valid(self, value: V) -> bool:
        return bool(self._predicate(value, self._operand))


class Match(Constraint[V]):
    """Value must equal a fixed reference value."""

    def __init__(self, reference: V):
        self._reference = reference

    @property
    def reference(self) -> V:
        return self._reference

    def description(self) -> str:
        return f"match {render_literal(self._reference)}"

    def is_valid(self, value: V) -> bool:
        return bool(value == self._reference)


class RelOp(Enum):
    """Relational operators.

    Each operator carries its representative symbol and the template used to
    describe a constraint built on it.
    """

    EQUAL = ("=", "equals {}")
    NOT_EQUAL = ("≠", "not equal to {}")
    LESS = ("<", "less than {}")
    LESS_OR_EQUAL = ("≤", "less than or equal to {}")
    GREATER = (">", "greater than {}")
    GREATER_OR_EQUAL = ("≥", "greater than or equal to {}")

    def __init__(self, symbol: str, template: str):
        self.symbol = symbol
        self.template = template

    def __str__(self) -> str:
        return self.name.lower().replace("_", " ")

    def describe(self, reference: Any) -> str:
        """Describe a comparison against a reference value."""
        return self.template.format(reference)

    def apply(self, left: Any, right: Any) -> bool:
        """Evaluate ``left <op> right``."""
        return bool(_COMPARATORS[self](left, right))

    @classmethod
    def parse(cls, text: str | RelOp) -> RelOp:
        """Parse an operator from its name or symbol.

        Accepts member names and short names in any case ("less_or_equal",
        "less or equal", "le", "LE"), and ASCII or Unicode symbols ("<=", "≤").

        Args:
            text: Operator text, or an operator which is returned unchanged

        Returns:
            The matching operator

        Raises:
            ConstraintConfigurationError: If the text names no operator
        """
        if isinstance(text, RelOp):
            return text
        key = str(text).strip()
        if key.lower() in _SYMBOL_ALIASES:
            return _SYMBOL_ALIASES[key.lower()]
        name = key.upper().replace(" ", "_").replace("-", "_")
        if name in cls.__members__:
            return cls.__members__[name]
        raise ConstraintConfigurationError(
            f"Unknown relational operator: {text!r}",
            parameter="operator",
            available=sorted(cls.__members__),
        )


_COMPARATORS: dict[RelOp, Callable[[Any, Any], Any]] = {
    RelOp.EQUAL: operator.eq,
    RelOp.NOT_EQUAL: operator.ne,
    RelOp.LESS: operator.lt,
    RelOp.LESS_OR_EQUAL: operator.le,
    RelOp.GREATER: operator.gt,
    RelOp.GREATER_OR_EQUAL: operator.ge,
}

_SYMBOL_ALIASES: dict[str, RelOp] = {
    "=": RelOp.EQUAL,
    "==": RelOp.EQUAL,
    "eq": RelOp.EQUAL,
    "≠": RelOp.NOT_EQUAL,
    "!=": RelOp.NOT_EQUAL,
    "ne": RelOp.NOT_EQUAL,
    "<": RelOp.LESS,
    "lt": RelOp.LESS,
    "≤": RelOp.LESS_OR_EQUAL,
    "<=": RelOp.LESS_OR_EQUAL,
    "le": RelOp.LESS_OR_EQUAL,
    ">": RelOp.GREATER,
    "gt": RelOp.GREATER,
    "≥": RelOp.GREATER_OR_EQUAL,
    ">=": RelOp.GREATER_OR_EQUAL,
    "ge": RelOp.GREATER_OR_EQUAL,
}


class Relational(Constraint[V]):
    """Value must compare to a reference value under an operator.

    ``Relational(RelOp.LESS, 0)`` is valid for values less than 0. The value
    type must support the comparison; ordering operators need a total order.
    """

    def __init__(self, op: RelOp | str, reference: V):
        self._op = RelOp.parse(op)
        self._reference = reference

    @property
    def op(self) -> RelOp:
        return self._op

    @property
    def reference(self) -> V:
        return self._reference

    def description(self) -> str:
        return self._op.describe(self._reference)

    def is_valid(self, value: V) -> bool:
        return self._op.apply(value, self._reference)


class Equals(Relational[V]):
    """Value must equal the reference value."""

    def __init__(self, reference: V):
        super().__init__(RelOp.EQUAL, reference)


class NotEqualTo(Relational[V]):
    """Value must differ from the reference value."""

    def __init__(self, reference: V):
        super().__init__(RelOp.NOT_EQUAL, reference)


class LessThan(Relational[V]):
    """Value must be less than the reference value."""

    def __init__(self, reference: V):
        super().__init__(RelOp.LESS, reference)


class LessThanOrEqualTo(Relational[V]):
    """Value must be less than or equal to the reference value."""

    def __init__(self, reference: V):
        super().__init__(RelOp.LESS_OR_EQUAL, reference)


class GreaterThan(Relational[V]):
    """Value must be greater than the reference value."""

    def __init__(self, reference: V):
        super().__init__(RelOp.GREATER, reference)


class GreaterThanOrEqualTo(Relational[V]):
    """Value must be greater than or equal to the reference value."""

    def __init__(self, reference: V):
        super().__init__(RelOp.GREATER_OR_EQUAL, reference)


class Min(Relational[V]):
    """Value must be at least the reference value (described as "min V")."""

    def __init__(self, reference: V):
        super().__init__(RelOp.GREATER_OR_EQUAL, reference)

    def description(self) -> str:
        return f"min {self._reference}"


class Max(Relational[V]):
    """Value must be at most the reference value (described as "max V")."""

    def __init__(self, reference: V):
        super().__init__(RelOp.LESS_OR_EQUAL, reference)

    def description(self) -> str:
        return f"max {self._reference}"


class Membership(Constraint[V]):
    """Value must (or, when negated, must not) be one of the options.

    The options are copied at construction and keep their order, which is
    also the order they are listed in the description.
    """

    def __init__(self, options: tuple[V, ...] | list[V], negate: bool = False):
        self._options = tuple(options)
        self._negate = negate

    @property
    def options(self) -> tuple[V, ...]:
        return self._options

    @property
    def negate(self) -> bool:
        return self._negate

    def description(self) -> str:
        listed = "[" + ", ".join(str(option) for option in self._options) + "]"
        return f"none of {listed}" if self._negate else f"one of {listed}"

    def is_valid(self, value: V) -> bool:
        found = any(option == value for option in self._options)
        return found != self._negate


class OneOf(Membership[V]):
    """Value must be one of the options. An empty OneOf accepts nothing."""

    def __init__(self, *options: V):
        super().__init__(options, negate=False)


class NoneOf(Membership[V]):
    """Value must be none of the options. An empty NoneOf accepts everything."""

    def __init__(self, *options: V):
        super().__init__(options, negate=True)


class Range(Constraint[V]):
    """Value must lie within [minimum, maximum], both ends inclusive."""

    def __init__(self, minimum: V, maximum: V):
        """Initialize range constraint.

        Args:
            minimum: Lowest valid value (inclusive)
            maximum: Highest valid value (inclusive)

        Raises:
            ConstraintConfigurationError: If the bounds are not comparable
                or minimum is greater than maximum
        """
        try:
            inverted = minimum > maximum  # type: ignore[operator]
        except TypeError as e:
            raise ConstraintConfigurationError(
                f"Range bounds are not comparable: {minimum!r}, {maximum!r}",
                parameter="minimum",
            ) from e
        if inverted:
            raise ConstraintConfigurationError(
                f"minimum ({minimum}) cannot be greater than maximum ({maximum})",
                parameter="minimum",
            )
        self._minimum = minimum
        self._maximum = maximum

    @property
    def minimum(self) -> V:
        return self._minimum

    @property
    def maximum(self) -> V:
        return self._maximum

    def description(self) -> str:
        return f"from {render_literal(self._minimum)} to {render_literal(self._maximum)}"

    def is_valid(self, value: V) -> bool:
        return bool(self._minimum <= value <= self._maximum)  # type: ignore[operator]


class Negated(Constraint[V]):
    """Value must not satisfy the wrapped constraint."""

    def __init__(self, constraint: Constraint[V], description: str | None = None):
        """Initialize the negation.

        Args:
            constraint: Constraint to negate
            description: Optional description override. Without it, the
                description is "not " followed by the wrapped description.
        """
        self._constraint = constraint
        self._description = description

    @property
    def constraint(self) -> Constraint[V]:
        return self._constraint

    def description(self) -> str:
        if self._description is not None:
            return self._description
        return "not " + self._constraint.description()

    def is_valid(self, value: V) -> bool:
        return not self._constraint.is_valid(value)


Negate = Negated


__all__ = [
    "Equals",
    "Func",
    "GreaterThan",
    "GreaterThanOrEqualTo",
    "LessThan",
    "LessThanOrEqualTo",
    "Match",
    "Max",
    "Membership",
    "Min",
    "Negate",
    "Negated",
    "NoneOf",
    "NotEqualTo",
    "OneOf",
    "OperandFunc",
    "Range",
    "RelOp",
    "Relational",
]
