"""String constraints.

Example:
    ```python
    from dataknobs_constraints import (
        ConstraintSet, LengthRange, Negate, NoConsecutiveRune, RuneAtIndexAny,
        RuneMatch, RuneRange, RunesAny, Suffix,
    )

    username = ConstraintSet(
        LengthRange(6, 32),
        RunesAny(RuneRange("A", "Z"), RuneRange("a", "z"), RuneRange("0", "9"), RuneMatch("_")),
        RuneAtIndexAny(0, RuneRange("A", "Z"), RuneRange("a", "z")),
        Negate(Suffix("_"), "ends with anything but underscore"),
        NoConsecutiveRune("_"),
    )
    ```
"""

from __future__ import annotations

import re
from re import Pattern as RegexPattern

from .base import Constraint
from .exceptions import ConstraintConfigurationError
from .literals import Rune, quote, render_literal
from .primitives import Func, OperandFunc


def _is_non_blank(value: str) -> bool:
    # Empty text counts as non-blank; pair with NON_EMPTY to reject it
    return value == "" or value.strip() != ""


EMPTY: Func[str] = Func("empty", lambda v: v == "")

NON_EMPTY: Func[str] = Func("non-empty", lambda v: v != "")

NON_BLANK: Func[str] = Func("non-blank", _is_non_blank)


class Prefix(OperandFunc[str, str]):
    """Text must start with the given prefix."""

    def __init__(self, prefix: str):
        super().__init__(f"prefix {quote(prefix)}", prefix, str.startswith)


class Suffix(OperandFunc[str, str]):
    """Text must end with the given suffix."""

    def __init__(self, suffix: str):
        super().__init__(f"suffix {quote(suffix)}", suffix, str.endswith)


class NoConsecutiveRune(Func[str]):
    """Text must not contain the given character twice in a row."""

    def __init__(self, rune: str | int):
        self._rune = Rune(rune)
        pair = str(self._rune) * 2
        super().__init__(
            f"no consecutive {render_literal(self._rune)}",
            lambda v: pair not in v,
        )


def _describe_any(constraints: tuple[Constraint[str], ...]) -> str:
    return " or ".join(c.description() for c in constraints)


class RunesAny(Func[str]):
    """Every character of the text must satisfy at least one rune constraint.

    Empty text has no characters and is therefore valid.
    """

    def __init__(self, *rune_constraints: Constraint[str]):
        self._rune_constraints = tuple(rune_constraints)
        super().__init__(_describe_any(self._rune_constraints), self._check)

    def _check(self, value: str) -> bool:
        return all(
            any(c.is_valid(ch) for c in self._rune_constraints)
            for ch in value
        )


class RuneAtIndexAny(Func[str]):
    """The character at a position must satisfy at least one rune constraint.

    A negative index counts from the end of the text. Text too short to have
    a character at the index is invalid.
    """

    def __init__(self, index: int, *rune_constraints: Constraint[str]):
        self._index = index
        self._rune_constraints = tuple(rune_constraints)
        super().__init__(_describe_any(self._rune_constraints), self._check)

    @property
    def index(self) -> int:
        return self._index

    def _check(self, value: str) -> bool:
        try:
            ch = value[self._index]
        except IndexError:
            return False
        return any(c.is_valid(ch) for c in self._rune_constraints)


class Pattern(Func[str]):
    """Text must match a regular expression, anchored at the start."""

    def __init__(self, pattern: str | RegexPattern[str], description: str | None = None):
        """Initialize pattern constraint.

        Args:
            pattern: Regex pattern (string or compiled pattern)
            description: Optional description; defaults to 'pattern "<regex>"'

        Raises:
            ConstraintConfigurationError: If the pattern does not compile
        """
        if isinstance(pattern, str):
            try:
                self.regex = re.compile(pattern)
            except re.error as e:
                raise ConstraintConfigurationError(
                    f"Invalid pattern {pattern!r}: {e}", parameter="pattern"
                ) from e
        else:
            self.regex = pattern
        super().__init__(description or f"pattern {quote(self.regex.pattern)}", self.regex.match)


__all__ = [
    "EMPTY",
    "NON_BLANK",
    "NON_EMPTY",
    "NoConsecutiveRune",
    "Pattern",
    "Prefix",
    "RuneAtIndexAny",
    "RunesAny",
    "Suffix",
]
