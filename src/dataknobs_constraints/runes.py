"""Constraints over single characters (runes).

Values checked by these constraints are one-character strings, such as the
items produced by iterating over a ``str``. Reference characters are wrapped
in :class:`~dataknobs_constraints.literals.Rune` so descriptions quote them
as characters: ``RuneRange("a", "z")`` is described as "from 'a' to 'z'".
"""

from __future__ import annotations

from .literals import Rune, quote
from .primitives import Func, Match, OneOf, Range


class RuneMatch(Match[str]):
    """Character must be the given character."""

    def __init__(self, rune: str | int):
        super().__init__(Rune(rune))


class RuneOneOf(OneOf[str]):
    """Character must be one of the given characters."""

    def __init__(self, *runes: str | int):
        super().__init__(*(Rune(r) for r in runes))


class RuneRange(Range[str]):
    """Character must lie within a code point range, both ends inclusive.

    ``RuneRange("a", "z")`` is valid for every lowercase latin letter.
    """

    def __init__(self, minimum: str | int, maximum: str | int):
        super().__init__(Rune(minimum), Rune(maximum))


class RuneFromString(Func[str]):
    """Character must appear in the given string of allowed characters."""

    def __init__(self, allowed: str):
        self._allowed = frozenset(allowed)
        super().__init__(f"rune from {quote(allowed)}", self._allowed.__contains__)


PRINTABLE_RUNE = Func("printable rune", str.isprintable)


__all__ = ["PRINTABLE_RUNE", "RuneFromString", "RuneMatch", "RuneOneOf", "RuneRange"]
