"""Rendering of reference values inside constraint descriptions.

Text is double-quoted, a single character (a :class:`Rune`) is
single-quoted, and anything else falls back to ``str()``. New value types
can register their own rendering::

    @render_literal.register
    def _(value: Decimal) -> str:
        return f"{value:f}"
"""

from __future__ import annotations

from functools import singledispatch
from typing import Any

from .exceptions import ConstraintConfigurationError

_SPECIAL_ESCAPES = {
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
}


class Rune(str):
    """A single character.

    Runes compare equal to plain one-character strings, so only the
    reference values of a constraint need to be wrapped; values under
    validation can stay plain ``str``.
    """

    def __new__(cls, value: str | int) -> Rune:
        if isinstance(value, int) and not isinstance(value, bool):
            try:
                value = chr(value)
            except (ValueError, OverflowError) as e:
                raise ConstraintConfigurationError(
                    f"Invalid code point: {value}", parameter="value"
                ) from e
        if not isinstance(value, str) or len(value) != 1:
            raise ConstraintConfigurationError(
                f"A rune must be exactly one character, got {value!r}",
                parameter="value",
            )
        return super().__new__(cls, value)


def quote(text: str, quote_char: str = '"') -> str:
    """Quote text, escaping the quote character and non-printable characters.

    Args:
        text: Text to quote
        quote_char: Quote character to wrap the text with

    Returns:
        The quoted text
    """
    parts = [quote_char]
    for ch in text:
        if ch == quote_char or ch == "\\":
            parts.append("\\" + ch)
        elif ch in _SPECIAL_ESCAPES:
            parts.append(_SPECIAL_ESCAPES[ch])
        elif ch.isprintable():
            parts.append(ch)
        else:
            code = ord(ch)
            if code <= 0xFF:
                parts.append(f"\\x{code:02x}")
            elif code <= 0xFFFF:
                parts.append(f"\\u{code:04x}")
            else:
                parts.append(f"\\U{code:08x}")
    parts.append(quote_char)
    return "".join(parts)


@singledispatch
def render_literal(value: Any) -> str:
    """Render a reference value for use in a description."""
    return str(value)


@render_literal.register
def _(value: str) -> str:
    return quote(value, '"')


@render_literal.register
def _(value: Rune) -> str:
    return quote(value, "'")


@render_literal.register
def _(value: bytes) -> str:
    return repr(value)


__all__ = ["Rune", "quote", "render_literal"]
