"""Registry of the built-in, parameterless constraints.

The registered constraints are the immutable module-level instances from
:mod:`~dataknobs_constraints.numeric`, :mod:`~dataknobs_constraints.text` and
:mod:`~dataknobs_constraints.runes`, keyed by a stable name. The factory
resolves constraint kinds through this registry, and applications may
register their own shared constraints next to them.
"""

from __future__ import annotations

from dataknobs_common import Registry

from .base import Constraint
from .numeric import EVEN, NEGATIVE, ODD, POSITIVE, POWER_OF_TWO
from .runes import PRINTABLE_RUNE
from .text import EMPTY, NON_BLANK, NON_EMPTY

builtin_constraints: Registry[Constraint] = Registry("builtin_constraints")

for _name, _constraint in (
    ("empty", EMPTY),
    ("non_empty", NON_EMPTY),
    ("non_blank", NON_BLANK),
    ("positive", POSITIVE),
    ("negative", NEGATIVE),
    ("even", EVEN),
    ("odd", ODD),
    ("power_of_two", POWER_OF_TWO),
    ("printable_rune", PRINTABLE_RUNE),
):
    builtin_constraints.register(_name, _constraint, metadata={"builtin": True})


def get_builtin(name: str) -> Constraint:
    """Look up a built-in constraint by name.

    Raises:
        NotFoundError: If no constraint is registered under the name
    """
    return builtin_constraints.get(name)


__all__ = ["builtin_constraints", "get_builtin"]
