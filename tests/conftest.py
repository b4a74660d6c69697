"""Pytest configuration for dataknobs_constraints tests."""

import sys
from pathlib import Path

import pytest

# Add the package source to path for testing
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from dataknobs_constraints import (  # noqa: E402
    NON_BLANK,
    NON_EMPTY,
    ConstraintSet,
    Func,
    LengthRange,
    MinLength,
    Negate,
    NoConsecutiveRune,
    RuneAtIndexAny,
    RuneMatch,
    RuneRange,
    RunesAny,
    Suffix,
)


@pytest.fixture
def username_rules():
    """The individual rules of a username, keyed by purpose."""
    letters = (RuneRange("A", "Z"), RuneRange("a", "z"))
    runes = RunesAny(*letters, RuneRange("0", "9"), RuneMatch("_"))
    return {
        "length": LengthRange(6, 32),
        "allowed_characters": Func(
            "allowed characters are A to Z (case-insensitive), 0 to 9 and underscore",
            runes.is_valid,
        ),
        "first_character": Func(
            "starts with a letter",
            RuneAtIndexAny(0, *letters).is_valid,
        ),
        "last_character": Negate(Suffix("_"), "ends with anything but underscore"),
        "no_consecutive": NoConsecutiveRune("_"),
    }


@pytest.fixture
def username(username_rules):
    """Username constraint set built from the individual rules."""
    return ConstraintSet(*username_rules.values())


@pytest.fixture
def name_set():
    """Non-empty, at least five characters, not just whitespace."""
    return ConstraintSet(NON_EMPTY, MinLength(5), NON_BLANK)
