"""Numeric convenience constraints.

The module-level instances (``POSITIVE``, ``EVEN``, ...) are created once at
import and never change, so they can be shared freely.
"""

from __future__ import annotations

from numbers import Integral, Real

from .primitives import Func


def is_positive(value: Real) -> bool:
    return value > 0


def is_negative(value: Real) -> bool:
    return value < 0


def is_even(value: Integral) -> bool:
    return (value & 1) == 0


def is_odd(value: Integral) -> bool:
    return (value & 1) == 1


def is_power_of_two(value: Integral) -> bool:
    """Exactly one bit set; zero and negative values never qualify."""
    return value > 0 and (value & (value - 1)) == 0


class Positive(Func[Real]):
    """Value must be greater than zero."""

    def __init__(self) -> None:
        super().__init__("positive", is_positive)


class Negative(Func[Real]):
    """Value must be less than zero."""

    def __init__(self) -> None:
        super().__init__("negative", is_negative)


class Even(Func[Integral]):
    """Integer must be even (lowest bit clear)."""

    def __init__(self) -> None:
        super().__init__("even", is_even)


class Odd(Func[Integral]):
    """Integer must be odd (lowest bit set)."""

    def __init__(self) -> None:
        super().__init__("odd", is_odd)


class PowerOfTwo(Func[Integral]):
    """Integer must be a power of two (1, 2, 4, ...)."""

    def __init__(self) -> None:
        super().__init__("power of two", is_power_of_two)


POSITIVE = Positive()
NEGATIVE = Negative()
EVEN = Even()
ODD = Odd()
POWER_OF_TWO = PowerOfTwo()


__all__ = [
    "EVEN",
    "Even",
    "NEGATIVE",
    "Negative",
    "ODD",
    "Odd",
    "POSITIVE",
    "POWER_OF_TWO",
    "Positive",
    "PowerOfTwo",
    "is_even",
    "is_negative",
    "is_odd",
    "is_positive",
    "is_power_of_two",
]
