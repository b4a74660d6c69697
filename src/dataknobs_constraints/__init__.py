"""Composable value constraints for dataknobs packages.

Build small, self-describing rules over values and combine them:

- Atomic constraints: predicates, reference values, relational operators,
  membership, ranges, lengths, negation
- Combinators: ConstraintSet (all must hold) and AnyOf (one must hold)
- Violation reporting: the first violation, every violation, or a
  ViolationError whose message reads "required to be ..."

Example:
    ```python
    from dataknobs_constraints import (
        NON_BLANK, NON_EMPTY, ConstraintSet, MinLength, validate_or_error,
    )

    name = ConstraintSet(NON_EMPTY, MinLength(5), NON_BLANK)
    name.validate_all("")
    # [<Func: non-empty>, <MinLength: min length 5>]

    error = validate_or_error("", name)
    str(error)
    # 'required to be non-empty, min length 5'
    ```
"""

from .base import Constraint, SupportsValidateAll
from .composite import All, AnyOf, ConstraintSet
from .exceptions import (
    ConstraintConfigurationError,
    ConstraintsError,
    SupportsViolatedConstraint,
    ViolationError,
    extract_violated_constraint,
    violation_message,
)
from .factory import ConstraintFactory, constraint_factory, load_constraints
from .length import Length, LengthConstraint, LengthRange, MaxLength, MinLength
from .literals import Rune, render_literal
from .numeric import (
    EVEN,
    NEGATIVE,
    ODD,
    POSITIVE,
    POWER_OF_TWO,
    Even,
    Negative,
    Odd,
    Positive,
    PowerOfTwo,
)
from .primitives import (
    Equals,
    Func,
    GreaterThan,
    GreaterThanOrEqualTo,
    LessThan,
    LessThanOrEqualTo,
    Match,
    Max,
    Min,
    Negate,
    Negated,
    NoneOf,
    NotEqualTo,
    OneOf,
    OperandFunc,
    Range,
    RelOp,
    Relational,
)
from .registry import builtin_constraints, get_builtin
from .result import ValidationResult
from .runes import PRINTABLE_RUNE, RuneFromString, RuneMatch, RuneOneOf, RuneRange
from .text import (
    EMPTY,
    NON_BLANK,
    NON_EMPTY,
    NoConsecutiveRune,
    Pattern,
    Prefix,
    RuneAtIndexAny,
    RunesAny,
    Suffix,
)
from .validation import check, ensure_valid, is_valid, validate_or_error

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Abstraction
    "Constraint",
    "SupportsValidateAll",
    # Primitives
    "Func",
    "OperandFunc",
    "Match",
    "RelOp",
    "Relational",
    "Equals",
    "NotEqualTo",
    "LessThan",
    "LessThanOrEqualTo",
    "GreaterThan",
    "GreaterThanOrEqualTo",
    "Min",
    "Max",
    "OneOf",
    "NoneOf",
    "Range",
    "Negated",
    "Negate",
    # Combinators
    "ConstraintSet",
    "All",
    "AnyOf",
    # Numeric
    "Positive",
    "Negative",
    "Even",
    "Odd",
    "PowerOfTwo",
    "POSITIVE",
    "NEGATIVE",
    "EVEN",
    "ODD",
    "POWER_OF_TWO",
    # Length
    "LengthConstraint",
    "Length",
    "MinLength",
    "MaxLength",
    "LengthRange",
    # Text
    "EMPTY",
    "NON_EMPTY",
    "NON_BLANK",
    "Prefix",
    "Suffix",
    "NoConsecutiveRune",
    "RunesAny",
    "RuneAtIndexAny",
    "Pattern",
    # Runes
    "Rune",
    "RuneMatch",
    "RuneOneOf",
    "RuneRange",
    "RuneFromString",
    "PRINTABLE_RUNE",
    "render_literal",
    # Errors
    "ConstraintsError",
    "ConstraintConfigurationError",
    "ViolationError",
    "SupportsViolatedConstraint",
    "extract_violated_constraint",
    "violation_message",
    # Validation
    "is_valid",
    "validate_or_error",
    "check",
    "ensure_valid",
    "ValidationResult",
    # Registry and configuration
    "builtin_constraints",
    "get_builtin",
    "ConstraintFactory",
    "constraint_factory",
    "load_constraints",
]
