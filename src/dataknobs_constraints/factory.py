"""Factory for building constraints from configuration."""

import logging
from typing import Any

from dataknobs_config import Config, FactoryBase

from .base import Constraint
from .composite import AnyOf, ConstraintSet
from .exceptions import ConstraintConfigurationError
from .length import LengthConstraint
from .primitives import (
    Equals,
    GreaterThan,
    GreaterThanOrEqualTo,
    LessThan,
    LessThanOrEqualTo,
    Match,
    Max,
    Min,
    Negated,
    NoneOf,
    NotEqualTo,
    OneOf,
    Range,
    Relational,
)
from .registry import builtin_constraints
from .runes import RuneRange
from .text import NoConsecutiveRune, Pattern, Prefix, Suffix

logger = logging.getLogger(__name__)

_SINGLE_VALUE_KINDS: dict[str, type[Constraint]] = {
    "match": Match,
    "equals": Equals,
    "not_equal_to": NotEqualTo,
    "less_than": LessThan,
    "less_than_or_equal_to": LessThanOrEqualTo,
    "greater_than": GreaterThan,
    "greater_than_or_equal_to": GreaterThanOrEqualTo,
    "min": Min,
    "max": Max,
    "prefix": Prefix,
    "suffix": Suffix,
}


class ConstraintFactory(FactoryBase):
    """Factory for creating constraints from configuration.

    The ``kind`` option selects the constraint; the remaining options
    configure it. Composite kinds nest further constraint configurations.

    Configuration Options:
        kind (str): Constraint kind (see below)
        value: Reference value for match, equals, not_equal_to, less_than,
            less_than_or_equal_to, greater_than, greater_than_or_equal_to,
            min, max, prefix, suffix and op
        operator (str): Operator name or symbol for op ("<", "ge", ...)
        min / max: Bounds for range, rune_range and length
        exact (int): Exact length for length
        values (list): Options for one_of and none_of
        pattern (str): Regular expression for pattern
        char (str): Character for no_consecutive
        constraints (list): Member configurations for set/all and any
        constraint (dict): Wrapped configuration for not
        description (str): Description override for not and pattern

    Parameterless kinds (empty, non_empty, non_blank, positive, negative,
    even, odd, power_of_two, printable_rune) resolve to the shared
    built-in instances.

    Example Configuration:
        constraints:
          - name: username
            factory: dataknobs_constraints.factory.ConstraintFactory
            kind: set
            constraints:
              - kind: non_empty
              - kind: length
                min: 6
                max: 32
              - kind: pattern
                pattern: "^[A-Za-z0-9_]+$"
                description: allowed characters are A to Z, 0 to 9 and underscore
          - name: port
            factory: dataknobs_constraints.factory.ConstraintFactory
            kind: range
            min: 1
            max: 65535
    """

    def create(self, **config: Any) -> Constraint:
        """Create a Constraint from configuration.

        Args:
            **config: Constraint configuration

        Returns:
            Constraint instance

        Raises:
            ConstraintConfigurationError: If the kind is unknown or a
                required option is missing
        """
        kind = str(config.get("kind", "")).lower()
        logger.debug(f"Creating constraint of kind: {kind}")
        return self._build(kind, config)

    def _build(self, kind: str, config: dict[str, Any]) -> Constraint:
        if kind in _SINGLE_VALUE_KINDS:
            return _SINGLE_VALUE_KINDS[kind](_require(config, "value", kind))

        if kind == "op":
            return Relational(
                _require(config, "operator", kind),
                _require(config, "value", kind),
            )

        if kind == "range":
            return Range(_require(config, "min", kind), _require(config, "max", kind))

        if kind == "rune_range":
            return RuneRange(_require(config, "min", kind), _require(config, "max", kind))

        if kind == "one_of":
            return OneOf(*_require(config, "values", kind))

        if kind == "none_of":
            return NoneOf(*_require(config, "values", kind))

        if kind == "length":
            if "exact" in config:
                exact = config["exact"]
                return LengthConstraint(min_length=exact, max_length=exact)
            return LengthConstraint(min_length=config.get("min"), max_length=config.get("max"))

        if kind == "pattern":
            return Pattern(_require(config, "pattern", kind), config.get("description"))

        if kind == "no_consecutive":
            return NoConsecutiveRune(_require(config, "char", kind))

        if kind in ("set", "all"):
            return ConstraintSet(*self._build_members(config.get("constraints", [])))

        if kind == "any":
            return AnyOf(*self._build_members(config.get("constraints", [])))

        if kind == "not":
            inner = _require(config, "constraint", kind)
            return Negated(self._build_member(inner), config.get("description"))

        if kind in builtin_constraints:
            return builtin_constraints.get(kind)

        raise ConstraintConfigurationError(
            f"Unknown constraint kind: {kind!r}",
            parameter="kind",
            available=sorted([*_SINGLE_VALUE_KINDS, *_CONFIGURED_KINDS, *builtin_constraints.list_keys()]),
        )

    def _build_member(self, member_config: Any) -> Constraint:
        if not isinstance(member_config, dict):
            raise ConstraintConfigurationError(
                f"Constraint configuration must be a mapping, got {type(member_config).__name__}",
                parameter="constraints",
            )
        return self.create(**member_config)

    def _build_members(self, member_configs: list[Any]) -> list[Constraint]:
        return [self._build_member(member) for member in member_configs]


_CONFIGURED_KINDS = (
    "op", "range", "rune_range", "one_of", "none_of", "length",
    "pattern", "no_consecutive", "set", "all", "any", "not",
)


def _require(config: dict[str, Any], key: str, kind: str) -> Any:
    if key not in config or config[key] is None:
        raise ConstraintConfigurationError(
            f"Constraint kind '{kind}' requires option '{key}'",
            parameter=key,
            kind=kind,
        )
    return config[key]


def load_constraints(config: Config, type_name: str = "constraints") -> dict[str, Constraint]:
    """Build every constraint defined in a section of a dataknobs Config.

    Entries are built with :class:`ConstraintFactory`; a ``factory`` option
    on an entry is not required and is ignored here.

    Args:
        config: Configuration holding the constraint definitions
        type_name: Configuration section to read

    Returns:
        Constraints keyed by entry name, in definition order
    """
    if type_name not in config.get_types():
        logger.warning(f"No '{type_name}' section in configuration")
        return {}

    constraints: dict[str, Constraint] = {}
    for name in config.get_names(type_name):
        entry = config.get(type_name, name)
        for key in ("type", "name", "factory"):
            entry.pop(key, None)
        constraints[name] = constraint_factory.create(**entry)

    logger.info(f"Loaded {len(constraints)} constraints from '{type_name}'")
    return constraints


# Singleton instance for registration
constraint_factory = ConstraintFactory()


__all__ = ["ConstraintFactory", "constraint_factory", "load_constraints"]
