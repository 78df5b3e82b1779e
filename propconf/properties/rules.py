"""
Validation Rules Module.

Business rules attached to a property (e.g. "must end with XXX").
Rules are only evaluated against explicit values, and never by loaders:
the downstream merger decides when a final value exists to check.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Any, FrozenSet, Optional, Union

from propconf.properties.types import PropertyType

Number = Union[int, Decimal]

_TEXT_TYPES: FrozenSet[PropertyType] = frozenset({PropertyType.STRING})
_NUMERIC_TYPES: FrozenSet[PropertyType] = frozenset(
    {PropertyType.INTEGER, PropertyType.DECIMAL}
)


class ValidationRule(ABC):
    """
    Abstract base class for a single property validation rule.

    Subclasses implement `check`, returning a violation message or None,
    and declare which property types they apply to.
    """

    applies_to: FrozenSet[PropertyType] = frozenset()

    def is_valid_for(self, value_type: PropertyType) -> bool:
        """Check whether this rule can be attached to a property of the given type."""
        return value_type in self.applies_to

    @abstractmethod
    def check(self, value: Any) -> Optional[str]:
        """
        Check a typed value against this rule.

        Args:
            value: Typed value (never None).

        Returns:
            A violation message, or None if the value satisfies the rule.
        """
        ...

    @property
    @abstractmethod
    def description(self) -> str:
        """Short human-readable form of the rule (used in reports)."""
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.description})"


class StartsWith(ValidationRule):
    applies_to = _TEXT_TYPES

    def __init__(self, prefix: str, ignore_case: bool = False) -> None:
        self.prefix = prefix
        self.ignore_case = ignore_case

    @property
    def description(self) -> str:
        return f"must start with '{self.prefix}'"

    def check(self, value: Any) -> Optional[str]:
        text, prefix = str(value), self.prefix
        if self.ignore_case:
            text, prefix = text.lower(), prefix.lower()
        if text.startswith(prefix):
            return None
        return f"'{value}' {self.description}"


class EndsWith(ValidationRule):
    applies_to = _TEXT_TYPES

    def __init__(self, suffix: str, ignore_case: bool = False) -> None:
        self.suffix = suffix
        self.ignore_case = ignore_case

    @property
    def description(self) -> str:
        return f"must end with '{self.suffix}'"

    def check(self, value: Any) -> Optional[str]:
        text, suffix = str(value), self.suffix
        if self.ignore_case:
            text, suffix = text.lower(), suffix.lower()
        if text.endswith(suffix):
            return None
        return f"'{value}' {self.description}"


class MatchesRegex(ValidationRule):
    """The whole value must match the pattern."""

    applies_to = _TEXT_TYPES

    def __init__(self, pattern: str) -> None:
        self.pattern = pattern
        self._compiled = re.compile(pattern)

    @property
    def description(self) -> str:
        return f"must match the pattern '{self.pattern}'"

    def check(self, value: Any) -> Optional[str]:
        if self._compiled.fullmatch(str(value)):
            return None
        return f"'{value}' {self.description}"


class _NumericBound(ValidationRule):
    """Shared logic for the comparison rules."""

    applies_to = _NUMERIC_TYPES
    _phrase = ""

    def __init__(self, bound: Number) -> None:
        self.bound = bound

    @property
    def description(self) -> str:
        return f"must be {self._phrase} {self.bound}"

    @abstractmethod
    def _holds(self, value: Number) -> bool:
        ...

    def check(self, value: Any) -> Optional[str]:
        if self._holds(value):
            return None
        return f"{value} {self.description}"


class GreaterThan(_NumericBound):
    _phrase = "greater than"

    def _holds(self, value: Number) -> bool:
        return value > self.bound


class GreaterThanOrEqualTo(_NumericBound):
    _phrase = "greater than or equal to"

    def _holds(self, value: Number) -> bool:
        return value >= self.bound


class LessThan(_NumericBound):
    _phrase = "less than"

    def _holds(self, value: Number) -> bool:
        return value < self.bound


class LessThanOrEqualTo(_NumericBound):
    _phrase = "less than or equal to"

    def _holds(self, value: Number) -> bool:
        return value <= self.bound
