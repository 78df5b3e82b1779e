"""
Property Module.

A Property is an immutable, typed configuration point. Application code
declares each property once (inside a PropertyGroup) and the registry,
loaders and reports only ever read it.

Identity is reference identity: two properties with identical settings are
still two distinct configuration points.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from decimal import Decimal, InvalidOperation
from typing import Any, Iterable, List, Optional, Tuple

from propconf.properties.rules import ValidationRule
from propconf.properties.types import PropertyType, ValueParseError


class Property(ABC):
    """
    Abstract base class for all typed configuration points.

    Subclasses set `value_type` and implement `_convert`, the single
    conversion entry point used by `parse_value`.

    Attributes:
        value_type: The PropertyType tag of this property.
        default: Default value, or None when the property has none.
        aliases_in: Input-only alias names, in declaration order.
        aliases_in_and_out: Aliases usable for input and for display.
        rules: Validation rules, evaluated in order.
        required: Whether the downstream merger must find a value.
        description: Free-text description, shown next to its problems in reports.
    """

    value_type: PropertyType

    def __init__(
        self,
        default: Any = None,
        *,
        aliases_in: Iterable[str] = (),
        aliases_in_and_out: Iterable[str] = (),
        rules: Iterable[ValidationRule] = (),
        required: bool = False,
        description: str = "",
    ) -> None:
        rules = tuple(rules)
        for rule in rules:
            if not rule.is_valid_for(self.value_type):
                raise ValueError(
                    f"Rule {rule!r} cannot be applied to a "
                    f"{self.value_type.value} property"
                )

        if default is not None and not self._accepts(default):
            raise ValueError(
                f"Default value {default!r} is not a valid "
                f"{self.value_type.value} value"
            )

        object.__setattr__(self, "default", default)
        object.__setattr__(self, "aliases_in", _clean_aliases(aliases_in))
        object.__setattr__(self, "aliases_in_and_out", _clean_aliases(aliases_in_and_out))
        object.__setattr__(self, "rules", rules)
        object.__setattr__(self, "required", required)
        object.__setattr__(self, "description", description)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable (tried to set '{name}')")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable (tried to delete '{name}')")

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(default={self.default!r}, "
            f"aliases_in={list(self.aliases_in)}, "
            f"aliases_in_and_out={list(self.aliases_in_and_out)})"
        )

    def parse_value(self, raw: str) -> Any:
        """
        Convert a raw string into this property's value type.

        Args:
            raw: Raw string from a configuration source.

        Returns:
            The typed value.

        Raises:
            ValueParseError: If the string is not a valid value for this type.
        """
        return self._convert(raw)

    def validate(self, value: Any) -> List[str]:
        """
        Run the validation rules against a typed value.

        Args:
            value: Typed value; None is never validated.

        Returns:
            Violation messages in rule order (empty when valid).
        """
        if value is None:
            return []
        violations = []
        for rule in self.rules:
            message = rule.check(value)
            if message is not None:
                violations.append(message)
        return violations

    @abstractmethod
    def _convert(self, raw: str) -> Any:
        ...

    @abstractmethod
    def _accepts(self, value: Any) -> bool:
        """Check whether an already-typed value belongs to this property's type."""
        ...


def _clean_aliases(aliases: Iterable[str]) -> Tuple[str, ...]:
    cleaned = []
    for alias in aliases:
        if not isinstance(alias, str) or not alias.strip():
            raise ValueError(f"Alias names must be non-empty strings, got {alias!r}")
        cleaned.append(alias.strip())
    return tuple(cleaned)


class StrProp(Property):
    """A string property; the raw value is used unchanged."""

    value_type = PropertyType.STRING

    def _convert(self, raw: str) -> str:
        return raw

    def _accepts(self, value: Any) -> bool:
        return isinstance(value, str)


class FlagProp(Property):
    """A boolean property; accepts 'true' / 'false' in any case."""

    value_type = PropertyType.FLAG

    def _convert(self, raw: str) -> bool:
        text = raw.strip().lower()
        if text == "true":
            return True
        if text == "false":
            return False
        raise ValueParseError(f"'{raw}' is not a boolean (expected 'true' or 'false')")

    def _accepts(self, value: Any) -> bool:
        return isinstance(value, bool)


class IntProp(Property):
    """An integer property; accepts plain decimal digits with an optional sign."""

    value_type = PropertyType.INTEGER

    _PATTERN = re.compile(r"[+-]?[0-9]+")

    def _convert(self, raw: str) -> int:
        text = raw.strip()
        if not self._PATTERN.fullmatch(text):
            raise ValueParseError(f"'{raw}' is not an integer")
        return int(text)

    def _accepts(self, value: Any) -> bool:
        return isinstance(value, int) and not isinstance(value, bool)


class DecimalProp(Property):
    value_type = PropertyType.DECIMAL

    def _convert(self, raw: str) -> Decimal:
        try:
            value = Decimal(raw.strip())
        except InvalidOperation:
            raise ValueParseError(f"'{raw}' is not a decimal number") from None
        if not value.is_finite():
            raise ValueParseError(f"'{raw}' is not a finite decimal number")
        return value

    def _accepts(self, value: Any) -> bool:
        return isinstance(value, (Decimal, int)) and not isinstance(value, bool)


PROPERTY_CLASSES = {
    PropertyType.STRING: StrProp,
    PropertyType.FLAG: FlagProp,
    PropertyType.INTEGER: IntProp,
    PropertyType.DECIMAL: DecimalProp,
}


def property_class_for(value_type: PropertyType) -> Optional[type]:
    """Return the Property subclass implementing a value type."""
    return PROPERTY_CLASSES.get(value_type)
