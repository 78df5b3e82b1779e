"""Value type tags for properties."""

from __future__ import annotations

from enum import Enum


class PropertyType(Enum):
    """The value type of a property; selects its parse behavior."""

    STRING = "string"
    FLAG = "flag"
    INTEGER = "integer"
    DECIMAL = "decimal"


class ValueParseError(ValueError):
    """Raised when a raw string cannot be converted to a property's type."""

    pass
