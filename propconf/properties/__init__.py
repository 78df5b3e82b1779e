"""
Properties Module.

Typed configuration points and the validation rules attached to them.
"""

from propconf.properties.base import (
    DecimalProp,
    FlagProp,
    IntProp,
    Property,
    StrProp,
    property_class_for,
)
from propconf.properties.rules import (
    EndsWith,
    GreaterThan,
    GreaterThanOrEqualTo,
    LessThan,
    LessThanOrEqualTo,
    MatchesRegex,
    StartsWith,
    ValidationRule,
)
from propconf.properties.types import PropertyType, ValueParseError

__all__ = [
    "DecimalProp",
    "EndsWith",
    "FlagProp",
    "GreaterThan",
    "GreaterThanOrEqualTo",
    "IntProp",
    "LessThan",
    "LessThanOrEqualTo",
    "MatchesRegex",
    "Property",
    "PropertyType",
    "StartsWith",
    "StrProp",
    "ValidationRule",
    "ValueParseError",
    "property_class_for",
]
