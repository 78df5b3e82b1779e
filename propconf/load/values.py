"""
Loader Values Module.

The result envelope of one load call: the explicit values a loader found
and the problems it ran into, both in the order encountered.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from propconf.load.problems import LoaderProblem
from propconf.properties.base import Property


@dataclass(frozen=True)
class PropertyValue:
    """
    One explicit value found by a loader.

    Attributes:
        prop: The property the value belongs to.
        value: The typed value.
        source_key: The key exactly as it appeared in the input.
    """

    prop: Property
    value: Any
    source_key: str = ""


@dataclass
class LoaderValues:
    """
    Explicit values and problems from a single loader run.

    A property appears at most once in `values`; repeated assignments are
    recorded as problems, never as overwrites.

    Attributes:
        loader_name: Name of the loader that produced the result.
        values: Explicit values in input order.
        problems: Problems in input order.
    """

    loader_name: str
    values: List[PropertyValue] = field(default_factory=list)
    problems: List[LoaderProblem] = field(default_factory=list)

    def get_property_value(self, prop: Property) -> Optional[PropertyValue]:
        """Return the PropertyValue recorded for a property, or None."""
        for entry in self.values:
            if entry.prop is prop:
                return entry
        return None

    def get_explicit_value(self, prop: Property) -> Any:
        """Return the explicit value found for a property, or None."""
        entry = self.get_property_value(prop)
        return entry.value if entry else None

    def get_value(self, prop: Property) -> Any:
        """Return the explicit value, falling back to the property's default."""
        entry = self.get_property_value(prop)
        return entry.value if entry else prop.default

    def is_explicitly_set(self, prop: Property) -> bool:
        return self.get_property_value(prop) is not None

    @property
    def properties(self) -> List[Property]:
        """Properties that received an explicit value, in input order."""
        return [entry.prop for entry in self.values]

    @property
    def has_problems(self) -> bool:
        return bool(self.problems)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize problem details and value count for reporting."""
        return {
            "loader_name": self.loader_name,
            "value_count": len(self.values),
            "problems": [problem.to_dict() for problem in self.problems],
        }
