"""
Load Problems Module.

The closed set of anomalies a loader can report. Loaders never raise for
bad input: each anomaly becomes one of these records, so a user sees every
configuration mistake in a single pass.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict

from propconf.properties.base import Property


@dataclass(frozen=True)
class Problem(ABC):
    """Base class of all non-fatal, reportable configuration anomalies."""

    @property
    @abstractmethod
    def message(self) -> str:
        """Human-readable description of the problem."""
        ...

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the problem to a dictionary for reporting."""
        return {"type": type(self).__name__, "message": self.message}


@dataclass(frozen=True)
class LoaderProblem(Problem):
    """
    A problem found by a loader.

    Attributes:
        loader_name: Name of the loader that found the problem.
    """

    loader_name: str


@dataclass(frozen=True)
class UnknownPropertyProblem(LoaderProblem):
    """The key does not match any registered name."""

    key: str

    @property
    def message(self) -> str:
        return f"Unknown property '{self.key}'"


@dataclass(frozen=True)
class DuplicatePropertyProblem(LoaderProblem):
    """The property was assigned more than once by the same loader; the first value is kept."""

    prop: Property
    canonical_name: str
    key: str

    @property
    def message(self) -> str:
        return (
            f"Property '{self.canonical_name}' is set more than once "
            f"(repeated as '{self.key}'); the first value is used"
        )


@dataclass(frozen=True)
class ParsingProblem(LoaderProblem):
    """The raw input could not be split into a key and a value."""

    token: str
    reason: str

    @property
    def message(self) -> str:
        return f"Cannot parse '{self.token}': {self.reason}"


@dataclass(frozen=True)
class ValueProblem(LoaderProblem):
    """The value could not be converted to the property's type."""

    prop: Property
    canonical_name: str
    raw_value: str
    reason: str

    @property
    def message(self) -> str:
        return f"Invalid value for '{self.canonical_name}': {self.reason}"
