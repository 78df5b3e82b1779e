"""
Loader Base Module.

Provides the Loader contract and the assignment routine shared by every
key/value shaped source. A loader:
- Reads raw input and resolves each key through the PropertyRegistry.
- Converts values with the property's own type conversion.
- Records every anomaly as a LoaderProblem instead of raising.

Loaders never check required values or run validation rules: that is the
job of whatever merges the results of all loaders.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional, Set

from loguru import logger

from propconf.load.problems import (
    DuplicatePropertyProblem,
    ParsingProblem,
    UnknownPropertyProblem,
    ValueProblem,
)
from propconf.load.values import LoaderValues, PropertyValue
from propconf.properties.base import Property
from propconf.properties.types import ValueParseError
from propconf.registry.registry import PropertyRegistry


class Loader(ABC):
    """
    Abstract base class for all loaders.

    Subclasses implement `_read`, feeding raw key/value pairs into
    `_assign`. A fresh LoaderValues is produced on every `load` call and
    the registry is only read, so one loader instance may be used
    repeatedly and several loaders may share one registry.
    """

    def __init__(self, name: Optional[str] = None) -> None:
        """
        Initialize the loader.

        Args:
            name: Name used in problems and logs (defaults to the class name).
        """
        self.name = name or type(self).__name__

    def load(self, registry: PropertyRegistry) -> LoaderValues:
        """
        Load explicit values for the properties of a registry.

        Args:
            registry: The registry used to resolve names.

        Returns:
            LoaderValues with the values found and the problems encountered.
        """
        result = LoaderValues(loader_name=self.name)
        assigned: Set[Property] = set()

        self._read(registry, result, assigned)

        logger.info(
            f"[Loader: {self.name}] Loaded {len(result.values)} values, "
            f"{len(result.problems)} problems"
        )
        for problem in result.problems:
            logger.warning(f"[Loader: {self.name}] {problem.message}")
        return result

    @abstractmethod
    def _read(
        self,
        registry: PropertyRegistry,
        result: LoaderValues,
        assigned: Set[Property],
    ) -> None:
        """Read the raw input and pass each key/value pair to `_assign`."""
        ...

    def _assign(
        self,
        registry: PropertyRegistry,
        result: LoaderValues,
        assigned: Set[Property],
        raw_key: str,
        raw_value: Optional[str],
        token: Optional[str] = None,
    ) -> None:
        """
        Resolve one key and record its value or the problem it causes.

        Args:
            registry: Registry used to resolve the key.
            result: Result being built.
            assigned: Properties that already received a value in this call.
            raw_key: The key as found in the input.
            raw_value: The raw value; None or "" means no value was given.
            token: Original input token, for problem messages.
        """
        key = raw_key.strip()
        if not key:
            result.problems.append(
                ParsingProblem(
                    loader_name=self.name,
                    token=token if token is not None else raw_key,
                    reason="the property name is empty",
                )
            )
            return

        prop = registry.get_point(key)
        if prop is None:
            result.problems.append(UnknownPropertyProblem(loader_name=self.name, key=key))
            return

        canonical_name = registry.get_canonical_name(prop) or key

        # An empty value is the same as the key being absent
        if raw_value is None or raw_value == "":
            logger.debug(f"[Loader: {self.name}] {canonical_name} has an empty value, ignored")
            return

        if prop in assigned:
            result.problems.append(
                DuplicatePropertyProblem(
                    loader_name=self.name,
                    prop=prop,
                    canonical_name=canonical_name,
                    key=key,
                )
            )
            return

        try:
            value = prop.parse_value(raw_value)
        except ValueParseError as e:
            result.problems.append(
                ValueProblem(
                    loader_name=self.name,
                    prop=prop,
                    canonical_name=canonical_name,
                    raw_value=raw_value,
                    reason=str(e),
                )
            )
            return

        assigned.add(prop)
        result.values.append(PropertyValue(prop=prop, value=value, source_key=key))
        logger.debug(f"[Loader: {self.name}] {canonical_name} = {value!r}")
