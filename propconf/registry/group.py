"""
Property Group Module.

A PropertyGroup is the explicit stand-in for "a class full of property
fields": it has a fully qualified name and an ordered set of
(field name, property) declarations. It is read-only once built.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Mapping, Optional, Tuple, Union

from propconf.properties.base import Property
from propconf.registry.errors import ConstructionError

Declarations = Union[Mapping[str, Property], Iterable[Tuple[str, Property]]]


class PropertyGroup:
    """
    A named, ordered collection of property declarations.

    Groups compare by identity, like the declaring types they model.

    Usage::

        server = PropertyGroup("com.example.Server", [
            ("PORT", IntProp(8080, aliases_in=["port"])),
            ("DEBUG", FlagProp(False)),
        ])
        server["PORT"]          # -> the IntProp
        server.field_name_of(p)  # -> "PORT"

    Attributes:
        name: Fully qualified group name, used as the canonical name prefix.
    """

    def __init__(self, name: str, declarations: Declarations = ()) -> None:
        """
        Initialize the group.

        Args:
            name: Fully qualified group name (e.g. "com.example.Server").
            declarations: Mapping or sequence of (field name, property) pairs.

        Raises:
            ConstructionError: If the name is empty, a field name repeats,
                or the same property instance is declared twice.
        """
        if not isinstance(name, str) or not name.strip():
            raise ConstructionError(f"Group name must be a non-empty string, got {name!r}")

        self._name = name.strip()
        self._fields: Dict[str, Property] = {}
        self._field_names: Dict[int, str] = {}

        pairs = declarations.items() if isinstance(declarations, Mapping) else declarations
        for field_name, prop in pairs:
            self._declare(field_name, prop)

    @property
    def name(self) -> str:
        return self._name

    @property
    def properties(self) -> List[Property]:
        """Declared properties in declaration order."""
        return list(self._fields.values())

    def items(self) -> List[Tuple[str, Property]]:
        """Declared (field name, property) pairs in declaration order."""
        return list(self._fields.items())

    def field_name_of(self, prop: Property) -> Optional[str]:
        """Return the field name a property is declared under, or None."""
        return self._field_names.get(id(prop))

    def __contains__(self, prop: object) -> bool:
        return id(prop) in self._field_names

    def __getitem__(self, field_name: str) -> Property:
        return self._fields[field_name]

    def __iter__(self):
        return iter(self._fields.values())

    def __len__(self) -> int:
        return len(self._fields)

    def __repr__(self) -> str:
        return f"PropertyGroup({self._name!r}, fields={list(self._fields)})"

    def _declare(self, field_name: str, prop: Property) -> None:
        if not isinstance(prop, Property):
            raise ConstructionError(
                f"Group '{self._name}': field '{field_name}' is not a Property "
                f"(got {type(prop).__name__})"
            )
        if not isinstance(field_name, str) or not field_name.strip():
            raise ConstructionError(
                f"Group '{self._name}': field names must be non-empty strings, got {field_name!r}"
            )
        field_name = field_name.strip()
        if field_name in self._fields:
            raise ConstructionError(
                f"Group '{self._name}': field '{field_name}' is declared more than once"
            )
        if id(prop) in self._field_names:
            raise ConstructionError(
                f"Group '{self._name}': the same property instance is declared as both "
                f"'{self._field_names[id(prop)]}' and '{field_name}'"
            )
        self._fields[field_name] = prop
        self._field_names[id(prop)] = field_name
