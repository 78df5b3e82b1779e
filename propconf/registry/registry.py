"""
Property Registry Module.

The central index of an application's configuration points. Given the
declared property groups, the registry:
- Computes every candidate name of every property via a NamingStrategy.
- Detects name collisions between different properties and records them
  as NamingConflicts instead of failing.
- Answers lookups in both directions: name -> property, property ->
  canonical name, group -> properties.

The registry is built once at startup and is read-only afterwards, so any
number of loaders may read it at the same time.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional

from loguru import logger

from propconf.naming.strategies import CaseInsensitiveNaming, NamingStrategy, PropertyNames
from propconf.properties.base import Property
from propconf.registry.errors import ConstructionError
from propconf.registry.group import PropertyGroup


@dataclass(frozen=True)
class NamingConflict:
    """
    A name collision between two different properties.

    The new property lost: none of its names were registered.

    Attributes:
        new_property: The property that could not be registered.
        new_canonical_name: Canonical name the new property would have had.
        new_conflict_name: The new property's name that collided.
        existing_property: The previously registered property.
        existing_canonical_name: Canonical name of the existing property.
        existing_conflict_name: The existing property's name it collided with.
    """

    new_property: Property
    new_canonical_name: str
    new_conflict_name: str
    existing_property: Property
    existing_canonical_name: str
    existing_conflict_name: str

    @property
    def message(self) -> str:
        return (
            f"'{self.new_canonical_name}' cannot use the name '{self.new_conflict_name}': "
            f"it is already used by '{self.existing_canonical_name}' "
            f"(as '{self.existing_conflict_name}')"
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the conflict to a dictionary for reporting."""
        return {
            "new_canonical_name": self.new_canonical_name,
            "new_conflict_name": self.new_conflict_name,
            "existing_canonical_name": self.existing_canonical_name,
            "existing_conflict_name": self.existing_conflict_name,
            "message": self.message,
        }


class PropertyRegistry:
    """
    Name index for declared properties.

    Usage::

        registry = PropertyRegistry.build([server_group, db_group])

        registry.get_point("com.example.Server.PORT")   # -> IntProp
        registry.get_canonical_name(port)              # -> "com.example.Server.PORT"
        for conflict in registry.naming_conflicts:
            print(conflict.message)

    Registration is atomic per property: if any of a property's names is
    already owned by another property, none of its names are registered,
    and it is only visible through the recorded NamingConflict.
    """

    def __init__(self, naming: Optional[NamingStrategy] = None) -> None:
        """
        Initialize an empty registry.

        Args:
            naming: Strategy used to build and normalize names.
                    Defaults to CaseInsensitiveNaming.
        """
        self.naming = naming or CaseInsensitiveNaming()
        self._frozen = False

        self._name_to_point: Dict[str, Property] = {}
        self._point_names: Dict[Property, PropertyNames] = {}
        self._point_groups: Dict[Property, PropertyGroup] = {}
        self._points: List[Property] = []
        self._groups: List[PropertyGroup] = []
        self._group_points: Dict[PropertyGroup, List[Property]] = {}
        self._group_names: Dict[str, PropertyGroup] = {}
        self._attempted: Dict[Property, PropertyGroup] = {}
        self._conflicts: List[NamingConflict] = []

        logger.debug(f"PropertyRegistry initialized — naming={type(self.naming).__name__}")

    @classmethod
    def build(
        cls,
        groups: Iterable[PropertyGroup],
        naming: Optional[NamingStrategy] = None,
    ) -> "PropertyRegistry":
        """
        Build and freeze a registry from groups, in order.

        Args:
            groups: Property groups; each property is registered in its
                    group's declaration order.
            naming: Naming strategy (defaults to CaseInsensitiveNaming).

        Returns:
            A frozen PropertyRegistry.

        Raises:
            ConstructionError: On programmer errors (see add_property).
        """
        registry = cls(naming)
        for group in groups:
            registry.add_group(group)
        registry.freeze()

        logger.info(
            f"PropertyRegistry built — {len(registry._groups)} groups, "
            f"{len(registry._points)} properties, "
            f"{len(registry._conflicts)} naming conflicts"
        )
        return registry

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    def add_group(self, group: PropertyGroup) -> None:
        """Register every property of a group, in declaration order."""
        self._touch_group(group)
        for prop in group.properties:
            self.add_property(group, prop)

    def add_property(self, group: PropertyGroup, prop: Property) -> bool:
        """
        Register one property under its declaring group.

        Args:
            group: The group that declares the property.
            prop: The property to register.

        Returns:
            True if all names were registered, False if a NamingConflict
            was recorded instead.

        Raises:
            ConstructionError: If the registry is frozen, the property
                instance was already registered, the group does not declare
                it, or another group already uses this group's name.
        """
        if self._frozen:
            raise ConstructionError("The registry is frozen; no more properties can be added")

        field_name = group.field_name_of(prop)
        if field_name is None:
            raise ConstructionError(
                f"Property {prop!r} is not declared in group '{group.name}'"
            )

        if prop in self._attempted:
            earlier = self._attempted[prop]
            raise ConstructionError(
                f"Property '{group.name}.{field_name}' is already registered "
                f"(via group '{earlier.name}')"
            )

        self._touch_group(group)
        self._attempted[prop] = group

        names = self.naming.build_names(prop, group, field_name)

        for candidate in names.all_names():
            owner = self._name_to_point.get(candidate.effective_name)
            if owner is None or owner is prop:
                continue

            conflict = NamingConflict(
                new_property=prop,
                new_canonical_name=names.canonical.actual_name,
                new_conflict_name=candidate.actual_name,
                existing_property=owner,
                existing_canonical_name=self._point_names[owner].canonical.actual_name,
                existing_conflict_name=self._actual_name_of(owner, candidate.effective_name),
            )
            self._conflicts.append(conflict)
            logger.warning(f"Naming conflict: {conflict.message}")
            return False

        for candidate in names.all_names():
            self._name_to_point[candidate.effective_name] = prop

        self._point_names[prop] = names
        self._point_groups[prop] = group
        self._points.append(prop)
        self._group_points[group].append(prop)

        logger.debug(
            f"Registered {names.canonical.actual_name} "
            f"({len(names.aliases)} aliases)"
        )
        return True

    def freeze(self) -> None:
        """Make the registry read-only."""
        self._frozen = True

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def get_point(self, name: str) -> Optional[Property]:
        """Return the property registered under a name, or None."""
        if not isinstance(name, str):
            return None
        return self._name_to_point.get(self.naming.normalize(name))

    def get_canonical_name(self, prop: Property) -> Optional[str]:
        """Return the canonical name of a property, or None if it is not reachable."""
        names = self._point_names.get(prop)
        return names.canonical.actual_name if names else None

    def get_names(self, prop: Property) -> Optional[PropertyNames]:
        """Return every registered name of a property, or None."""
        return self._point_names.get(prop)

    def get_group(self, prop: Property) -> Optional[PropertyGroup]:
        """Return the group a registered property belongs to, or None."""
        return self._point_groups.get(prop)

    def get_points(self) -> List[Property]:
        """All registered properties in registration order."""
        return list(self._points)

    def get_points_for_group(self, group: PropertyGroup) -> List[Property]:
        """Registered properties of a group; empty for unknown groups."""
        return list(self._group_points.get(group, ()))

    def get_groups(self) -> List[PropertyGroup]:
        """Groups in first-registration order."""
        return list(self._groups)

    @property
    def naming_conflicts(self) -> List[NamingConflict]:
        return list(self._conflicts)

    @property
    def has_conflicts(self) -> bool:
        return bool(self._conflicts)

    def __contains__(self, prop: object) -> bool:
        return prop in self._point_names

    def __len__(self) -> int:
        return len(self._points)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _touch_group(self, group: PropertyGroup) -> None:
        if group in self._group_points:
            return

        other = self._group_names.get(group.name)
        if other is not None:
            raise ConstructionError(
                f"Two different groups are both named '{group.name}'"
            )

        self._groups.append(group)
        self._group_points[group] = []
        self._group_names[group.name] = group
        logger.debug(f"Registered group {group.name}")

    def _actual_name_of(self, prop: Property, effective_name: str) -> str:
        for name in self._point_names[prop].all_names():
            if name.effective_name == effective_name:
                return name.actual_name
        return effective_name
