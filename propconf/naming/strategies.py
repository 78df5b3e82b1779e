"""
Naming Strategies Module.

A naming strategy turns a declared property (its group, its field name and
its aliases) into the ordered set of names it can be looked up by, and
defines how an incoming name is normalized before lookup.

Strategies are pure: the same input always yields the same names, and
nothing is remembered between calls.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Tuple

if TYPE_CHECKING:
    from propconf.properties.base import Property
    from propconf.registry.group import PropertyGroup


@dataclass(frozen=True)
class PropertyName:
    """
    One candidate name of a property.

    Attributes:
        actual_name: The name as declared, case preserved (for display).
        effective_name: The normalized lookup key.
        is_canonical: True for the group-qualified field name.
        is_output: True if the name may be shown as the property's name.
    """

    actual_name: str
    effective_name: str
    is_canonical: bool = False
    is_output: bool = False


@dataclass(frozen=True)
class PropertyNames:
    """The canonical name of a property plus its alias names, in priority order."""

    canonical: PropertyName
    aliases: Tuple[PropertyName, ...] = field(default_factory=tuple)

    def all_names(self) -> Tuple[PropertyName, ...]:
        """Canonical name first, then aliases."""
        return (self.canonical,) + self.aliases

    @property
    def display_name(self) -> str:
        """The first in-and-out alias, or the canonical name when there is none."""
        for alias in self.aliases:
            if alias.is_output:
                return alias.actual_name
        return self.canonical.actual_name


class NamingStrategy(ABC):
    """
    Abstract base class for naming strategies.

    Subclasses decide how names are normalized (`normalize`) and how alias
    names are formed (`alias_name`); `build_names` is shared.
    """

    def build_names(
        self, prop: "Property", group: "PropertyGroup", field_name: str
    ) -> PropertyNames:
        """
        Build all candidate names for a property.

        Args:
            prop: The property being named.
            group: The group declaring the property.
            field_name: The field name the property is declared under.

        Returns:
            PropertyNames with the canonical name and the aliases. Aliases
            that normalize to an already-produced name are dropped.
        """
        canonical_text = f"{group.name}.{field_name}"
        canonical = PropertyName(
            actual_name=canonical_text,
            effective_name=self.normalize(canonical_text),
            is_canonical=True,
        )

        seen = {canonical.effective_name}
        aliases: List[PropertyName] = []
        declared = [(a, True) for a in prop.aliases_in_and_out] + [
            (a, False) for a in prop.aliases_in
        ]
        for alias, is_output in declared:
            text = self.alias_name(group, alias)
            effective = self.normalize(text)
            if effective in seen:
                continue
            seen.add(effective)
            aliases.append(
                PropertyName(actual_name=text, effective_name=effective, is_output=is_output)
            )

        return PropertyNames(canonical=canonical, aliases=tuple(aliases))

    @abstractmethod
    def normalize(self, name: str) -> str:
        """Return the lookup key for a name."""
        ...

    @abstractmethod
    def alias_name(self, group: "PropertyGroup", alias: str) -> str:
        """Return the full name an alias is registered under."""
        ...


class CaseInsensitiveNaming(NamingStrategy):
    """
    Case-insensitive naming, with aliases scoped to their group.

    `STR_BOB` declared in group `pkg.Group` with alias `String_Bob` is
    reachable as `pkg.Group.STR_BOB` and `pkg.Group.String_Bob`, in any case.
    """

    def normalize(self, name: str) -> str:
        return name.strip().upper()

    def alias_name(self, group: "PropertyGroup", alias: str) -> str:
        return f"{group.name}.{alias}"


class AsIsAliasNaming(NamingStrategy):
    """
    Case-sensitive naming that registers aliases verbatim.

    Aliases are not scoped to their group, so two groups declaring the same
    alias collide. Useful to provoke and inspect naming conflicts.
    """

    def normalize(self, name: str) -> str:
        return name.strip()

    def alias_name(self, group: "PropertyGroup", alias: str) -> str:
        return alias
