"""
propconf - Typed Configuration Properties.

This package contains the core logic for:
- Properties: typed configuration points and their validation rules.
- Naming: strategies that turn a declared property into lookup names.
- Registry: the name index, collision detection and group bookkeeping.
- Loading: loaders that read explicit values and collect problems.
- Declarations: YAML/JSON manifests describing property groups.
- Reporting: one combined report of naming conflicts and load problems.
"""

from propconf.load import (
    ColonArgumentLoader,
    LoaderValues,
    MappingLoader,
    StringArgumentLoader,
)
from propconf.naming import AsIsAliasNaming, CaseInsensitiveNaming, NamingStrategy
from propconf.properties import DecimalProp, FlagProp, IntProp, Property, StrProp
from propconf.registry import (
    ConstructionError,
    NamingConflict,
    PropertyGroup,
    PropertyRegistry,
)

__version__ = "0.1.0"

__all__ = [
    "AsIsAliasNaming",
    "CaseInsensitiveNaming",
    "ColonArgumentLoader",
    "ConstructionError",
    "DecimalProp",
    "FlagProp",
    "IntProp",
    "LoaderValues",
    "MappingLoader",
    "NamingConflict",
    "NamingStrategy",
    "Property",
    "PropertyGroup",
    "PropertyRegistry",
    "StrProp",
    "StringArgumentLoader",
]
