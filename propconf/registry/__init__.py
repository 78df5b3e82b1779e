"""
Registry Module.

Property groups and the registry that indexes their names.
"""

from propconf.registry.errors import ConstructionError
from propconf.registry.group import PropertyGroup
from propconf.registry.registry import NamingConflict, PropertyRegistry

__all__ = ["ConstructionError", "NamingConflict", "PropertyGroup", "PropertyRegistry"]
