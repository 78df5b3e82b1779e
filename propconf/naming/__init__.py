"""
Naming Module.

Strategies mapping declared properties to canonical and alias names.
"""

from propconf.naming.strategies import (
    AsIsAliasNaming,
    CaseInsensitiveNaming,
    NamingStrategy,
    PropertyName,
    PropertyNames,
)

NAMING_STRATEGIES = {
    "case-insensitive": CaseInsensitiveNaming,
    "as-is": AsIsAliasNaming,
}

__all__ = [
    "AsIsAliasNaming",
    "CaseInsensitiveNaming",
    "NAMING_STRATEGIES",
    "NamingStrategy",
    "PropertyName",
    "PropertyNames",
]
