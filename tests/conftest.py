"""
Root conftest.py — Shared Pytest fixtures.

Provides fixtures for:
- Property groups mirroring typical application declarations
  (with aliases, without aliases, and one that repeats aliases on purpose).
- Registries built from those groups with either naming strategy.
- A temporary directory for declaration manifests.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from propconf.naming import AsIsAliasNaming, CaseInsensitiveNaming
from propconf.properties import EndsWith, FlagProp, StrProp
from propconf.registry import PropertyGroup, PropertyRegistry


SIMPLE_GROUP_NAME = "pkg.SimpleParams"


# ---------------------------------------------------------------------------
# Group Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def simple_params() -> PropertyGroup:
    """Strings and flags, some with aliases and defaults."""
    return PropertyGroup(SIMPLE_GROUP_NAME, [
        ("STR_BOB", StrProp("bob", aliases_in=["String_Bob"], aliases_in_and_out=["Stringy.Bob"])),
        ("STR_NULL", StrProp(aliases_in_and_out=["String_Null"])),
        ("STR_ENDS_WITH_XXX", StrProp(rules=[EndsWith("XXX")])),
        ("FLAG_FALSE", FlagProp(False)),
        ("FLAG_TRUE", FlagProp(True)),
        ("FLAG_NULL", FlagProp()),
    ])


@pytest.fixture
def params_with_alias() -> PropertyGroup:
    return PropertyGroup("pkg.ParamsWAlias", [
        ("KVP_BOB", StrProp("bob", aliases_in=["kvp_bob_alias"])),
        ("FLAG_FALSE", FlagProp(False, aliases_in=["flag_false_alias"])),
    ])


@pytest.fixture
def params_with_duplicate_alias() -> PropertyGroup:
    """Repeats the FLAG_FALSE alias of params_with_alias; FLAG_TRUE is unique."""
    return PropertyGroup("pkg.ParamsWAliasDuplicate", [
        ("FLAG_FALSE", FlagProp(False, aliases_in=["flag_false_alias"])),
        ("FLAG_TRUE", FlagProp(True, aliases_in=["flag_true_alias"])),
    ])


@pytest.fixture
def params_no_alias() -> PropertyGroup:
    return PropertyGroup("pkg.ParamsNoAlias", [
        ("KVP_BOB", StrProp("bob")),
    ])


# ---------------------------------------------------------------------------
# Registry Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def simple_registry(simple_params: PropertyGroup) -> PropertyRegistry:
    """Frozen case-insensitive registry holding only simple_params."""
    return PropertyRegistry.build([simple_params], naming=CaseInsensitiveNaming())


@pytest.fixture
def as_is_registry() -> PropertyRegistry:
    """Empty, unfrozen registry using AsIsAliasNaming."""
    return PropertyRegistry(naming=AsIsAliasNaming())


@pytest.fixture
def base_path() -> str:
    """Canonical name prefix of simple_params."""
    return SIMPLE_GROUP_NAME + "."


@pytest.fixture
def manifest_dir(tmp_path: Path) -> Path:
    """Temporary directory for declaration manifests."""
    directory = tmp_path / "config"
    directory.mkdir()
    return directory
