"""
Tests for the Declarations Module.

Covers:
- DeclarationLoader: YAML and JSON manifests, unsupported formats,
  parse errors, invalid properties.
- Schema validation of manifests.
"""

from __future__ import annotations

import json
from decimal import Decimal
from pathlib import Path

import pytest
import yaml

from propconf.declarations import (
    DeclarationError,
    DeclarationLoader,
    SchemaValidationError,
    validate_declarations,
)
from propconf.properties import DecimalProp, EndsWith, FlagProp, GreaterThan, IntProp, StrProp
from propconf.registry import PropertyRegistry


@pytest.fixture
def server_manifest() -> dict:
    """A valid manifest with two groups."""
    return {
        "groups": [
            {
                "name": "com.example.Server",
                "properties": {
                    "HOST": {"type": "string", "default": "localhost", "aliases_in": ["host"]},
                    "PORT": {
                        "type": "integer",
                        "default": 8080,
                        "aliases_in_and_out": ["server.port"],
                        "rules": [{"greater_than": 0}],
                    },
                    "DEBUG": {"type": "flag", "default": False},
                },
            },
            {
                "name": "com.example.Limits",
                "properties": {
                    "RATIO": {"type": "decimal", "default": 0.5, "required": True},
                    "SUFFIX": {
                        "type": "string",
                        "description": "Name suffix",
                        "rules": [{"ends_with": "XXX"}],
                    },
                },
            },
        ]
    }


class TestDeclarationLoader:
    """Tests for the DeclarationLoader class."""

    def test_load_yaml(self, manifest_dir: Path, server_manifest: dict) -> None:
        path = manifest_dir / "properties.yaml"
        path.write_text(yaml.dump(server_manifest, sort_keys=False), encoding="utf-8")

        groups = DeclarationLoader().load(path)

        assert [g.name for g in groups] == ["com.example.Server", "com.example.Limits"]
        server, limits = groups
        assert [name for name, _ in server.items()] == ["HOST", "PORT", "DEBUG"]
        assert isinstance(server["HOST"], StrProp)
        assert server["HOST"].aliases_in == ("host",)
        assert isinstance(server["PORT"], IntProp)
        assert server["PORT"].default == 8080
        assert isinstance(server["PORT"].rules[0], GreaterThan)
        assert isinstance(server["DEBUG"], FlagProp)
        assert server["DEBUG"].default is False
        assert isinstance(limits["RATIO"], DecimalProp)
        assert limits["RATIO"].default == Decimal("0.5")
        assert limits["RATIO"].required
        assert isinstance(limits["SUFFIX"].rules[0], EndsWith)
        assert limits["SUFFIX"].description == "Name suffix"

    def test_load_json(self, manifest_dir: Path, server_manifest: dict) -> None:
        path = manifest_dir / "properties.json"
        path.write_text(json.dumps(server_manifest), encoding="utf-8")

        groups = DeclarationLoader().load(str(path))

        registry = PropertyRegistry.build(groups)
        assert registry.get_point("com.example.Server.server.port") is groups[0]["PORT"]
        assert len(registry) == 5

    def test_file_not_found(self, manifest_dir: Path) -> None:
        with pytest.raises(FileNotFoundError, match="not found"):
            DeclarationLoader().load(manifest_dir / "missing.yaml")

    def test_unsupported_format(self, manifest_dir: Path) -> None:
        path = manifest_dir / "properties.txt"
        path.write_text("groups: []", encoding="utf-8")

        with pytest.raises(DeclarationError, match="Unsupported file format"):
            DeclarationLoader().load(path)

    def test_invalid_yaml(self, manifest_dir: Path) -> None:
        path = manifest_dir / "bad.yaml"
        path.write_text("groups: [invalid yaml{", encoding="utf-8")

        with pytest.raises(DeclarationError, match="Failed to parse"):
            DeclarationLoader().load(path)

    def test_schema_errors_are_collected(self) -> None:
        data = {
            "groups": [
                {"name": "g", "properties": {"A": {"type": "bogus"}, "B": {"default": 1}}},
            ]
        }
        with pytest.raises(DeclarationError, match="validation failed") as exc_info:
            DeclarationLoader().build_groups(data)
        assert len(exc_info.value.errors) == 2

    def test_empty_yaml_fails_validation(self, manifest_dir: Path) -> None:
        path = manifest_dir / "empty.yaml"
        path.write_text("", encoding="utf-8")

        with pytest.raises(DeclarationError, match="validation failed"):
            DeclarationLoader().load(path)

    def test_default_of_wrong_type(self) -> None:
        data = {"groups": [{"name": "g", "properties": {"F": {"type": "flag", "default": "yes"}}}]}
        with pytest.raises(DeclarationError, match="Invalid property 'g.F'"):
            DeclarationLoader().build_groups(data)

    def test_rule_for_wrong_type(self) -> None:
        data = {
            "groups": [
                {"name": "g", "properties": {"N": {"type": "integer", "rules": [{"ends_with": "x"}]}}}
            ]
        }
        with pytest.raises(DeclarationError, match="cannot be applied"):
            DeclarationLoader().build_groups(data)

    def test_group_declared_twice(self) -> None:
        data = {
            "groups": [
                {"name": "a.G", "properties": {"X": {"type": "integer"}}},
                {"name": "a.G", "properties": {"Y": {"type": "integer"}}},
            ]
        }
        with pytest.raises(DeclarationError, match="Group 'a.G' is declared more than once"):
            DeclarationLoader().build_groups(data)

    def test_bad_regex(self) -> None:
        data = {
            "groups": [
                {"name": "g", "properties": {"S": {"type": "string", "rules": [{"matches": "("}]}}}
            ]
        }
        with pytest.raises(DeclarationError, match="Invalid property"):
            DeclarationLoader().build_groups(data)


class TestSchemaValidation:
    def test_valid(self, server_manifest: dict) -> None:
        validate_declarations(server_manifest)

    def test_rule_needs_exactly_one_key(self) -> None:
        data = {
            "groups": [
                {
                    "name": "g",
                    "properties": {"N": {"type": "integer", "rules": [{"greater_than": 1, "less_than": 5}]}},
                }
            ]
        }
        with pytest.raises(SchemaValidationError):
            validate_declarations(data)

    def test_unknown_keys_rejected(self) -> None:
        with pytest.raises(SchemaValidationError, match="extra"):
            validate_declarations({"groups": [], "extra": 1})
