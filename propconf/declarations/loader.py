"""
Declaration Loader Module.

Reads property group declarations from YAML or JSON manifests:
- Parses the file (PyYAML safe_load / json).
- Validates it against the declaration JSON schema.
- Builds PropertyGroups in file order, ready for PropertyRegistry.build.

Manifest format::

    groups:
      - name: com.example.Server
        properties:
          PORT:
            type: integer
            default: 8080
            aliases_in: [port]
            rules:
              - greater_than: 0
"""

from __future__ import annotations

import json
import re
from decimal import Decimal
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

import yaml
from loguru import logger

from propconf.declarations.schema import SchemaValidationError, validate_declarations
from propconf.properties.base import Property, property_class_for
from propconf.properties.rules import (
    EndsWith,
    GreaterThan,
    GreaterThanOrEqualTo,
    LessThan,
    LessThanOrEqualTo,
    MatchesRegex,
    StartsWith,
    ValidationRule,
)
from propconf.properties.types import PropertyType
from propconf.registry.errors import ConstructionError
from propconf.registry.group import PropertyGroup


class DeclarationError(Exception):
    """Raised when a declaration manifest is invalid or cannot be loaded."""

    def __init__(self, message: str, errors: Optional[List[str]] = None) -> None:
        super().__init__(message)
        self.errors = errors or []


RULE_FACTORIES: Dict[str, Callable[[Any], ValidationRule]] = {
    "starts_with": StartsWith,
    "ends_with": EndsWith,
    "matches": MatchesRegex,
    "greater_than": lambda bound: GreaterThan(_number(bound)),
    "greater_than_or_equal_to": lambda bound: GreaterThanOrEqualTo(_number(bound)),
    "less_than": lambda bound: LessThan(_number(bound)),
    "less_than_or_equal_to": lambda bound: LessThanOrEqualTo(_number(bound)),
}


def _number(value: Any) -> Any:
    if isinstance(value, float):
        return Decimal(str(value))
    return value


class DeclarationLoader:
    """
    Builds property groups from declaration manifests.

    Usage::

        groups = DeclarationLoader().load("config/properties.yaml")
        registry = PropertyRegistry.build(groups)
    """

    SUPPORTED_EXTENSIONS = {".yaml", ".yml", ".json"}

    def __init__(self, schema: Optional[Dict[str, Any]] = None) -> None:
        """
        Initialize the declaration loader.

        Args:
            schema: JSON schema to validate manifests against
                    (defaults to DECLARATION_SCHEMA).
        """
        self.schema = schema

    def load(self, path: str | Path) -> List[PropertyGroup]:
        """
        Load a manifest file and build its groups.

        Args:
            path: Path to a .yaml, .yml or .json manifest.

        Returns:
            PropertyGroups in manifest order.

        Raises:
            FileNotFoundError: If the file does not exist.
            DeclarationError: If the file cannot be parsed, fails schema
                validation, or declares invalid properties.
        """
        file_path = Path(path)
        if not file_path.exists():
            raise FileNotFoundError(f"Declaration manifest not found: {file_path}")

        logger.info(f"Loading declarations: {file_path}")
        data = self._read_file(file_path)
        groups = self.build_groups(data)
        logger.info(f"Declarations loaded: {len(groups)} groups from {file_path.name}")
        return groups

    def build_groups(self, data: Any) -> List[PropertyGroup]:
        """
        Validate already-parsed manifest data and build its groups.

        Raises:
            DeclarationError: If validation fails or a property is invalid.
        """
        try:
            validate_declarations(data, self.schema)
        except SchemaValidationError as e:
            raise DeclarationError(str(e), errors=e.errors) from e

        groups = []
        seen_names = set()
        for group_data in data["groups"]:
            group_name = group_data["name"]
            if group_name in seen_names:
                raise DeclarationError(f"Group '{group_name}' is declared more than once")
            seen_names.add(group_name)
            declarations = []
            for field_name, prop_data in group_data["properties"].items():
                try:
                    declarations.append((field_name, self._build_property(prop_data)))
                except (ValueError, re.error) as e:
                    raise DeclarationError(
                        f"Invalid property '{group_name}.{field_name}': {e}"
                    ) from e
            try:
                groups.append(PropertyGroup(group_name, declarations))
            except ConstructionError as e:
                raise DeclarationError(f"Invalid group '{group_name}': {e}") from e
            logger.debug(f"Declared group {group_name} with {len(declarations)} properties")
        return groups

    def _read_file(self, file_path: Path) -> Any:
        """Read and parse a YAML or JSON file."""
        suffix = file_path.suffix.lower()
        if suffix not in self.SUPPORTED_EXTENSIONS:
            raise DeclarationError(
                f"Unsupported file format '{suffix}'. "
                f"Supported: {sorted(self.SUPPORTED_EXTENSIONS)}"
            )

        try:
            content = file_path.read_text(encoding="utf-8")
        except OSError as e:
            raise DeclarationError(f"Failed to read file {file_path}: {e}") from e

        try:
            if suffix in {".yaml", ".yml"}:
                return yaml.safe_load(content)
            return json.loads(content)
        except (yaml.YAMLError, json.JSONDecodeError) as e:
            raise DeclarationError(f"Failed to parse {file_path}: {e}") from e

    @staticmethod
    def _build_property(prop_data: Dict[str, Any]) -> Property:
        value_type = PropertyType(prop_data["type"])
        prop_cls = property_class_for(value_type)

        default = prop_data.get("default")
        if value_type is PropertyType.DECIMAL:
            default = _number(default)

        rules = []
        for rule_data in prop_data.get("rules", []):
            ((rule_name, argument),) = rule_data.items()
            rules.append(RULE_FACTORIES[rule_name](argument))

        return prop_cls(
            default,
            aliases_in=prop_data.get("aliases_in", ()),
            aliases_in_and_out=prop_data.get("aliases_in_and_out", ()),
            rules=rules,
            required=prop_data.get("required", False),
            description=prop_data.get("description", ""),
        )
