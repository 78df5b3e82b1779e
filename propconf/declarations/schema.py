"""
Declaration Schema Module.

JSON schema for property declaration manifests, and validation using
jsonschema. All schema errors are collected and reported together.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import jsonschema
from loguru import logger

_NUMBER = {"type": "number"}
_TEXT = {"type": "string"}

RULE_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "minProperties": 1,
    "maxProperties": 1,
    "additionalProperties": False,
    "properties": {
        "starts_with": _TEXT,
        "ends_with": _TEXT,
        "matches": _TEXT,
        "greater_than": _NUMBER,
        "greater_than_or_equal_to": _NUMBER,
        "less_than": _NUMBER,
        "less_than_or_equal_to": _NUMBER,
    },
}

PROPERTY_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "required": ["type"],
    "additionalProperties": False,
    "properties": {
        "type": {"enum": ["string", "flag", "integer", "decimal"]},
        "default": {"type": ["string", "boolean", "number"]},
        "aliases_in": {"type": "array", "items": {"type": "string", "minLength": 1}},
        "aliases_in_and_out": {"type": "array", "items": {"type": "string", "minLength": 1}},
        "required": {"type": "boolean"},
        "description": {"type": "string"},
        "rules": {"type": "array", "items": RULE_SCHEMA},
    },
}

DECLARATION_SCHEMA: Dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "type": "object",
    "required": ["groups"],
    "additionalProperties": False,
    "properties": {
        "groups": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["name", "properties"],
                "additionalProperties": False,
                "properties": {
                    "name": {"type": "string", "minLength": 1},
                    "properties": {
                        "type": "object",
                        "additionalProperties": PROPERTY_SCHEMA,
                    },
                },
            },
        },
    },
}


class SchemaValidationError(Exception):
    """Raised when a declaration manifest fails schema validation."""

    def __init__(self, message: str, errors: Optional[List[str]] = None) -> None:
        super().__init__(message)
        self.errors = errors or []


def validate_declarations(data: Any, schema: Optional[Dict[str, Any]] = None) -> None:
    """
    Validate parsed manifest data against the declaration schema.

    Args:
        data: Parsed manifest content.
        schema: Schema to use (defaults to DECLARATION_SCHEMA).

    Raises:
        SchemaValidationError: If validation fails, with details of all errors.
    """
    validator = jsonschema.Draft7Validator(schema or DECLARATION_SCHEMA)
    errors = sorted(validator.iter_errors(data), key=lambda e: [str(p) for p in e.absolute_path])

    if errors:
        error_messages = []
        for error in errors:
            path = " -> ".join(str(p) for p in error.absolute_path) or "(root)"
            error_messages.append(f"  [{path}] {error.message}")

        all_errors = "\n".join(error_messages)
        raise SchemaValidationError(
            f"Declaration schema validation failed ({len(errors)} error(s)):\n{all_errors}",
            errors=error_messages,
        )

    logger.debug("Declaration schema validation passed")
