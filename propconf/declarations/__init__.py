"""
Declarations Module.

Handles loading of property group declarations from manifest files
(YAML/JSON) with JSON schema validation.
"""

from propconf.declarations.loader import DeclarationError, DeclarationLoader
from propconf.declarations.schema import (
    DECLARATION_SCHEMA,
    SchemaValidationError,
    validate_declarations,
)

__all__ = [
    "DECLARATION_SCHEMA",
    "DeclarationError",
    "DeclarationLoader",
    "SchemaValidationError",
    "validate_declarations",
]
