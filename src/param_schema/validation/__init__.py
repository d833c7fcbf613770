"""
Request Parameter Validation.

Validates an untyped data bag (path parameters, query string, body)
against declarative field schemas:
- Type checking with coercion (numeric strings, boolean strings, JSON strings)
- Required / optional fields
- Numeric bounds, string length, enum symbols
- Nested arrays and objects with full error paths
- Aggregated errors: one pass reports every failing field

Example:
    >>> from param_schema.validation import validate
    >>> result = validate(
    ...     [
    ...         {"name": "id", "type": "int", "min": 1},
    ...         {"name": "tags", "type": "array", "elementType": {"type": "string"}},
    ...     ],
    ...     {"id": "7", "tags": '["a", "b"]'},
    ... )
    >>> result.valid, result.data
    (True, {'id': 7, 'tags': ['a', 'b']})
"""

from .schema import (
    ArraySchema,
    BooleanSchema,
    EnumSchema,
    NumericSchema,
    ObjectSchema,
    Schema,
    SchemaType,
    StringSchema,
    parse_schemas,
)
from .errors import SchemaError, SchemaValidationError
from .paths import join_path
from .validators import ValidationResult, is_valid, validate, validate_or_raise
from .loader import load_schema, parse_schema_text

__all__ = [
    "ArraySchema",
    "BooleanSchema",
    "EnumSchema",
    "NumericSchema",
    "ObjectSchema",
    "Schema",
    "SchemaType",
    "StringSchema",
    "parse_schemas",
    "SchemaError",
    "SchemaValidationError",
    "join_path",
    "ValidationResult",
    "is_valid",
    "validate",
    "validate_or_raise",
    "load_schema",
    "parse_schema_text",
]
