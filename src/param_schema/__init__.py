"""
param_schema - declarative validation and coercion of HTTP request parameters.
"""

from .validation import (
    ArraySchema,
    BooleanSchema,
    EnumSchema,
    NumericSchema,
    ObjectSchema,
    Schema,
    SchemaError,
    SchemaType,
    SchemaValidationError,
    StringSchema,
    ValidationResult,
    is_valid,
    load_schema,
    validate,
    validate_or_raise,
)
from .http import HTTPResponse
from .middleware import MiddlewareResult, SchemaValidatorMiddleware, merge_request_data
from .settings import ValidatorSettings

__version__ = "0.3.1"

__all__ = [
    "ArraySchema",
    "BooleanSchema",
    "EnumSchema",
    "NumericSchema",
    "ObjectSchema",
    "Schema",
    "SchemaError",
    "SchemaType",
    "SchemaValidationError",
    "StringSchema",
    "ValidationResult",
    "is_valid",
    "load_schema",
    "validate",
    "validate_or_raise",
    "HTTPResponse",
    "MiddlewareResult",
    "SchemaValidatorMiddleware",
    "merge_request_data",
    "ValidatorSettings",
]
