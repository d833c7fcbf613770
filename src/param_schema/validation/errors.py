"""
Validation Error Types for Request Parameter Validation.

Provides structured error reporting for validation failures:
- SchemaError: Single failed field with its full path
- SchemaValidationError: Exception carrying every error of one validation call
"""

from typing import Any, Dict, List


NOT_FOUND = "not found"
NOT_A_NUMBER = "not a number"
LESS_THAN_MIN = "less than min"
GREATER_THAN_MAX = "greater than max"
LENGTH_NOT_MATCH = "length not match"
LENGTH_LESS_THAN_MIN = "length less than min"
LENGTH_GREATER_THAN_MAX = "length greater than max"
NOT_BOOLEAN = "not boolean"
NOT_NUMBER_OR_STRING = "not number or string"
ARRAY_EXPECTED = "array expected"
OBJECT_EXPECTED = "object expected"


def _symbol_text(symbol: Any) -> str:
    if isinstance(symbol, float) and symbol.is_integer():
        return str(int(symbol))
    return str(symbol)


def invalid_symbol(symbols: List[Any]) -> str:
    """Description for an enum value outside ``symbols``."""
    return f"invalid symbol, valid symbols : [{', '.join(_symbol_text(s) for s in symbols)}]"


class SchemaError:
    """
    Details about a single failed field.

    Attributes:
        name: Dotted/bracketed path to the field (e.g. "user.tags[2]")
        type: Declared schema type of the field
        value: Raw value that failed, before any coercion
        description: Fixed human-readable reason
    """

    def __init__(self, name: str, type: str, value: Any, description: str):
        self.name = name
        self.type = type
        self.value = value
        self.description = description

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "name": self.name,
            "type": self.type,
            "value": self.value,
            "description": self.description,
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SchemaError):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        return (
            f"SchemaError(name={self.name!r}, type={self.type!r}, "
            f"description={self.description!r})"
        )


class SchemaValidationError(Exception):
    """
    Exception raised by ``validate_or_raise`` when validation fails.

    The validator itself never raises; this wraps its collected errors for
    callers that prefer exception flow.

    Attributes:
        errors: List of SchemaError instances, in validation order
    """

    def __init__(self, errors: List[SchemaError]):
        self.errors = errors
        super().__init__(f"Validation failed: {len(errors)} error(s)")

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to dictionary representation.

        Returns:
            Dict with:
                - success: False
                - errors: List of error details
        """
        return {
            "success": False,
            "errors": [e.to_dict() for e in self.errors],
        }

    def __repr__(self) -> str:
        return f"SchemaValidationError({len(self.errors)} errors)"
