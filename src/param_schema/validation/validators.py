"""
Recursive Validator for Request Parameter Validation.

Walks a field schema (or an ordered list of them) over a data bag:
- Required / optional presence handling
- Dispatch to the per-type checker
- Aggregated errors: every field is checked, nothing short-circuits
- In-place coercion of every field that passes
"""

import logging
from typing import Any, Dict, List, Sequence, Union

from .checkers import check_field
from .errors import NOT_FOUND, SchemaError, SchemaValidationError
from .paths import join_path
from .schema import Schema, parse_schemas

logger = logging.getLogger(__name__)


SchemaSpec = Union[Schema, Sequence[Schema]]


def is_valid(
    schema: SchemaSpec,
    data: Any,
    errors: List[SchemaError],
    path: str = "",
) -> bool:
    """
    Check ``data`` against one schema or a sequence of sibling schemas.

    Fields that pass are overwritten in ``data`` with their coerced value.
    Every failure appends one SchemaError to ``errors``.

    Args:
        schema: A Schema, or an ordered sequence of Schemas
        data: Mutable data bag
        errors: Error sink shared across the whole validation call
        path: Error path of the containing structure ("" at top level)

    Returns:
        True iff every field passed
    """
    if not isinstance(schema, Schema):
        valid = True
        for entry in schema:
            valid = is_valid(entry, data, errors, path) and valid
        return valid

    value = data.get(schema.name)
    if value is None:
        if schema.optional:
            return True
        errors.append(
            SchemaError(
                name=join_path(path, schema.name),
                type=schema.type.value,
                value=value,
                description=NOT_FOUND,
            )
        )
        return False

    return check_field(schema, data, errors, path)


class ValidationResult:
    """
    Outcome of a validation call.

    Attributes:
        valid: Overall verdict
        data: The (coerced) data bag
        errors: SchemaError list, in validation order
    """

    def __init__(self, valid: bool, data: Dict[str, Any], errors: List[SchemaError]):
        self.valid = valid
        self.data = data
        self.errors = errors

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {"valid": self.valid, "data": self.data}
        if self.errors:
            result["errors"] = [e.to_dict() for e in self.errors]
        return result

    def __bool__(self) -> bool:
        return self.valid

    def __repr__(self) -> str:
        return f"ValidationResult(valid={self.valid!r}, errors={len(self.errors)})"


def validate(schemas: SchemaSpec, data: Dict[str, Any]) -> ValidationResult:
    """
    Validate a data bag against field schemas.

    ``data`` is coerced in place and also returned on the result.
    Schemas may be given in dictionary form.

    Example:
        >>> result = validate([{"name": "n", "type": "int"}], {"n": "5"})
        >>> result.valid, result.data
        (True, {'n': 5})
    """
    if data is None:
        data = {}
    if not isinstance(schemas, Schema):
        schemas = parse_schemas(schemas)

    errors: List[SchemaError] = []
    valid = is_valid(schemas, data, errors)
    if errors:
        logger.debug(
            "Validation failed with %d error(s): %s",
            len(errors),
            ", ".join(f"{e.name} ({e.description})" for e in errors),
        )
    return ValidationResult(valid=valid, data=data, errors=errors)


def validate_or_raise(schemas: SchemaSpec, data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Validate and return the coerced data bag.

    Raises:
        SchemaValidationError: If any field failed (contains all errors)
    """
    result = validate(schemas, data)
    if not result.valid:
        raise SchemaValidationError(errors=result.errors)
    return result.data
