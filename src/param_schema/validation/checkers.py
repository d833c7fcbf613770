"""
Type Checkers for Request Parameter Validation.

One routine per schema kind. Each checker reads ``bag[schema.name]``,
and either writes the coerced value back and returns True, or appends a
single SchemaError and returns False leaving the bag untouched.

Coercion rules:
- int/float: loose leading-prefix parsing ("42abc" -> 42)
- string: non-strings are serialized as compact JSON
- boolean: true/false, "true"/"false" and optionally 0/1, "0"/"1"
- array/object: JSON strings are parsed into lists/dicts
- enum: membership only, no coercion
"""

import json
import math
import re
from collections.abc import MutableMapping
from typing import Any, Callable, Dict, List, Optional, Union

from . import errors as reasons
from .errors import SchemaError
from .paths import element_prefix, join_path
from .schema import (
    ArraySchema,
    BooleanSchema,
    EnumSchema,
    NumericSchema,
    ObjectSchema,
    Schema,
    SchemaType,
    StringSchema,
)


Checker = Callable[[Any, Any, List[SchemaError], str], bool]

_INT_PREFIX = re.compile(r"\s*([+-]?)(?:(0[xX])([0-9a-fA-F]*)|([0-9]+))")
_FLOAT_PREFIX = re.compile(
    r"\s*([+-]?(?:Infinity|(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?))"
)

_TRUE_STRINGS = ("true", "1")
_BOOLEAN_STRINGS = ("true", "false")
_NUMERIC_BOOLEAN_STRINGS = ("0", "1")


# Data bag access. Array elements are checked with the list itself as the
# bag and the element index (as a string) as the field name.

def _read(bag: Any, name: str) -> Any:
    if isinstance(bag, list):
        return bag[int(name)]
    return bag.get(name)


def _write(bag: Any, name: str, value: Any) -> None:
    if isinstance(bag, list):
        bag[int(name)] = value
    else:
        bag[name] = value


def _fail(
    errors: List[SchemaError],
    path: str,
    schema: Schema,
    value: Any,
    description: str,
) -> bool:
    errors.append(
        SchemaError(
            name=join_path(path, schema.name),
            type=schema.type.value,
            value=value,
            description=description,
        )
    )
    return False


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _parse_json(text: str) -> Any:
    try:
        return json.loads(text)
    except ValueError:
        return None


def _integral_floats_as_ints(value: Any) -> Any:
    # JSON.stringify writes 5.0 as "5"
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, (list, tuple)):
        return [_integral_floats_as_ints(v) for v in value]
    if isinstance(value, dict):
        return {k: _integral_floats_as_ints(v) for k, v in value.items()}
    return value


def parse_int(value: Any) -> Optional[int]:
    """
    Parse ``value`` as an integer, accepting a leading numeric prefix.

    Returns None when no number can be read.

    Examples:
        >>> parse_int("42abc")
        42
        >>> parse_int(" -7.9")
        -7
        >>> parse_int("abc") is None
        True
    """
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            return None
        return int(value)
    if not isinstance(value, str):
        return None

    match = _INT_PREFIX.match(value)
    if not match:
        return None
    sign, hex_prefix, hex_digits, digits = match.groups()
    if hex_prefix:
        if not hex_digits:
            return None
        number = int(hex_digits, 16)
    else:
        number = int(digits)
    return -number if sign == "-" else number


def parse_float(value: Any) -> Optional[float]:
    """
    Parse ``value`` as a float, accepting a leading numeric prefix.

    Returns None when no number can be read.

    Examples:
        >>> parse_float("3.5kg")
        3.5
        >>> parse_float("1e3")
        1000.0
    """
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            return None
        return None if math.isnan(number) else number
    if not isinstance(value, str):
        return None

    match = _FLOAT_PREFIX.match(value)
    if not match:
        return None
    return float(match.group(1))


def check_number(schema: NumericSchema, bag: Any, errors: List[SchemaError], path: str) -> bool:
    value = _read(bag, schema.name)
    parsed: Union[int, float, None]
    if schema.type == SchemaType.INT:
        parsed = parse_int(value)
    else:
        parsed = parse_float(value)

    if parsed is None:
        return _fail(errors, path, schema, value, reasons.NOT_A_NUMBER)
    if schema.min is not None and parsed < schema.min:
        return _fail(errors, path, schema, value, reasons.LESS_THAN_MIN)
    if schema.max is not None and parsed > schema.max:
        return _fail(errors, path, schema, value, reasons.GREATER_THAN_MAX)

    _write(bag, schema.name, parsed)
    return True


def check_string(schema: StringSchema, bag: Any, errors: List[SchemaError], path: str) -> bool:
    value = _read(bag, schema.name)
    text = value
    if not isinstance(text, str):
        text = json.dumps(
            _integral_floats_as_ints(value),
            separators=(",", ":"),
            ensure_ascii=False,
            default=str,
        )

    if schema.length is not None and len(text) != schema.length:
        return _fail(errors, path, schema, value, reasons.LENGTH_NOT_MATCH)
    if schema.min_length is not None and len(text) < schema.min_length:
        return _fail(errors, path, schema, value, reasons.LENGTH_LESS_THAN_MIN)
    if schema.max_length is not None and len(text) > schema.max_length:
        return _fail(errors, path, schema, value, reasons.LENGTH_GREATER_THAN_MAX)

    _write(bag, schema.name, text)
    return True


def _is_boolean_like(value: Any, allow_numeric: bool) -> bool:
    if isinstance(value, bool):
        return True
    if isinstance(value, str):
        if value in _BOOLEAN_STRINGS:
            return True
        return allow_numeric and value in _NUMERIC_BOOLEAN_STRINGS
    return allow_numeric and _is_number(value) and value in (0, 1)


def check_boolean(schema: BooleanSchema, bag: Any, errors: List[SchemaError], path: str) -> bool:
    value = _read(bag, schema.name)
    if not _is_boolean_like(value, schema.allow_numeric):
        return _fail(errors, path, schema, value, reasons.NOT_BOOLEAN)

    if isinstance(value, str):
        coerced = value in _TRUE_STRINGS
    else:
        # bool, or a number already known to be 0 or 1
        coerced = value == 1
    _write(bag, schema.name, coerced)
    return True


def check_enum(schema: EnumSchema, bag: Any, errors: List[SchemaError], path: str) -> bool:
    value = _read(bag, schema.name)
    if not (isinstance(value, str) or _is_number(value)):
        return _fail(errors, path, schema, value, reasons.NOT_NUMBER_OR_STRING)

    if not _is_member(value, schema.symbols):
        return _fail(errors, path, schema, value, reasons.invalid_symbol(schema.symbols))
    return True


def _is_member(value: Union[str, int, float], symbols: List[Any]) -> bool:
    # "1" never matches the symbol 1, nor 1 the symbol "1"
    for symbol in symbols:
        if isinstance(symbol, str) == isinstance(value, str) and symbol == value:
            return True
    return False


def check_array(schema: ArraySchema, bag: Any, errors: List[SchemaError], path: str) -> bool:
    raw = _read(bag, schema.name)
    value = raw
    if isinstance(value, tuple):
        value = list(value)
    elif isinstance(value, str):
        value = _parse_json(value)

    if not isinstance(value, list):
        return _fail(errors, path, schema, raw, reasons.ARRAY_EXPECTED)
    if value is not raw:
        _write(bag, schema.name, value)

    # One private copy per call; only its name changes between elements.
    element_schema = schema.element_type.clone()
    prefix = element_prefix(path, schema.name)
    valid = True
    for index in range(len(value)):
        element_schema.name = str(index)
        valid = check_field(element_schema, value, errors, prefix) and valid
    return valid


def check_object(schema: ObjectSchema, bag: Any, errors: List[SchemaError], path: str) -> bool:
    from .validators import is_valid

    raw = _read(bag, schema.name)
    value = raw
    if isinstance(value, str):
        value = _parse_json(value)

    if not isinstance(value, MutableMapping):
        return _fail(errors, path, schema, raw, reasons.OBJECT_EXPECTED)
    if value is not raw:
        _write(bag, schema.name, value)

    return is_valid(schema.fields, value, errors, join_path(path, schema.name))


CHECKERS: Dict[SchemaType, Checker] = {
    SchemaType.INT: check_number,
    SchemaType.FLOAT: check_number,
    SchemaType.STRING: check_string,
    SchemaType.BOOLEAN: check_boolean,
    SchemaType.ENUM: check_enum,
    SchemaType.ARRAY: check_array,
    SchemaType.OBJECT: check_object,
}

_unchecked = set(SchemaType) - set(CHECKERS)
if _unchecked:
    raise RuntimeError(f"No checker registered for: {sorted(t.value for t in _unchecked)}")


def check_field(schema: Schema, bag: Any, errors: List[SchemaError], path: str) -> bool:
    """Run the checker for ``schema.type`` against a value known to be present."""
    return CHECKERS[schema.type](schema, bag, errors, path)
