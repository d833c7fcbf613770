"""
Schema Models for Request Parameter Validation.

Defines the closed set of field schemas used by the validator:
- NumericSchema: int / float with optional inclusive bounds
- StringSchema: exact, minimum and maximum length
- BooleanSchema: true/false with optional numeric forms
- EnumSchema: fixed list of string or numeric symbols
- ArraySchema: homogeneous list, one element schema for every item
- ObjectSchema: nested mapping described by an ordered field list

Example:
    >>> schema = Schema.from_dict({"name": "age", "type": "int", "min": 0})
    >>> schema
    NumericSchema(name='age', type='int')

Example YAML (see ``param_schema.validation.loader``):
    - name: user
      type: object
      fields:
        - name: age
          type: int
          min: 0
        - name: tags
          type: array
          optional: true
          elementType:
            type: string
            max_length: 32
"""

import copy
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Sequence, Union


Number = Union[int, float]


class SchemaType(str, Enum):
    """Discriminant for every supported schema variant."""

    INT = "int"
    FLOAT = "float"
    STRING = "string"
    BOOLEAN = "boolean"
    ENUM = "enum"
    ARRAY = "array"
    OBJECT = "object"


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _check_length_bound(label: str, value: Optional[int]) -> None:
    if value is None:
        return
    if not isinstance(value, int) or isinstance(value, bool) or value < 0:
        raise ValueError(f"'{label}' must be a non-negative integer, got {value!r}")


class Schema:
    """
    Base class for a single named field rule.

    Attributes:
        name: Key of the field in the data bag
        type: SchemaType discriminant
        optional: Whether the field may be absent (None counts as absent)
    """

    type: SchemaType

    def __init__(self, name: str = "", optional: bool = False):
        if not isinstance(name, str):
            raise ValueError(f"Schema name must be a string, got {name!r}")
        self.name = name
        self.optional = bool(optional)

    def clone(self, name: Optional[str] = None) -> "Schema":
        """Return a shallow copy, optionally bound to a different name."""
        other = copy.copy(self)
        if name is not None:
            other.name = name
        return other

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        result: Dict[str, Any] = {"name": self.name, "type": self.type.value}
        if self.optional:
            result["optional"] = True
        return result

    @classmethod
    def from_dict(cls, config: Dict[str, Any]) -> "Schema":
        """
        Build a schema from its dictionary form.

        The ``type`` key selects the variant. Camel-case keys used by
        JavaScript clients (``allowNumeric``, ``elementType``) are accepted
        alongside their snake-case spelling.

        Raises:
            ValueError: If the type is unknown or a constraint is malformed
        """
        if isinstance(config, Schema):
            return config
        if not isinstance(config, dict):
            raise ValueError(f"Invalid schema config: must be dict or Schema, got {config!r}")

        options = dict(config)
        raw_type = options.pop("type", None)
        try:
            schema_type = SchemaType(raw_type)
        except ValueError:
            valid = ", ".join(t.value for t in SchemaType)
            raise ValueError(
                f"Invalid type {raw_type!r}. Must be one of: {valid}"
            ) from None

        if "allowNumeric" in options:
            options["allow_numeric"] = options.pop("allowNumeric")
        if "elementType" in options:
            options["element_type"] = options.pop("elementType")

        variant = _VARIANTS[schema_type]
        if variant is NumericSchema:
            options["type"] = schema_type
        try:
            return variant(**options)
        except TypeError as e:
            name = config.get("name", "")
            raise ValueError(f"Invalid options for {schema_type.value} schema {name!r}: {e}") from None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Schema):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        attrs = [f"name={self.name!r}", f"type={self.type.value!r}"]
        if self.optional:
            attrs.append("optional=True")
        return f"{type(self).__name__}({', '.join(attrs)})"


class NumericSchema(Schema):
    """
    Integer or floating point field.

    ``min`` and ``max`` are inclusive; ``None`` means unbounded, so a bound
    of ``0`` is enforced like any other.
    """

    def __init__(
        self,
        name: str = "",
        type: Union[SchemaType, str] = SchemaType.INT,
        min: Optional[Number] = None,
        max: Optional[Number] = None,
        optional: bool = False,
    ):
        super().__init__(name, optional)
        schema_type = SchemaType(type)
        if schema_type not in (SchemaType.INT, SchemaType.FLOAT):
            raise ValueError(f"Numeric schema type must be int or float, got {type!r}")
        for label, bound in (("min", min), ("max", max)):
            if bound is not None and not _is_number(bound):
                raise ValueError(f"'{label}' must be a number, got {bound!r}")
        if min is not None and max is not None and min > max:
            raise ValueError(f"'min' ({min}) is greater than 'max' ({max})")
        self.type = schema_type
        self.min = min
        self.max = max

    def to_dict(self) -> Dict[str, Any]:
        result = super().to_dict()
        if self.min is not None:
            result["min"] = self.min
        if self.max is not None:
            result["max"] = self.max
        return result


class StringSchema(Schema):
    """String field with optional exact / minimum / maximum length."""

    type = SchemaType.STRING

    def __init__(
        self,
        name: str = "",
        length: Optional[int] = None,
        min_length: Optional[int] = None,
        max_length: Optional[int] = None,
        optional: bool = False,
    ):
        super().__init__(name, optional)
        _check_length_bound("length", length)
        _check_length_bound("min_length", min_length)
        _check_length_bound("max_length", max_length)
        if min_length is not None and max_length is not None and min_length > max_length:
            raise ValueError(
                f"'min_length' ({min_length}) is greater than 'max_length' ({max_length})"
            )
        self.length = length
        self.min_length = min_length
        self.max_length = max_length

    def to_dict(self) -> Dict[str, Any]:
        result = super().to_dict()
        if self.length is not None:
            result["length"] = self.length
        if self.min_length is not None:
            result["min_length"] = self.min_length
        if self.max_length is not None:
            result["max_length"] = self.max_length
        return result


class BooleanSchema(Schema):
    """Boolean field. ``allow_numeric`` also admits 0/1 and "0"/"1"."""

    type = SchemaType.BOOLEAN

    def __init__(self, name: str = "", allow_numeric: bool = True, optional: bool = False):
        super().__init__(name, optional)
        self.allow_numeric = allow_numeric is not False

    def to_dict(self) -> Dict[str, Any]:
        result = super().to_dict()
        if not self.allow_numeric:
            result["allowNumeric"] = False
        return result


class EnumSchema(Schema):
    """Field restricted to a fixed, ordered list of symbols."""

    type = SchemaType.ENUM

    def __init__(self, name: str = "", symbols: Sequence[Any] = (), optional: bool = False):
        super().__init__(name, optional)
        if isinstance(symbols, (str, bytes)) or not isinstance(symbols, Iterable):
            raise ValueError(f"'symbols' must be a list, got {symbols!r}")
        symbols = list(symbols)
        if not symbols:
            raise ValueError("'symbols' must not be empty")
        all_strings = all(isinstance(s, str) for s in symbols)
        all_numbers = all(_is_number(s) for s in symbols)
        if not (all_strings or all_numbers):
            raise ValueError(
                f"'symbols' must be all strings or all numbers, got {symbols!r}"
            )
        self.symbols: List[Union[str, Number]] = symbols

    def to_dict(self) -> Dict[str, Any]:
        result = super().to_dict()
        result["symbols"] = list(self.symbols)
        return result


class ArraySchema(Schema):
    """List field whose every element is checked against ``element_type``."""

    type = SchemaType.ARRAY

    def __init__(
        self,
        name: str = "",
        element_type: Union[Schema, Dict[str, Any], None] = None,
        optional: bool = False,
    ):
        super().__init__(name, optional)
        if element_type is None:
            raise ValueError(f"Array schema {name!r} requires 'element_type'")
        self.element_type: Schema = Schema.from_dict(element_type)

    def to_dict(self) -> Dict[str, Any]:
        result = super().to_dict()
        result["elementType"] = self.element_type.to_dict()
        return result


class ObjectSchema(Schema):
    """Nested mapping field described by an ordered list of field schemas."""

    type = SchemaType.OBJECT

    def __init__(
        self,
        name: str = "",
        fields: Sequence[Union[Schema, Dict[str, Any]]] = (),
        optional: bool = False,
    ):
        super().__init__(name, optional)
        self.fields: List[Schema] = parse_schemas(fields)

    def to_dict(self) -> Dict[str, Any]:
        result = super().to_dict()
        result["fields"] = [field.to_dict() for field in self.fields]
        return result


_VARIANTS = {
    SchemaType.INT: NumericSchema,
    SchemaType.FLOAT: NumericSchema,
    SchemaType.STRING: StringSchema,
    SchemaType.BOOLEAN: BooleanSchema,
    SchemaType.ENUM: EnumSchema,
    SchemaType.ARRAY: ArraySchema,
    SchemaType.OBJECT: ObjectSchema,
}


def parse_schemas(configs: Iterable[Union[Schema, Dict[str, Any]]]) -> List[Schema]:
    """
    Parse an ordered sequence of sibling field schemas.

    Args:
        configs: Schema instances or their dictionary form

    Returns:
        List of Schema instances, in declaration order

    Raises:
        ValueError: If an entry is malformed or two siblings share a name
    """
    if isinstance(configs, (Schema, dict, str, bytes)):
        raise ValueError("Field schemas must be given as a list")

    schemas = [Schema.from_dict(config) for config in configs]
    seen = set()
    for schema in schemas:
        if schema.name in seen:
            raise ValueError(f"Duplicate field name {schema.name!r}")
        seen.add(schema.name)
    return schemas
