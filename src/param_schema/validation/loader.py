"""
Schema loading from YAML or JSON documents.

A schema document is either a list of field schemas, or a mapping with a
``fields`` list:

    fields:
      - name: id
        type: int
        min: 1
      - name: role
        type: enum
        symbols: [admin, user]
"""

import logging
from pathlib import Path
from typing import Any, List, Union

import yaml

from .schema import Schema, parse_schemas

logger = logging.getLogger(__name__)


def schemas_from_document(document: Any) -> List[Schema]:
    """
    Build field schemas from a parsed YAML/JSON document.

    Raises:
        ValueError: If the document has neither a list nor a ``fields`` list
    """
    if isinstance(document, dict):
        if "fields" not in document:
            raise ValueError("Schema document must be a list or contain a 'fields' list")
        document = document["fields"]
    if not isinstance(document, list):
        raise ValueError("Schema document must be a list or contain a 'fields' list")
    return parse_schemas(document)


def parse_schema_text(text: str) -> List[Schema]:
    """Parse field schemas from YAML (or JSON) text."""
    try:
        document = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid schema document: {e}") from e
    return schemas_from_document(document)


def load_schema(path: Union[str, Path]) -> List[Schema]:
    """
    Load field schemas from a YAML or JSON file.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is not a valid schema document
    """
    p = Path(path)
    try:
        text = p.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise FileNotFoundError(f"Schema not found: {p}") from e

    try:
        schemas = parse_schema_text(text)
    except ValueError as e:
        raise ValueError(f"Invalid schema in {p}: {e}") from e

    logger.debug("Loaded %d field schema(s) from %s", len(schemas), p)
    return schemas
