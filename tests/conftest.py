"""
Pytest configuration and shared fixtures for param_schema tests.
"""

import sys
from pathlib import Path

import pytest

# Ensure src is importable without an install
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from param_schema.validation import Schema, parse_schemas  # noqa: E402


@pytest.fixture
def user_schema():
    """Nested object schema with an array of objects inside."""
    return parse_schemas(
        [
            {"name": "id", "type": "int", "min": 1},
            {
                "name": "user",
                "type": "object",
                "fields": [
                    {"name": "age", "type": "int", "min": 0},
                    {"name": "role", "type": "enum", "symbols": ["admin", "user"]},
                    {
                        "name": "emails",
                        "type": "array",
                        "optional": True,
                        "elementType": {"type": "string", "min_length": 3},
                    },
                ],
            },
        ]
    )


@pytest.fixture
def make_schema():
    """Build one Schema from keyword arguments."""

    def _make(**config) -> Schema:
        config.setdefault("name", "field")
        return Schema.from_dict(config)

    return _make
