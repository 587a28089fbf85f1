from __future__ import annotations

from typing import Any, Optional

from ._config import ConversionConfig
from ._errors import ConversionError, ParseError
from ._generator import ROOT_NAME, DeclarationGenerator
from ._json_values import JsonValue, from_python, parse_json
from ._naming import DeclarationRegistry
from ._render import render_registry

SAMPLE_JSON = """{
  "user": {
    "id": 1,
    "name": "John Doe",
    "email": "john@example.com",
    "active": true,
    "lastLogin": "2025-03-30T12:00:00Z",
    "address": {
      "street": "123 Main St",
      "city": "Anytown",
      "zip": "12345"
    },
    "roles": ["admin", "user"],
    "settings": {
      "notifications": true,
      "theme": "dark"
    },
    "tags": [
      {"id": 1, "name": "important"},
      {"id": 2, "name": "personal"}
    ],
    "misc": [1, "test", true]
  }
}"""
"""Example document exercising nested objects, object arrays, dates and mixed
arrays."""


def convert(text: str, config: Optional[ConversionConfig] = None) -> str:
    """Convert JSON text to TypeScript declarations.

    Args:
        text: JSON document.
        config: Conversion options. Defaults to `ConversionConfig()`.

    Returns:
        Declarations separated by blank lines. Empty if the document has no
        objects in it, e.g. a top-level scalar.

    Raises:
        ParseError: if `text` is not valid JSON.
        ConversionError: if generation fails for any other reason.
    """
    return convert_value(parse_json(text), config)


def convert_value(value: Any, config: Optional[ConversionConfig] = None) -> str:
    """Convert an already-parsed JSON value to TypeScript declarations.

    `value` can be a `JsonValue` or plain Python data as returned by
    `json.loads()`. A top-level object is always declared as `Root`.

    Raises:
        ConversionError: if generation fails.
    """
    if config is None:
        config = ConversionConfig()

    # Fresh registry for every call; nothing from a failed run can leak into the
    # next one.
    registry = DeclarationRegistry()
    try:
        json_value: JsonValue = from_python(value)
        DeclarationGenerator(config, registry).generate(ROOT_NAME, json_value)
        return render_registry(registry)
    except Exception as e:
        raise ConversionError("Failed to generate TypeScript declarations.") from e


def validate_json(text: str) -> Optional[str]:
    """Check whether `text` parses as JSON.

    Returns:
        None if the text is valid JSON or blank, otherwise a human-readable
        error message.
    """
    if not text.strip():
        return None
    try:
        parse_json(text)
    except ParseError as e:
        return str(e)
    return None
