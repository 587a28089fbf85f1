from __future__ import annotations

import re

from ._json_values import (
    JsonArray,
    JsonBool,
    JsonNull,
    JsonNumber,
    JsonObject,
    JsonString,
    JsonValue,
)

# Only anchored at the start: any suffix (fractional seconds, offsets) is allowed.
_DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}T[0-9]{2}:[0-9]{2}:[0-9]{2}")

_raw_type_mapping = {
    JsonNull: "null",
    JsonBool: "boolean",
    JsonNumber: "number",
    JsonString: "string",
    JsonArray: "any",
    JsonObject: "any",
}


def classify(value: JsonValue) -> str:
    """Map a JSON value to a TypeScript base type. Strings that look like
    ISO-8601 timestamps become `Date`. Arrays and objects have no primitive
    type and map to `any`."""
    if isinstance(value, JsonString) and _DATE_PATTERN.match(value.value):
        return "Date"
    return _raw_type_mapping.get(type(value), "any")
