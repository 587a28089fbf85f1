"""Tagged-union model of parsed JSON documents.

`json.loads()` gives us untyped Python objects. We convert them into a closed set
of frozen dataclasses, so that every dispatch over a JSON value can end in
`assert_never()` and be checked by the type checker.
"""

from __future__ import annotations

import dataclasses
import json
from typing import Any, Mapping, Tuple, Union

from typing_extensions import Literal, TypeAlias, assert_never

from ._errors import ParseError


@dataclasses.dataclass(frozen=True)
class JsonNull:
    pass


@dataclasses.dataclass(frozen=True)
class JsonBool:
    value: bool


@dataclasses.dataclass(frozen=True)
class JsonNumber:
    value: Union[int, float]


@dataclasses.dataclass(frozen=True)
class JsonString:
    value: str


@dataclasses.dataclass(frozen=True)
class JsonArray:
    elements: Tuple[JsonValue, ...]


@dataclasses.dataclass(frozen=True)
class JsonObject:
    members: Mapping[str, JsonValue]
    """Object members, in the order they appeared in the document."""


JsonValue: TypeAlias = Union[
    JsonNull, JsonBool, JsonNumber, JsonString, JsonArray, JsonObject
]

CoarseKind = Literal["object", "array", "string", "number", "boolean", "null"]


def coarse_kind(value: JsonValue) -> CoarseKind:
    """Dynamic category of a JSON value. Date-like strings are still
    `"string"` at this level."""
    if isinstance(value, JsonNull):
        return "null"
    elif isinstance(value, JsonBool):
        return "boolean"
    elif isinstance(value, JsonNumber):
        return "number"
    elif isinstance(value, JsonString):
        return "string"
    elif isinstance(value, JsonArray):
        return "array"
    elif isinstance(value, JsonObject):
        return "object"
    else:
        assert_never(value)


def from_python(obj: Any) -> JsonValue:
    """Convert plain Python data, as produced by `json.loads()`, into a
    `JsonValue`. Values that are already `JsonValue` instances are returned
    as-is.

    Raises:
        TypeError: if `obj` contains something that can't appear in JSON.
    """
    if isinstance(
        obj, (JsonNull, JsonBool, JsonNumber, JsonString, JsonArray, JsonObject)
    ):
        return obj
    if obj is None:
        return JsonNull()
    # bool is a subclass of int, so it must be checked first.
    if isinstance(obj, bool):
        return JsonBool(obj)
    if isinstance(obj, (int, float)):
        return JsonNumber(obj)
    if isinstance(obj, str):
        return JsonString(obj)
    if isinstance(obj, (list, tuple)):
        return JsonArray(tuple(from_python(item) for item in obj))
    if isinstance(obj, dict):
        members = {}
        for key, item in obj.items():
            if not isinstance(key, str):
                raise TypeError(f"JSON object keys must be strings, got {key!r}")
            members[key] = from_python(item)
        return JsonObject(members)
    raise TypeError(f"Unsupported JSON value of type {type(obj).__name__}")


def _reject_constant(name: str) -> Any:
    # Python's parser accepts these, but they aren't part of JSON.
    raise ValueError(f"Unexpected token {name}")


def parse_json(text: str) -> JsonValue:
    """Parse JSON text into a `JsonValue`.

    Raises:
        ParseError: if `text` is not valid JSON.
    """
    try:
        # Converting can overflow even when the C scanner accepted the document.
        return from_python(json.loads(text, parse_constant=_reject_constant))
    except ValueError as e:
        # Includes json.JSONDecodeError.
        raise ParseError(str(e)) from e
    except RecursionError as e:
        raise ParseError("Document is nested too deeply") from e
