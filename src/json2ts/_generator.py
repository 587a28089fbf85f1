from __future__ import annotations

from typing import List, Tuple

from typing_extensions import assert_never

from ._arrays import unify_array
from ._config import ConversionConfig
from ._json_values import (
    JsonArray,
    JsonBool,
    JsonNull,
    JsonNumber,
    JsonObject,
    JsonString,
    JsonValue,
)
from ._naming import DeclarationRegistry, suggest_name
from ._primitives import classify
from ._render import render_declaration

ROOT_NAME = "Root"
"""Base name of the declaration generated for a top-level object."""

_DEFAULT_SUGGESTED_NAME = "Item"


class DeclarationGenerator:
    """Walks a JSON value and writes one declaration per object it visits into
    a caller-owned registry.

    Structurally identical objects are not merged: each one gets its own,
    uniquely named declaration.
    """

    def __init__(self, config: ConversionConfig, registry: DeclarationRegistry) -> None:
        self._config = config
        self._registry = registry

    def generate(self, name: str, value: JsonValue) -> str:
        """Generate declarations for `value`, and return the TypeScript type that
        refers to it.

        Objects produce a declaration named after `name` (deduplicated against
        the registry). Scalars and arrays produce no declaration of their own;
        their type is returned directly.
        """
        if isinstance(value, JsonObject):
            return self._generate_object(name, value)
        return self._type_of(value, _DEFAULT_SUGGESTED_NAME)

    def _type_of(self, value: JsonValue, suggested_name: str) -> str:
        if isinstance(value, JsonObject):
            return self._generate_object(suggested_name, value)
        elif isinstance(value, JsonArray):
            return unify_array(value.elements, suggested_name, self._generate_object)
        elif isinstance(value, (JsonNull, JsonBool, JsonNumber, JsonString)):
            return classify(value)
        else:
            assert_never(value)

    def _generate_object(self, name: str, obj: JsonObject) -> str:
        unique_name = self._registry.reserve(name)

        properties: List[Tuple[str, str]] = []
        for key, member in obj.members.items():
            properties.append((key, self._type_of(member, suggest_name(key))))

        self._registry.insert(
            unique_name, render_declaration(unique_name, properties, self._config)
        )
        return unique_name
