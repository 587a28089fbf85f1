from __future__ import annotations

from typing import Callable, Sequence

from ._json_values import JsonArray, JsonObject, JsonValue, coarse_kind
from ._primitives import classify

SAMPLE_SIZE = 10
"""Number of leading elements inspected to decide whether an array is
homogeneous."""

MAX_UNION_KINDS = 3
"""Arrays mixing more coarse kinds than this are typed as `any[]`."""


def unify_array(
    elements: Sequence[JsonValue],
    suggested_name: str,
    generate_object: Callable[[str, JsonObject], str],
) -> str:
    """Compute the TypeScript type of an array.

    Homogeneous arrays are typed from their first element; object elements are
    turned into a declaration via `generate_object(suggested_name, element)`, and
    nested arrays are unified recursively.
    Mixed arrays become a parenthesized union of their elements' primitive
    types, or `any[]` if they mix too many kinds.
    """
    if len(elements) == 0:
        return "any[]"

    sample_kinds = set(map(coarse_kind, elements[:SAMPLE_SIZE]))
    if len(sample_kinds) == 1:
        first = elements[0]
        if isinstance(first, JsonObject):
            return generate_object(suggested_name, first) + "[]"
        elif isinstance(first, JsonArray):
            return unify_array(first.elements, suggested_name, generate_object) + "[]"
        return classify(first) + "[]"

    if len(set(map(coarse_kind, elements))) > MAX_UNION_KINDS:
        return "any[]"

    # We're using dictionary as an ordered set.
    member_types = {classify(element): None for element in elements}
    return "(" + " | ".join(member_types.keys()) + ")[]"
