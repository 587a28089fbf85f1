from __future__ import annotations

import re
from typing import Sequence, Tuple

from ._config import ConversionConfig
from ._naming import DeclarationRegistry

_BARE_PROPERTY_NAME = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")

# Characters that can't appear unescaped in a single-quoted string literal.
_UNSAFE_CHARACTER = re.compile(r"[\\'\x00-\x1f\x7f-\x9f\u2028\u2029]")
_SHORT_ESCAPES = {"\\": "\\\\", "'": "\\'", "\n": "\\n", "\r": "\\r", "\t": "\\t"}


def _escape_character(match: re.Match[str]) -> str:
    char = match.group()
    return _SHORT_ESCAPES.get(char, f"\\u{ord(char):04x}")


def format_property_name(key: str) -> str:
    """Format an object key for use as a property name. Keys that aren't plain
    identifiers are quoted."""
    if _BARE_PROPERTY_NAME.fullmatch(key):
        return key
    escaped = _UNSAFE_CHARACTER.sub(_escape_character, key)
    return f"'{escaped}'"


def render_declaration(
    name: str,
    properties: Sequence[Tuple[str, str]],
    config: ConversionConfig,
) -> str:
    """Render one declaration from `(key, type)` pairs."""
    out_lines = []
    if config.use_interfaces:
        out_lines.append(f"export interface {name} " + "{")
    else:
        out_lines.append(f"export type {name} = " + "{")

    optional_marker = "?" if config.use_optional_fields else ""
    for key, typ in properties:
        out_lines.append(f"  {format_property_name(key)}{optional_marker}: {typ};")

    out_lines.append("}" if config.use_interfaces else "};")
    return "\n".join(out_lines)


def render_registry(registry: DeclarationRegistry) -> str:
    """Concatenate all declarations, in insertion order, separated by blank
    lines."""
    return "\n\n".join(text for _, text in registry.items()).strip()
