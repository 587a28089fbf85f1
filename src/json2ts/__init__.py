""":mod:`json2ts` infers TypeScript declarations from JSON documents.

Each object in the document becomes an `export interface` (or `export type`)
declaration, named after the property it was found under. Arrays are typed from
their elements, and ISO-8601 timestamps are typed as `Date`.
"""

from ._arrays import unify_array as unify_array
from ._config import ConversionConfig as ConversionConfig
from ._convert import SAMPLE_JSON as SAMPLE_JSON
from ._convert import convert as convert
from ._convert import convert_value as convert_value
from ._convert import validate_json as validate_json
from ._errors import ConversionError as ConversionError
from ._errors import Json2TsError as Json2TsError
from ._errors import ParseError as ParseError
from ._generator import DeclarationGenerator as DeclarationGenerator
from ._json_values import CoarseKind as CoarseKind
from ._json_values import JsonArray as JsonArray
from ._json_values import JsonBool as JsonBool
from ._json_values import JsonNull as JsonNull
from ._json_values import JsonNumber as JsonNumber
from ._json_values import JsonObject as JsonObject
from ._json_values import JsonString as JsonString
from ._json_values import JsonValue as JsonValue
from ._json_values import coarse_kind as coarse_kind
from ._json_values import from_python as from_python
from ._json_values import parse_json as parse_json
from ._naming import DeclarationRegistry as DeclarationRegistry
from ._naming import singularize as singularize
from ._naming import suggest_name as suggest_name
from ._primitives import classify as classify
from ._render import format_property_name as format_property_name
from ._render import render_declaration as render_declaration
from ._render import render_registry as render_registry

__version__ = "0.1.0"
