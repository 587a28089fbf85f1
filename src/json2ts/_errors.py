from __future__ import annotations


class Json2TsError(Exception):
    """Base class for errors raised by json2ts."""


class ParseError(Json2TsError):
    """Raised when the input text is not valid JSON. No declarations are
    generated in this case."""

    def __init__(self, parser_message: str) -> None:
        self.parser_message = parser_message
        """Message reported by the underlying JSON parser."""
        super().__init__(f"Invalid JSON: {parser_message}")


class ConversionError(Json2TsError):
    """Raised for unexpected failures while generating or rendering
    declarations. Callers should treat this as "no output"; partial output is
    never returned."""
