"""Public API for converting ship order documents."""

from .converter import ParseError, convert, convert_file, parse_document

__all__ = [
    "ParseError",
    "convert",
    "convert_file",
    "parse_document",
]
