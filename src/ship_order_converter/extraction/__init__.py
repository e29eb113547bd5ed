"""Field extraction: text, integer and decimal values of child elements."""

from .fields import (
    DEFAULT_DECIMAL,
    DEFAULT_INT,
    decimal_of,
    int_of,
    parse_decimal,
    parse_int,
    text_of,
)

__all__ = [
    "DEFAULT_DECIMAL",
    "DEFAULT_INT",
    "decimal_of",
    "int_of",
    "parse_decimal",
    "parse_int",
    "text_of",
]
