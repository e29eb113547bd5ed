"""Typed, defaulted access to the text of child elements.

Every function here is total: a missing child element or unreadable text is
reported through a default value (``None``, ``0`` or ``Decimal("0.0")``),
never through an exception.
"""

import re
from decimal import Decimal
from functools import lru_cache
from typing import Optional

from lxml import etree

from ship_order_converter.shared.config import NumberFormatConfig

DEFAULT_INT = 0
DEFAULT_DECIMAL = Decimal("0.0")

INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1
MAX_DECIMAL_MAGNITUDE = Decimal(79228162514264337593543950335)

# Only ASCII whitespace surrounds a number; no-break space may be a group separator
_NUMBER_WHITESPACE = " \t\n\v\f\r"
_XML_WHITESPACE = " \t\r\n"
_SPACE_GROUP_SEPARATORS = ("\u00a0", "\u202f")
_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")

_DEFAULT_NUMBERS = NumberFormatConfig()


def _find_child(parent: etree._Element, child_name: str) -> Optional[etree._Element]:
    return parent.find(child_name)


def _preserves_space(text_node: etree._ElementUnicodeResult) -> bool:
    owner = text_node.getparent()
    if text_node.is_tail:
        owner = owner.getparent()
    if owner is None:
        return False
    scopes = owner.xpath("ancestor-or-self::*[@xml:space][1]/@xml:space")
    return bool(scopes) and scopes[0] == "preserve"


def _element_text(element: etree._Element) -> str:
    # Descendant text nodes only; whitespace-only nodes are dropped unless
    # they sit in an xml:space="preserve" scope
    parts = []
    for text_node in element.xpath(".//text()"):
        if text_node.strip(_XML_WHITESPACE) or _preserves_space(text_node):
            parts.append(str(text_node))
    return "".join(parts)


def _group_characters(numbers: NumberFormatConfig) -> str:
    # A plain space stands in for a space-like group separator
    if (
        numbers.group_separator in _SPACE_GROUP_SEPARATORS
        and numbers.decimal_separator != " "
    ):
        return numbers.group_separator + " "
    return numbers.group_separator


@lru_cache(maxsize=None)
def _decimal_pattern(numbers: NumberFormatConfig) -> re.Pattern:
    group = re.escape(_group_characters(numbers))
    point = re.escape(numbers.decimal_separator)
    return re.compile(
        rf"(?P<leading_sign>[+-])?"
        rf"(?P<integral>[0-9][0-9{group}]*)?"
        rf"(?:{point}(?P<fraction>[0-9]*))?"
        rf"(?P<trailing_sign>[+-])?"
    )


def parse_int(text: Optional[str]) -> int:
    """Read a signed 32-bit base-10 integer, returning 0 when the text is not one."""
    if text is None:
        return DEFAULT_INT

    candidate = text.strip(_NUMBER_WHITESPACE)
    if not _INTEGER_PATTERN.fullmatch(candidate):
        return DEFAULT_INT

    value = int(candidate)
    if not INT32_MIN <= value <= INT32_MAX:
        return DEFAULT_INT
    return value


def parse_decimal(
    text: Optional[str],
    numbers: Optional[NumberFormatConfig] = None
) -> Decimal:
    """Read a decimal number after replacing every period with a comma.

    The substituted text is read with the separators of ``numbers``
    (comma-decimal by default), so ``"10.90"`` gives ``Decimal("10.90")``,
    ``"1,5"`` gives ``Decimal("1.5")`` and ``"1.234,5"`` is rejected.

    Args:
        text: Raw element text, or None when the element is missing
        numbers: Separator rules applied after the substitution

    Returns:
        The parsed value, or ``Decimal("0.0")`` when the text cannot be read
    """
    if text is None:
        return DEFAULT_DECIMAL

    numbers = numbers or _DEFAULT_NUMBERS
    candidate = text.replace(".", ",").strip(_NUMBER_WHITESPACE)
    match = _decimal_pattern(numbers).fullmatch(candidate)
    if match is None:
        return DEFAULT_DECIMAL

    leading_sign, trailing_sign = match.group("leading_sign", "trailing_sign")
    if leading_sign and trailing_sign:
        return DEFAULT_DECIMAL

    integral = match.group("integral") or ""
    for group in _group_characters(numbers):
        integral = integral.replace(group, "")
    fraction = match.group("fraction") or ""
    if not integral and not fraction:
        return DEFAULT_DECIMAL

    sign = leading_sign or trailing_sign or ""
    literal = f"{sign}{integral or '0'}"
    if fraction:
        literal = f"{literal}.{fraction}"

    value = Decimal(literal)
    if value.copy_abs() > MAX_DECIMAL_MAGNITUDE:
        return DEFAULT_DECIMAL
    return value


def text_of(parent: etree._Element, child_name: str) -> Optional[str]:
    """Return the text of the first ``child_name`` child, or None if there is none.

    An element that exists but has no text yields ``""``.
    """
    child = _find_child(parent, child_name)
    if child is None:
        return None
    return _element_text(child)


def int_of(parent: etree._Element, child_name: str) -> int:
    """Return the first ``child_name`` child read as an integer, defaulting to 0."""
    return parse_int(text_of(parent, child_name))


def decimal_of(
    parent: etree._Element,
    child_name: str,
    numbers: Optional[NumberFormatConfig] = None
) -> Decimal:
    """Return the first ``child_name`` child read by :func:`parse_decimal`."""
    return parse_decimal(text_of(parent, child_name), numbers)
