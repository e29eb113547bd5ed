"""Public conversion API: ship order XML in, :class:`Order` out.

Conversion has two error tiers. A document that is not well-formed XML raises
:class:`ParseError` and produces no order. Problems with individual values
(missing elements, unreadable numbers) never raise; they are replaced by
defaults while the order is built.
"""

from pathlib import Path
from typing import Optional, Tuple, Union

from lxml import etree

from ship_order_converter.orders import Order, build_order
from ship_order_converter.shared import ConverterConfig, get_logger

InputType = Union[str, bytes]

# Constants for API operations
PREVIEW_LENGTH = 100  # Max length for content preview in logs


class ParseError(ValueError):
    """Raised when the input is not a well-formed XML document."""

    def __init__(
        self,
        message: str,
        line: Optional[int] = None,
        column: Optional[int] = None
    ) -> None:
        super().__init__(message)
        self.line = line
        self.column = column


def _create_parser(encoding: Optional[str] = None) -> etree.XMLParser:
    # Internal entities expand; no external DTD, external entities or network access
    return etree.XMLParser(
        encoding=encoding,
        resolve_entities="internal",
        load_dtd=False,
        no_network=True,
    )


def _to_bytes(xml_text: InputType) -> Tuple[bytes, Optional[str]]:
    if isinstance(xml_text, str):
        # The declared encoding of an already decoded string is ignored
        return xml_text.encode("utf-8"), "utf-8"
    if isinstance(xml_text, (bytes, bytearray)):
        return bytes(xml_text), None
    raise TypeError(f"Expected str or bytes, got {type(xml_text).__name__}")


def _preview(xml_text: InputType) -> str:
    if isinstance(xml_text, (bytes, bytearray)):
        xml_text = bytes(xml_text[:PREVIEW_LENGTH + 1]).decode("utf-8", errors="replace")
    if len(xml_text) > PREVIEW_LENGTH:
        return xml_text[:PREVIEW_LENGTH] + "..."
    return xml_text


def parse_document(
    xml_text: InputType,
    config: Optional[ConverterConfig] = None
) -> etree._Element:
    """Parse XML text into an lxml root element.

    Raises:
        ParseError: If the input is empty, too large or not well-formed
    """
    config = config or ConverterConfig()
    content, encoding = _to_bytes(xml_text)

    if (
        config.max_input_size_bytes is not None
        and len(content) > config.max_input_size_bytes
    ):
        raise ParseError(
            f"Document of {len(content)} bytes exceeds the limit of "
            f"{config.max_input_size_bytes} bytes"
        )
    if not content.strip():
        raise ParseError("Document is empty")

    try:
        return etree.fromstring(content, _create_parser(encoding))
    except etree.XMLSyntaxError as e:
        raise ParseError(f"Malformed XML document: {e}", e.lineno, e.offset) from e


def convert(
    xml_text: InputType,
    config: Optional[ConverterConfig] = None,
    correlation_id: Optional[str] = None
) -> Order:
    """Convert a ship order XML document into an :class:`Order`.

    Args:
        xml_text: Document text; bytes are decoded according to their XML declaration
        config: Converter configuration (defaults to comma-decimal prices)
        correlation_id: Optional correlation ID for log tracking

    Returns:
        The converted order

    Raises:
        ParseError: If the document is not well-formed XML

    Examples:
        >>> order = convert('<shipOrder><items><item><price>10.90</price>'
        ...                 '</item></items></shipOrder>')
        >>> order.ship_info is None
        True
        >>> order.items[0].price
        Decimal('10.90')
    """
    config = config or ConverterConfig()
    correlation_id = correlation_id or config.correlation_id
    logger = get_logger(__name__, correlation_id, "convert")

    logger.info(
        "Starting order conversion",
        extra={
            "content_length": len(xml_text),
            "preview": _preview(xml_text)
        }
    )

    try:
        document = parse_document(xml_text, config)
    except ParseError as e:
        logger.error(
            "Order document could not be parsed",
            extra={"error": str(e), "line": e.line, "column": e.column},
            timed=True
        )
        raise

    order = build_order(document, config.numbers)

    logger.info(
        "Order conversion completed",
        extra={
            "item_count": order.item_count,
            "has_ship_info": order.has_ship_info
        },
        timed=True
    )
    return order


def convert_file(
    file_path: Union[str, Path],
    config: Optional[ConverterConfig] = None,
    correlation_id: Optional[str] = None
) -> Order:
    """Convert a ship order XML file into an :class:`Order`.

    The file is read as bytes so its XML declaration governs the encoding.

    Raises:
        OSError: If the file cannot be read
        ParseError: If the file is not well-formed XML
    """
    path_obj = Path(file_path)
    logger = get_logger(__name__, correlation_id, "convert_file")
    logger.debug("Reading order document", extra={"file_path": str(path_obj)})

    with path_obj.open("rb") as file:
        raw_data = file.read()
    return convert(raw_data, config, correlation_id)
