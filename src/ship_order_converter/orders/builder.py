"""Assembly of order records from a parsed ship order document.

The builder only walks an already parsed lxml tree; turning text into a tree
(and reporting malformed documents) is the converter's job.
"""

from typing import Optional, Union

from lxml import etree

from ship_order_converter.extraction import decimal_of, int_of, text_of
from ship_order_converter.orders.models import Item, Order, ShipInfo
from ship_order_converter.shared.config import NumberFormatConfig

SHIP_TO_PATH = "/shipOrder/shipTo"
ITEM_PATH = "/shipOrder/items/item"

DocumentType = Union[etree._ElementTree, etree._Element]


def build_ship_info(node: etree._Element) -> ShipInfo:
    """Build shipping information from a ``shipTo`` element."""
    return ShipInfo(
        name=text_of(node, "name"),
        street=text_of(node, "street"),
        address=text_of(node, "address"),
        country=text_of(node, "country"),
    )


def build_item(
    node: etree._Element,
    numbers: Optional[NumberFormatConfig] = None
) -> Item:
    """Build a line item from an ``item`` element.

    Missing or unreadable quantities become 0 and prices become 0.0.
    """
    return Item(
        title=text_of(node, "title"),
        quantity=int_of(node, "quantity"),
        price=decimal_of(node, "price", numbers),
    )


def build_order(
    document: DocumentType,
    numbers: Optional[NumberFormatConfig] = None
) -> Order:
    """Build an order from a parsed document.

    Args:
        document: Parsed lxml tree or its root element
        numbers: Separator rules for reading prices

    Returns:
        Order whose ship_info is None when the document has no
        ``/shipOrder/shipTo`` node and whose items follow document order
    """
    ship_to_nodes = document.xpath(SHIP_TO_PATH)
    ship_info = build_ship_info(ship_to_nodes[0]) if ship_to_nodes else None

    items = [build_item(node, numbers) for node in document.xpath(ITEM_PATH)]

    return Order(ship_info=ship_info, items=items)
