"""Order records and the builder that assembles them from a parsed document."""

from .builder import ITEM_PATH, SHIP_TO_PATH, build_item, build_order, build_ship_info
from .models import Item, Order, ShipInfo

__all__ = [
    "ITEM_PATH",
    "SHIP_TO_PATH",
    "Item",
    "Order",
    "ShipInfo",
    "build_item",
    "build_order",
    "build_ship_info",
]
