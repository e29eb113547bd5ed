"""Records produced by converting a ship order document."""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class Item:
    """One line entry of an order."""

    title: Optional[str] = None
    quantity: int = 0
    price: Decimal = Decimal("0.0")

    def to_dict(self) -> Dict[str, Any]:
        """Convert item to a JSON-friendly dictionary; the price is kept as text."""
        return {
            "title": self.title,
            "quantity": self.quantity,
            "price": str(self.price),
        }


@dataclass(frozen=True)
class ShipInfo:
    """Recipient name and delivery address.

    Fields are None when the corresponding element is missing from the
    document and ``""`` when the element is present but empty.
    """

    name: Optional[str] = None
    street: Optional[str] = None
    address: Optional[str] = None
    country: Optional[str] = None

    def to_dict(self) -> Dict[str, Optional[str]]:
        """Convert shipping information to dictionary format."""
        return {
            "name": self.name,
            "street": self.street,
            "address": self.address,
            "country": self.country,
        }


@dataclass
class Order:
    """Delivery information plus line items, in document order."""

    ship_info: Optional[ShipInfo] = None
    items: List[Item] = field(default_factory=list)

    @property
    def item_count(self) -> int:
        """Number of line items."""
        return len(self.items)

    @property
    def has_ship_info(self) -> bool:
        """Check if the document carried a shipTo block."""
        return self.ship_info is not None

    def to_dict(self) -> Dict[str, Any]:
        """Convert order to dictionary format."""
        return {
            "ship_info": self.ship_info.to_dict() if self.ship_info else None,
            "items": [item.to_dict() for item in self.items],
        }
