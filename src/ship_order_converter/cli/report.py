"""Human-readable and JSON renderings of a converted order."""

import json
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import List, Optional

from ship_order_converter.orders import Order
from ship_order_converter.shared.config import ReportConfig

OUTPUT_FORMATS = ("text", "json")

# Wide enough to quantize the largest accepted price
_QUANTIZE_PRECISION = 60


def format_currency(value: Decimal, config: Optional[ReportConfig] = None) -> str:
    """Format a price with grouped digits, fixed decimals and the currency symbol.

    Midpoints round away from zero: ``Decimal("0.125")`` becomes ``0,13 ₽``.
    """
    config = config or ReportConfig()
    exponent = Decimal(1).scaleb(-config.currency_decimals)
    with localcontext() as ctx:
        ctx.prec = _QUANTIZE_PRECISION
        rounded = value.quantize(exponent, rounding=ROUND_HALF_UP)

    digits = f"{rounded.copy_abs():,.{config.currency_decimals}f}"
    digits = digits.translate(str.maketrans({
        ",": config.group_separator,
        ".": config.decimal_separator,
    }))
    sign = "-" if rounded.is_signed() and rounded != 0 else ""
    return f"{sign}{digits} {config.currency_symbol}"


def _field(value: Optional[str]) -> str:
    return "" if value is None else value


def format_order_text(order: Order, config: Optional[ReportConfig] = None) -> str:
    """Render an order as labelled console lines."""
    lines: List[str] = []

    if order.ship_info is None:
        lines.append("Shipping information: not provided")
    else:
        lines.append("Shipping information:")
        lines.append(f"Name: {_field(order.ship_info.name)}")
        lines.append(f"Street: {_field(order.ship_info.street)}")
        lines.append(f"Address: {_field(order.ship_info.address)}")
        lines.append(f"Country: {_field(order.ship_info.country)}")

    lines.append("")
    lines.append("Order items:")
    for item in order.items:
        lines.append(
            f"Title: {_field(item.title)}, Quantity: {item.quantity}, "
            f"Price: {format_currency(item.price, config)}"
        )

    return "\n".join(lines)


def format_order(
    order: Order,
    format_type: str = "text",
    config: Optional[ReportConfig] = None
) -> str:
    """Render an order in one of :data:`OUTPUT_FORMATS`."""
    if format_type == "json":
        return json.dumps(order.to_dict(), indent=2, ensure_ascii=False)
    if format_type == "text":
        return format_order_text(order, config)
    raise ValueError(f"format_type must be one of {list(OUTPUT_FORMATS)}")
