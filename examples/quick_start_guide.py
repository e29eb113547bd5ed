#!/usr/bin/env python3
"""
Quick Start Guide for the Ship Order Converter.

Walks through converting an order document, inspecting the defaults applied
to missing or unreadable values, and handling malformed documents.
"""

import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from ship_order_converter import ConverterConfig, NumberFormatConfig, ParseError, convert
from ship_order_converter.cli.report import format_order_text
from ship_order_converter.cli.sample import SAMPLE_ORDER_XML


def quick_start_example():
    """Quick start example showing basic usage."""

    print("🚀 QUICK START - Ship Order Converter")
    print("=" * 45)

    # Step 1: Convert the sample document
    print("\n📄 Step 1: Converting an order")
    print("-" * 30)

    order = convert(SAMPLE_ORDER_XML)
    print(f"✅ Converted order with {order.item_count} items")
    print(format_order_text(order))

    # Step 2: Missing and unreadable values
    print("\n🔍 Step 2: Defaults for missing values")
    print("-" * 30)

    sparse = convert(
        "<shipOrder><items>"
        "<item><title>No price</title><quantity>many</quantity></item>"
        "</items></shipOrder>"
    )
    item = sparse.items[0]
    print(f"Ship info present: {sparse.has_ship_info}")
    print(f"Quantity 'many' -> {item.quantity}, missing price -> {item.price}")

    # Step 3: Price separators
    print("\n🔢 Step 3: Reading prices")
    print("-" * 30)

    point = ConverterConfig(numbers=NumberFormatConfig.point_decimal())
    for config_name, config in (("comma_decimal", None), ("point_decimal", point)):
        prices = [str(i.price) for i in convert(SAMPLE_ORDER_XML, config).items]
        print(f"{config_name}: {', '.join(prices)}")

    # Step 4: Malformed documents
    print("\n⚠️  Step 4: Malformed documents")
    print("-" * 30)

    try:
        convert("<shipOrder><items>")
    except ParseError as e:
        print(f"❌ Rejected: {e} (line {e.line})")


if __name__ == "__main__":
    quick_start_example()
