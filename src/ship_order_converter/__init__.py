"""Ship Order Converter.

Converts shipping order XML documents (a ``shipTo`` recipient block plus a list
of purchased items) into typed records.

- Level 1: Simple functions - convert(), convert_file()
- Level 2: Configured conversion - ConverterConfig, NumberFormatConfig
- Level 3: Building blocks - build_order() and the field extractors
"""

__version__ = "0.1.0"
__author__ = "Ship Order Converter Team"

# Level 1: Simple functions
from .api import ParseError, convert, convert_file

# Record types
from .orders import Item, Order, ShipInfo, build_order

# Configuration classes for advanced usage
from .shared.config import ConverterConfig, NumberFormatConfig
from .shared.logging import install_null_handler

install_null_handler()

__all__ = [
    # Version and metadata
    "__author__",
    "__version__",

    # Level 1: Simple conversion functions
    "convert",
    "convert_file",
    "ParseError",

    # Records and the builder
    "Item",
    "Order",
    "ShipInfo",
    "build_order",

    # Configuration classes for advanced usage
    "ConverterConfig",
    "NumberFormatConfig",
]
