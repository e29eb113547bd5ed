"""Command-line interface module for Ship Order Converter.

This module provides the ``ship-order`` tool, which converts an order document
and prints it as a console report or as JSON.
"""

from .main import main

__all__ = ["main"]
