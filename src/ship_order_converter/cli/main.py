"""Main CLI entry point for the ship-order command-line tool.

Converts a ship order document (or the built-in sample) and prints the
resulting order as a console report or as JSON.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from ship_order_converter import __version__
from ship_order_converter.api import ParseError, convert, convert_file
from ship_order_converter.cli.report import OUTPUT_FORMATS, format_order
from ship_order_converter.cli.sample import SAMPLE_ORDER_XML
from ship_order_converter.orders import Order
from ship_order_converter.shared.config import AppConfig, ConfigError, NumberFormatConfig
from ship_order_converter.shared.logging import configure_cli_logging, get_logger

NUMBER_PRESETS = {
    "comma_decimal": NumberFormatConfig.comma_decimal,
    "point_decimal": NumberFormatConfig.point_decimal,
}

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130  # Standard exit code for SIGINT


def create_argument_parser() -> argparse.ArgumentParser:
    """Create the main argument parser."""
    parser = argparse.ArgumentParser(
        prog="ship-order",
        description="Convert ship order XML documents into order records"
    )

    parser.add_argument("--version", action="version", version=__version__)

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    show_parser = subparsers.add_parser("show", help="Convert and print an order")
    show_parser.add_argument(
        "path",
        nargs="?",
        type=Path,
        help="Order XML file (default: built-in sample order)"
    )
    show_parser.add_argument(
        "--format", "-f",
        choices=list(OUTPUT_FORMATS),
        default="text",
        help="Output format (default: text)"
    )
    show_parser.add_argument(
        "--config", "-c",
        type=Path,
        help="JSON configuration file path"
    )
    show_parser.add_argument(
        "--preset",
        choices=sorted(NUMBER_PRESETS),
        help="Decimal separator rules for prices"
    )

    # Global options
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose output"
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Quiet output"
    )

    return parser


def load_config(args: argparse.Namespace) -> AppConfig:
    """Build the application configuration from the file and preset options.

    Raises:
        OSError: If the configuration file cannot be read
        ConfigError: If the configuration is invalid
    """
    config = AppConfig.from_file(args.config) if args.config else AppConfig()

    if args.preset:
        numbers = NUMBER_PRESETS[args.preset]()
        config = config.override(converter__numbers=numbers)

    return config


def cmd_show(args: argparse.Namespace) -> int:
    """Handle show command."""
    logger = get_logger(__name__, None, "cli_show")

    try:
        config = load_config(args)
        order: Order
        if args.path:
            order = convert_file(args.path, config.converter)
        else:
            logger.debug("No document given, converting the built-in sample")
            order = convert(SAMPLE_ORDER_XML, config.converter)
    except ParseError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_FAILURE
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return EXIT_FAILURE
    except OSError as e:
        print(f"Error reading file: {e}", file=sys.stderr)
        return EXIT_FAILURE

    print(format_order(order, args.format, config.report))
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return EXIT_FAILURE

    configure_cli_logging(verbose=args.verbose, quiet=args.quiet)

    try:
        if args.command == "show":
            return cmd_show(args)
        print(f"Unknown command: {args.command}", file=sys.stderr)
        return EXIT_FAILURE

    except KeyboardInterrupt:
        print("\nOperation interrupted by user", file=sys.stderr)
        return EXIT_INTERRUPTED


if __name__ == "__main__":
    sys.exit(main())
