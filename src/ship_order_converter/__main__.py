"""Allow ``python -m ship_order_converter``."""

import sys

from ship_order_converter.cli.main import main

sys.exit(main())
