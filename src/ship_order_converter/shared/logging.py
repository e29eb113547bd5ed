"""Structured logging utilities for ship order conversion.

Every record emitted through these helpers carries the emitting component and
an optional correlation ID in its ``extra`` mapping, so a single conversion can
be followed through the converter and the command-line tool.

The package logger only has a ``NullHandler``; output is configured by the
application, which for the ``ship-order`` tool is :func:`configure_cli_logging`.
"""

import logging
import time
from typing import Any, Dict, Optional

PACKAGE_LOGGER_NAME = "ship_order_converter"
MS_PER_SECOND = 1000


class CorrelationLogger:
    """Logger that includes correlation ID, component and elapsed time information."""

    def __init__(
        self,
        name: str,
        correlation_id: Optional[str] = None,
        component: Optional[str] = None
    ) -> None:
        """Initialize correlation logger.

        Args:
            name: Logger name (typically __name__)
            correlation_id: Optional correlation ID for conversion tracking
            component: Component name for structured logging
        """
        self.logger = logging.getLogger(name)
        self.correlation_id = correlation_id
        self.component = component or name.split(".")[-1]
        self.started_at = time.time()

    def elapsed_ms(self) -> float:
        """Milliseconds since this logger was created."""
        return (time.time() - self.started_at) * MS_PER_SECOND

    def _get_extra(
        self,
        extra: Optional[Dict[str, Any]] = None,
        timed: bool = False
    ) -> Dict[str, Any]:
        combined_extra: Dict[str, Any] = {
            "component": self.component,
            "correlation_id": self.correlation_id,
        }
        if timed:
            combined_extra["processing_time_ms"] = self.elapsed_ms()

        if extra:
            combined_extra.update(extra)

        return combined_extra

    def debug(self, message: str, extra: Optional[Dict[str, Any]] = None) -> None:
        """Log debug message with correlation info."""
        self.logger.debug(message, extra=self._get_extra(extra))

    def info(
        self,
        message: str,
        extra: Optional[Dict[str, Any]] = None,
        timed: bool = False
    ) -> None:
        """Log info message; ``timed`` adds ``processing_time_ms`` to the record."""
        self.logger.info(message, extra=self._get_extra(extra, timed))

    def error(
        self,
        message: str,
        extra: Optional[Dict[str, Any]] = None,
        timed: bool = False,
        exc_info: bool = False
    ) -> None:
        """Log error message; pass ``exc_info=True`` to attach the active traceback."""
        self.logger.error(
            message, extra=self._get_extra(extra, timed), exc_info=exc_info
        )


def get_logger(
    name: str,
    correlation_id: Optional[str] = None,
    component: Optional[str] = None
) -> CorrelationLogger:
    """Get a correlation-aware logger instance.

    Args:
        name: Logger name (typically __name__)
        correlation_id: Optional correlation ID for conversion tracking
        component: Component name for structured logging

    Returns:
        CorrelationLogger instance
    """
    return CorrelationLogger(name, correlation_id, component)


def install_null_handler() -> None:
    """Keep package records off ``logging.lastResort`` until the application configures output."""
    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    if not any(isinstance(h, logging.NullHandler) for h in package_logger.handlers):
        package_logger.addHandler(logging.NullHandler())


def configure_cli_logging(verbose: bool = False, quiet: bool = False) -> None:
    """Send log records to stderr for ``--verbose`` (DEBUG) or ``--quiet`` (ERROR).

    Without either flag nothing is configured and package records stay silent.
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG)
    elif quiet:
        logging.basicConfig(level=logging.ERROR)
