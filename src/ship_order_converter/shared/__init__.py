"""Shared utilities for ship order conversion.

This module provides the configuration objects and logging helpers used by
the converter and the command-line tool.
"""

from .config import (
    AppConfig,
    ConfigError,
    ConfigValidationError,
    ConverterConfig,
    NumberFormatConfig,
    ReportConfig,
)
from .logging import (
    CorrelationLogger,
    configure_cli_logging,
    get_logger,
    install_null_handler,
)

__all__ = [
    "AppConfig",
    "ConfigError",
    "ConfigValidationError",
    "ConverterConfig",
    "NumberFormatConfig",
    "ReportConfig",
    "CorrelationLogger",
    "configure_cli_logging",
    "get_logger",
    "install_null_handler",
]
