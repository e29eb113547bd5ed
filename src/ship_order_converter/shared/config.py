"""Configuration classes for ship order conversion.

This module provides configuration objects for the converter and the console
report, enabling control over number interpretation, input limits and the
rendering of prices.
"""

import json
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

NO_BREAK_SPACE = "\u00a0"
_SIGN_CHARACTERS = "+-"


def _validate_separator(name: str, value: Any) -> None:
    if not isinstance(value, str) or len(value) != 1:
        raise ValueError(f"{name} must be a single character")
    if value.isdigit() or value in _SIGN_CHARACTERS:
        raise ValueError(f"{name} cannot be a digit or a sign character")


@dataclass(frozen=True)
class NumberFormatConfig:
    """Separators used when reading decimal prices.

    Price text always has its periods replaced by commas before it is read
    with these separators. With the default comma-decimal rules ``"10.90"``
    reads as 10.90; with :meth:`point_decimal` the same text reads as 1090.
    """

    decimal_separator: str = ","
    group_separator: str = NO_BREAK_SPACE

    def __post_init__(self) -> None:
        """Validate number format configuration."""
        _validate_separator("decimal_separator", self.decimal_separator)
        _validate_separator("group_separator", self.group_separator)
        if self.decimal_separator == self.group_separator:
            raise ValueError("decimal_separator and group_separator must differ")

    @classmethod
    def comma_decimal(cls) -> "NumberFormatConfig":
        """Comma as decimal separator, no-break space for digit groups."""
        return cls()

    @classmethod
    def point_decimal(cls) -> "NumberFormatConfig":
        """Point as decimal separator, comma for digit groups."""
        return cls(decimal_separator=".", group_separator=",")


@dataclass(frozen=True)
class ConverterConfig:
    """Configuration for XML to order conversion."""

    numbers: NumberFormatConfig = field(default_factory=NumberFormatConfig)
    max_input_size_bytes: Optional[int] = None
    correlation_id: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate converter configuration."""
        if self.max_input_size_bytes is not None and self.max_input_size_bytes <= 0:
            raise ValueError("max_input_size_bytes must be > 0 or None")


@dataclass(frozen=True)
class ReportConfig:
    """Configuration for the human-readable order report."""

    currency_symbol: str = "₽"
    currency_decimals: int = 2
    decimal_separator: str = ","
    group_separator: str = NO_BREAK_SPACE

    def __post_init__(self) -> None:
        """Validate report configuration."""
        if self.currency_decimals < 0:
            raise ValueError("currency_decimals must be >= 0")
        _validate_separator("decimal_separator", self.decimal_separator)
        _validate_separator("group_separator", self.group_separator)
        if self.decimal_separator == self.group_separator:
            raise ValueError("decimal_separator and group_separator must differ")


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigValidationError(ConfigError):
    """Exception raised when configuration validation fails."""

    def __init__(self, message: str, field_name: Optional[str] = None,
                 suggestions: Optional[List[str]] = None):
        super().__init__(message)
        self.field_name = field_name
        self.suggestions = suggestions or []


def _dict_to_dataclass(data: Any, target_class: type, path: str) -> Any:
    """Convert a nested dict into ``target_class``, rejecting unknown keys."""
    if not isinstance(data, dict):
        raise ConfigValidationError(
            f"{path or 'configuration'} must be an object",
            field_name=path or None,
        )

    known_fields = target_class.__dataclass_fields__
    unknown = sorted(set(data) - set(known_fields))
    if unknown:
        raise ConfigValidationError(
            f"Unknown configuration field(s): {', '.join(unknown)}",
            field_name=f"{path}.{unknown[0]}" if path else unknown[0],
            suggestions=sorted(known_fields),
        )

    field_values: Dict[str, Any] = {}
    for field_name, value in data.items():
        field_type = known_fields[field_name].type
        field_path = f"{path}.{field_name}" if path else field_name
        if hasattr(field_type, "__dataclass_fields__"):
            field_values[field_name] = _dict_to_dataclass(value, field_type, field_path)
        else:
            field_values[field_name] = value

    try:
        return target_class(**field_values)
    except (TypeError, ValueError) as e:
        raise ConfigValidationError(str(e), field_name=path or None) from e


@dataclass(frozen=True)
class AppConfig:
    """Complete configuration for the converter and the command-line report."""

    converter: ConverterConfig = field(default_factory=ConverterConfig)
    report: ReportConfig = field(default_factory=ReportConfig)

    def override(self, **kwargs: Any) -> "AppConfig":
        """Create a new configuration with component-level overrides.

        Example:
            >>> config = AppConfig().override(report__currency_symbol="EUR")
        """
        nested: Dict[str, Dict[str, Any]] = {}
        for key, value in kwargs.items():
            component, _, field_name = key.partition("__")
            if component not in ("converter", "report") or not field_name:
                raise ConfigValidationError(
                    f"Invalid override key: {key}",
                    field_name=key,
                    suggestions=["converter__<field>", "report__<field>"],
                )
            nested.setdefault(component, {})[field_name] = value

        new_fields = {}
        for component, overrides in nested.items():
            try:
                new_fields[component] = replace(getattr(self, component), **overrides)
            except (TypeError, ValueError) as e:
                raise ConfigValidationError(str(e), field_name=component) from e
        return replace(self, **new_fields)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary format."""
        def _dataclass_to_dict(obj: Any) -> Any:
            if hasattr(obj, "__dataclass_fields__"):
                return {
                    name: _dataclass_to_dict(getattr(obj, name))
                    for name in obj.__dataclass_fields__
                }
            return obj

        return _dataclass_to_dict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AppConfig":
        """Create configuration from a (possibly partial) dictionary.

        Raises:
            ConfigValidationError: If a field is unknown or holds an invalid value
        """
        result = _dict_to_dataclass(data, cls, "")
        if not isinstance(result, cls):
            raise ConfigValidationError(f"Failed to deserialize to {cls.__name__}")
        return result

    @classmethod
    def from_file(cls, config_path: Union[str, Path]) -> "AppConfig":
        """Load configuration from a JSON file.

        Raises:
            OSError: If the file cannot be read
            ConfigValidationError: If the file is not valid JSON or not a valid config
        """
        path = Path(config_path)
        with path.open(encoding="utf-8") as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise ConfigValidationError(
                    f"Configuration file {path} is not valid JSON: {e}"
                ) from e
        return cls.from_dict(data)
