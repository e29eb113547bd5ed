"""Tests for the configuration system."""

import json

import pytest

from ship_order_converter.shared.config import (
    AppConfig,
    ConfigError,
    ConfigValidationError,
    ConverterConfig,
    NumberFormatConfig,
    ReportConfig,
)


class TestNumberFormatConfig:
    """Test suite for NumberFormatConfig."""

    def test_default_configuration(self):
        """Test comma-decimal defaults."""
        config = NumberFormatConfig()
        assert config.decimal_separator == ","
        assert config.group_separator == "\u00a0"
        assert NumberFormatConfig.comma_decimal() == config

    def test_point_decimal_preset(self):
        """Test the point-decimal preset."""
        config = NumberFormatConfig.point_decimal()
        assert config.decimal_separator == "."
        assert config.group_separator == ","

    def test_validation_failures(self):
        """Test invalid separators are rejected."""
        with pytest.raises(ValueError, match="must differ"):
            NumberFormatConfig(decimal_separator=",", group_separator=",")

        with pytest.raises(ValueError, match="single character"):
            NumberFormatConfig(decimal_separator="")

        with pytest.raises(ValueError, match="single character"):
            NumberFormatConfig(group_separator="  ")

        with pytest.raises(ValueError, match="digit or a sign"):
            NumberFormatConfig(decimal_separator="5")

        with pytest.raises(ValueError, match="digit or a sign"):
            NumberFormatConfig(group_separator="-")

    def test_is_hashable(self):
        """Test frozen configurations can be used as cache keys."""
        assert hash(NumberFormatConfig()) == hash(NumberFormatConfig())


class TestConverterConfig:
    """Test suite for ConverterConfig."""

    def test_default_configuration(self):
        """Test default converter configuration values."""
        config = ConverterConfig()
        assert config.numbers == NumberFormatConfig()
        assert config.max_input_size_bytes is None
        assert config.correlation_id is None

    def test_size_limit_validation(self):
        """Test the input size limit must be positive."""
        ConverterConfig(max_input_size_bytes=1024)
        with pytest.raises(ValueError, match="max_input_size_bytes must be > 0 or None"):
            ConverterConfig(max_input_size_bytes=0)


class TestReportConfig:
    """Test suite for ReportConfig."""

    def test_default_configuration(self):
        """Test default report configuration values."""
        config = ReportConfig()
        assert config.currency_symbol == "₽"
        assert config.currency_decimals == 2
        assert config.decimal_separator == ","
        assert config.group_separator == "\u00a0"

    def test_validation_failures(self):
        """Test invalid report configurations are rejected."""
        with pytest.raises(ValueError, match="currency_decimals must be >= 0"):
            ReportConfig(currency_decimals=-1)
        with pytest.raises(ValueError, match="must differ"):
            ReportConfig(decimal_separator=".", group_separator=".")


class TestAppConfig:
    """Test suite for AppConfig."""

    def test_round_trip_through_dict(self):
        """Test to_dict output is accepted by from_dict."""
        config = AppConfig().override(report__currency_symbol="EUR")
        assert AppConfig.from_dict(config.to_dict()) == config

    def test_partial_dict(self):
        """Test missing sections keep their defaults."""
        config = AppConfig.from_dict({
            "converter": {"numbers": {"decimal_separator": ".", "group_separator": ","}}
        })
        assert config.converter.numbers == NumberFormatConfig.point_decimal()
        assert config.report == ReportConfig()

    def test_unknown_field(self):
        """Test unknown fields are reported with suggestions."""
        with pytest.raises(ConfigValidationError) as exc_info:
            AppConfig.from_dict({"report": {"currency": "EUR"}})
        assert exc_info.value.field_name == "report.currency"
        assert "currency_symbol" in exc_info.value.suggestions

    def test_invalid_value_is_wrapped(self):
        """Test component validation errors become ConfigValidationError."""
        with pytest.raises(ConfigValidationError, match="currency_decimals"):
            AppConfig.from_dict({"report": {"currency_decimals": -2}})

    def test_section_must_be_object(self):
        """Test non-object sections are rejected."""
        with pytest.raises(ConfigValidationError, match="must be an object"):
            AppConfig.from_dict({"converter": "fast"})

    def test_override(self):
        """Test component-level overrides create a new configuration."""
        base = AppConfig()
        config = base.override(
            converter__numbers=NumberFormatConfig.point_decimal(),
            report__currency_decimals=0,
        )
        assert config.converter.numbers.decimal_separator == "."
        assert config.report.currency_decimals == 0
        assert base.report.currency_decimals == 2

    def test_invalid_override(self):
        """Test invalid override keys and values are rejected."""
        with pytest.raises(ConfigValidationError, match="Invalid override key"):
            AppConfig().override(currency_symbol="EUR")
        with pytest.raises(ConfigValidationError):
            AppConfig().override(converter__max_input_size_bytes=-1)
        with pytest.raises(ConfigValidationError):
            AppConfig().override(report__unknown=1)

    def test_from_file(self, tmp_path):
        """Test loading configuration from a JSON file."""
        path = tmp_path / "config.json"
        path.write_text(json.dumps({
            "converter": {"max_input_size_bytes": 4096},
            "report": {"currency_symbol": "kr"},
        }), encoding="utf-8")

        config = AppConfig.from_file(path)
        assert config.converter.max_input_size_bytes == 4096
        assert config.report.currency_symbol == "kr"

    def test_from_file_invalid_json(self, tmp_path):
        """Test malformed JSON is a configuration error."""
        path = tmp_path / "config.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ConfigError, match="not valid JSON"):
            AppConfig.from_file(path)

    def test_from_missing_file(self, tmp_path):
        """Test a missing file raises OSError."""
        with pytest.raises(OSError):
            AppConfig.from_file(tmp_path / "missing.json")
