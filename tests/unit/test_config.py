"""
Unit tests for configuration and output formats.
"""

import json
import logging

import pytest

from headerconv.config import ConverterConfig
from headerconv.formats import OutputFormat
from headerconv.models import ConversionResult


class TestConverterConfig:
    """Tests for ConverterConfig dataclass."""

    def test_defaults(self):
        """Test default values."""
        config = ConverterConfig()

        assert config.output_format is OutputFormat.JSON
        assert config.num_workers >= 1
        assert config.log_level == "WARNING"
        config.validate()

    def test_from_env(self, monkeypatch):
        """Test values are read from the environment."""
        monkeypatch.setenv("HEADERCONV_FORMAT", "JSON")
        monkeypatch.setenv("HEADERCONV_WORKERS", "3")
        monkeypatch.setenv("HEADERCONV_LOG_LEVEL", "debug")

        config = ConverterConfig.from_env()

        assert config.output_format is OutputFormat.JSON
        assert config.num_workers == 3
        assert config.log_level_value == logging.DEBUG

    def test_from_env_defaults(self, clean_env):
        """Test unset variables fall back to defaults."""
        assert ConverterConfig.from_env() == ConverterConfig()

    def test_from_env_unknown_format(self, monkeypatch):
        """Test an unknown format name is rejected."""
        monkeypatch.setenv("HEADERCONV_FORMAT", "yaml")

        with pytest.raises(ValueError, match="yaml"):
            ConverterConfig.from_env()

    @pytest.mark.parametrize("kwargs", [
        {"num_workers": 0},
        {"num_workers": -4},
        {"log_level": "LOUD"},
        {"output_format": "json"},
    ])
    def test_validate_rejects(self, kwargs: dict):
        """Test invalid values fail validation."""
        with pytest.raises(ValueError):
            ConverterConfig(**kwargs).validate()


class TestOutputFormat:
    """Tests for OutputFormat enum."""

    def test_string_form(self):
        """Test the format prints as its name."""
        assert str(OutputFormat.JSON) == "json"
        assert OutputFormat.from_name(" Json ") is OutputFormat.JSON

    def test_reserved_keys(self):
        """Test the reserved JSON field names."""
        assert OutputFormat.JSON.code_key == "code"
        assert OutputFormat.JSON.raw_key == "raw"

    def test_serialize_compact_sorted(self):
        """Test JSON output is compact with sorted keys."""
        output = OutputFormat.JSON.serialize({"xCache": "HIT", "code": "200", "raw": ["a b c d"]})

        assert output == '{"code":"200","raw":["a b c d"],"xCache":"HIT"}'

    def test_serialize_escapes(self):
        """Test quotes and control characters are escaped."""
        output = OutputFormat.JSON.serialize({"etag": '"33a64df5"', "x": "tab\there"})

        assert json.loads(output) == {"etag": '"33a64df5"', "x": "tab\there"}


class TestConversionResult:
    """Tests for ConversionResult.to_mapping()."""

    def test_raw_attached_when_present(self):
        """Test raw lines are added under the reserved key."""
        result = ConversionResult(converted={"code": "200"}, not_converted=["odd line"])

        assert result.to_mapping() == {"code": "200", "raw": ["odd line"]}

    def test_no_raw_key_when_empty(self):
        """Test the reserved key is absent without raw lines."""
        result = ConversionResult(converted={"server": "nginx"})

        assert result.to_mapping() == {"server": "nginx"}

    def test_mapping_is_a_copy(self):
        """Test building the mapping leaves the result untouched."""
        result = ConversionResult(converted={"code": "200"}, not_converted=["odd line"])
        result.to_mapping()["extra"] = "x"

        assert result.converted == {"code": "200"}
