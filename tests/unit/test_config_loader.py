"""Unit tests for configuration loading and error reporting."""

import json
from pathlib import Path

import pytest

from shelfie.application.config import ConfigError, load_config, load_config_from_dict
from shelfie.application.config.loader import _format_json_path


class TestFormatJsonPath:
    """Tests for Pydantic location formatting."""

    def test_nested_fields(self) -> None:
        assert _format_json_path(("layout", "gutter_x")) == "layout.gutter_x"

    def test_list_index(self) -> None:
        assert _format_json_path(("items", 2, "width")) == "items[2].width"

    def test_leading_index(self) -> None:
        assert _format_json_path((0,)) == "[0]"


class TestLoadConfigFromDict:
    """Tests for load_config_from_dict."""

    def test_valid(self) -> None:
        """Valid data returns a configuration."""
        config = load_config_from_dict({"schema_version": "1.0", "container_width": 640})
        assert config.container_width == 640.0

    def test_validation_error_details(self) -> None:
        """Schema failures carry a JSON path per problem."""
        with pytest.raises(ConfigError) as exc:
            load_config_from_dict(
                {
                    "schema_version": "1.0",
                    "items": [{"id": "a", "width": 1, "height": 1, "spine": 1}, {"id": ""}],
                }
            )

        error = exc.value
        assert error.error_type == "validation"
        assert error.message.startswith("Configuration validation failed:")
        assert any(d["path"].startswith("items[1]") for d in error.details)

    def test_missing_version(self) -> None:
        """schema_version is required."""
        with pytest.raises(ConfigError) as exc:
            load_config_from_dict({"items": []})
        assert exc.value.details[0]["path"] == "schema_version"


class TestLoadConfig:
    """Tests for load_config."""

    def test_fixture_loads(self, fixtures_path: Path) -> None:
        """The minimal fixture is valid."""
        config = load_config(fixtures_path / "valid_minimal.json")
        assert len(config.items) == 3
        assert config.layout.jitter_x == 0.0

    def test_file_not_found(self, tmp_path: Path) -> None:
        """Missing files are reported as file_not_found."""
        with pytest.raises(ConfigError) as exc:
            load_config(tmp_path / "missing.json")
        assert exc.value.error_type == "file_not_found"
        assert exc.value.path == tmp_path / "missing.json"

    def test_invalid_json(self, fixtures_path: Path) -> None:
        """Syntax errors carry line and column."""
        with pytest.raises(ConfigError) as exc:
            load_config(fixtures_path / "invalid_json.json")
        assert exc.value.error_type == "json_parse"
        assert "line" in exc.value.details[0]
        assert "column" in exc.value.details[0]

    def test_top_level_array(self, tmp_path: Path) -> None:
        """The document must be an object."""
        path = tmp_path / "list.json"
        path.write_text(json.dumps([1, 2, 3]))
        with pytest.raises(ConfigError) as exc:
            load_config(path)
        assert exc.value.error_type == "validation"

    def test_unknown_field(self, fixtures_path: Path) -> None:
        """Unknown top-level keys are rejected."""
        with pytest.raises(ConfigError) as exc:
            load_config(fixtures_path / "unknown_field.json")
        assert exc.value.details[0]["path"] == "shelf_colour"

    def test_str_is_message(self, tmp_path: Path) -> None:
        """str(ConfigError) is its message."""
        with pytest.raises(ConfigError) as exc:
            load_config(tmp_path / "missing.json")
        assert str(exc.value) == exc.value.message
