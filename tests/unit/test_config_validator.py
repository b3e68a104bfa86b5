"""Unit tests for configuration validation and layout advisories."""

from pathlib import Path

import pytest

from shelfie.application.config import (
    ShelfConfiguration,
    ValidationResult,
    load_config,
    validate_config,
)
from shelfie.application.config.validator import (
    check_container_advisories,
    check_item_advisories,
    check_layout_parameters,
)


def _config(**kwargs) -> ShelfConfiguration:
    return ShelfConfiguration(schema_version="1.0", **kwargs)


class TestValidationResult:
    """Tests for ValidationResult."""

    def test_empty_is_valid(self) -> None:
        result = ValidationResult()
        assert result.is_valid
        assert not result.has_warnings
        assert result.exit_code == 0

    def test_warning_exit_code(self) -> None:
        result = ValidationResult().add_warning("items[0]", "odd")
        assert result.is_valid
        assert result.exit_code == 2

    def test_error_exit_code(self) -> None:
        """Errors win over warnings."""
        result = ValidationResult().add_warning("a", "w").add_error("b", "e", value=3)
        assert not result.is_valid
        assert result.exit_code == 1
        assert result.errors[0].value == 3

    def test_merge(self) -> None:
        first = ValidationResult().add_error("a", "e")
        second = ValidationResult().add_warning("b", "w")
        merged = first.merge(second)
        assert merged is first
        assert len(merged.errors) == 1
        assert len(merged.warnings) == 1


class TestCheckLayoutParameters:
    """Tests for check_layout_parameters."""

    def test_defaults_clean(self) -> None:
        result = check_layout_parameters(_config())
        assert result.errors == []
        assert result.warnings == []

    def test_breakpoint_combination_error(self, fixtures_path: Path) -> None:
        """An override that only breaks once merged is reported at the breakpoint."""
        config = load_config(fixtures_path / "invalid_layout.json")
        result = check_layout_parameters(config)

        assert len(result.errors) == 1
        assert result.errors[0].path == "breakpoints[0].layout"
        assert result.errors[0].value == 400
        assert "spine_ratio_max" in result.errors[0].message

    def test_excess_jitter_warning(self) -> None:
        """Jitter beyond half the gutter is flagged."""
        result = check_layout_parameters(_config(layout={"gutter_x": 10, "jitter_x": 8}))
        assert [w.path for w in result.warnings] == ["layout.jitter_x"]
        assert "clamped" in result.warnings[0].message
        assert result.warnings[0].suggestion == "Use jitter_x <= 5"

    def test_jitter_at_limit_allowed(self) -> None:
        result = check_layout_parameters(_config(layout={"gutter_x": 10, "jitter_x": 5}))
        assert result.warnings == []


class TestCheckItemAdvisories:
    """Tests for check_item_advisories."""

    @pytest.fixture
    def result(self, fixtures_path: Path) -> ValidationResult:
        return check_item_advisories(load_config(fixtures_path / "valid_with_warnings.json"))

    def test_unparseable_dimensions(self, result: ValidationResult) -> None:
        assert "items[5].dimensions" in [w.path for w in result.warnings]

    def test_invalid_item_excluded(self, result: ValidationResult) -> None:
        warning = next(w for w in result.warnings if w.path == "items[3]")
        assert "'broken' will be excluded" in warning.message

    def test_duplicate_id(self, result: ValidationResult) -> None:
        warning = next(w for w in result.warnings if w.path == "items[2].id")
        assert "Duplicate item id 'a'" in warning.message

    def test_height_outlier(self, result: ValidationResult) -> None:
        """The 400mm poster is more than 1.5x the 210mm median."""
        warning = next(w for w in result.warnings if w.path == "items[4].height")
        assert "clamped" in warning.message

    def test_no_errors(self, result: ValidationResult) -> None:
        """Item problems never block the layout."""
        assert result.is_valid

    def test_clean_items(self, fixtures_path: Path) -> None:
        result = check_item_advisories(load_config(fixtures_path / "valid_minimal.json"))
        assert result.warnings == []

    def test_row_count_exceeds_items(self) -> None:
        config = _config(
            layout={"row_count": 5},
            items=[
                {"id": "a", "width": 130, "height": 200, "spine": 20},
                {"id": "b", "width": 130, "height": 200, "spine": 20},
            ],
        )
        result = check_item_advisories(config)
        assert [w.path for w in result.warnings] == ["layout.row_count"]


class TestCheckContainerAdvisories:
    """Tests for check_container_advisories."""

    def test_missing_width(self) -> None:
        result = check_container_advisories(_config())
        assert [w.path for w in result.warnings] == ["container_width"]

    def test_item_wider_than_container(self, fixtures_path: Path) -> None:
        """The poster projects to 350px in a 300px container."""
        config = load_config(fixtures_path / "valid_with_warnings.json")
        result = check_container_advisories(config)

        assert [w.path for w in result.warnings] == ["items[4]"]
        assert "350px" in result.warnings[0].message

    def test_matching_breakpoint_used(self) -> None:
        """Projection uses the row height of the breakpoint for the container."""
        config = _config(
            container_width=400,
            breakpoints=[{"max_width": 480, "layout": {"target_row_height": 100}}],
            items=[{"id": "panorama", "width": 300, "height": 100, "spine": 5}],
        )
        assert check_container_advisories(config).warnings == []

    def test_breakpoint_can_trigger_warning(self) -> None:
        """A taller breakpoint row height can push an item past the container."""
        config = _config(
            container_width=400,
            layout={"target_row_height": 100},
            breakpoints=[{"max_width": 480, "layout": {"target_row_height": 200}}],
            items=[{"id": "panorama", "width": 300, "height": 100, "spine": 5}],
        )
        result = validate_config(config)
        assert [w.path for w in result.warnings] == ["items[0]"]
        assert "600px" in result.warnings[0].message

    def test_invalid_items_skipped(self) -> None:
        config = _config(
            container_width=100,
            items=[{"id": "flat", "width": 900, "height": 0, "spine": 1}],
        )
        assert check_container_advisories(config).warnings == []


class TestValidateConfig:
    """Tests for validate_config against the fixture files."""

    @pytest.mark.parametrize(
        "name,exit_code",
        [
            ("valid_minimal.json", 0),
            ("valid_full.json", 0),
            ("valid_with_warnings.json", 2),
            ("no_width.json", 2),
            ("invalid_layout.json", 1),
        ],
    )
    def test_exit_codes(self, fixtures_path: Path, name: str, exit_code: int) -> None:
        result = validate_config(load_config(fixtures_path / name))
        assert result.exit_code == exit_code

    def test_errors_skip_advisories(self, fixtures_path: Path) -> None:
        """Item checks are not run while the layout itself is unusable."""
        result = validate_config(load_config(fixtures_path / "invalid_layout.json"))
        assert result.warnings == []

    def test_all_advisories_collected(self, fixtures_path: Path) -> None:
        result = validate_config(load_config(fixtures_path / "valid_with_warnings.json"))
        paths = {w.path for w in result.warnings}
        assert paths == {
            "layout.jitter_x",
            "items[5].dimensions",
            "items[3]",
            "items[2].id",
            "items[4].height",
            "items[4]",
        }
