"""Unit tests for ComputeLayoutCommand and LayoutOutput."""

from pathlib import Path

import pytest

from shelfie.application import ComputeLayoutCommand, LayoutOutput
from shelfie.application.config import ShelfConfiguration, load_config
from shelfie.domain import LayoutConfig, LayoutResult, ShelfLayoutEngine


@pytest.fixture
def command() -> ComputeLayoutCommand:
    return ComputeLayoutCommand()


class TestComputeLayoutCommand:
    """Tests for ComputeLayoutCommand.execute."""

    def test_uses_config_width(self, command: ComputeLayoutCommand, fixtures_path: Path) -> None:
        """Without an explicit width the configured one is used."""
        output = command.execute(load_config(fixtures_path / "valid_minimal.json"))

        assert output.is_valid
        assert output.container_width == 600
        assert [item.id for item in output.result.items] == ["dune", "sapiens", "haiku"]

    def test_explicit_width_wins(
        self, command: ComputeLayoutCommand, fixtures_path: Path
    ) -> None:
        output = command.execute(load_config(fixtures_path / "valid_minimal.json"), 250)
        assert output.container_width == 250
        assert output.result.container_width == 250

    def test_no_width(self, command: ComputeLayoutCommand, fixtures_path: Path) -> None:
        """A configuration without a width needs one passed in."""
        output = command.execute(load_config(fixtures_path / "no_width.json"))

        assert not output.is_valid
        assert "No container width" in output.errors[0]
        assert output.result.items == ()

    def test_breakpoint_applied(
        self, command: ComputeLayoutCommand, fixtures_path: Path
    ) -> None:
        """Narrow containers pick up their breakpoint's parameters."""
        config = load_config(fixtures_path / "valid_full.json")

        narrow = command.execute(config, 400)
        wide = command.execute(config)

        assert narrow.breakpoint_width == 480
        assert narrow.layout_config.target_row_height == 120.0
        assert wide.breakpoint_width is None
        assert wide.layout_config.target_row_height == 180.0

    def test_titles_collected(self, command: ComputeLayoutCommand, fixtures_path: Path) -> None:
        output = command.execute(load_config(fixtures_path / "valid_full.json"))
        assert output.titles["dune"] == "Dune"
        assert "sicp" not in output.titles

    def test_exclusions_use_file_indices(
        self, command: ComputeLayoutCommand, fixtures_path: Path
    ) -> None:
        """Engine and parse exclusions are merged in file order."""
        output = command.execute(load_config(fixtures_path / "valid_with_warnings.json"))
        warnings = output.result.item_warnings

        assert [(w.index, w.item_id) for w in warnings] == [
            (2, "a"),
            (3, "broken"),
            (5, "mystery"),
        ]
        assert "Duplicate" in warnings[0].reason

    def test_oversized_item_overflows(
        self, command: ComputeLayoutCommand, fixtures_path: Path
    ) -> None:
        output = command.execute(load_config(fixtures_path / "valid_with_warnings.json"))
        assert any(row.overflow for row in output.result.rows)
        assert output.is_valid

    def test_invalid_breakpoint_layout(
        self, command: ComputeLayoutCommand, fixtures_path: Path
    ) -> None:
        """Unusable merged parameters become output errors."""
        config = load_config(fixtures_path / "invalid_layout.json")

        assert not command.execute(config, 300).is_valid
        assert command.execute(config, 600).is_valid

    def test_engine_factory(self) -> None:
        """The engine can be swapped for testing."""
        seen: list[LayoutConfig] = []

        def factory(layout_config: LayoutConfig) -> ShelfLayoutEngine:
            seen.append(layout_config)
            return ShelfLayoutEngine(layout_config)

        config = ShelfConfiguration(schema_version="1.0", layout={"gutter_x": 3})
        ComputeLayoutCommand(engine_factory=factory).execute(config, 500)

        assert seen[0].gutter_x == 3.0


class TestLayoutOutput:
    """Tests for LayoutOutput serialization."""

    def test_to_dict(self, command: ComputeLayoutCommand, fixtures_path: Path) -> None:
        data = command.execute(load_config(fixtures_path / "valid_full.json"), 400).to_dict()

        assert data["container_width"] == 400
        assert data["breakpoint"] == 480
        assert data["layout"]["gutter_x"] == 6.0
        assert data["errors"] == []
        assert len(data["items"]) == 6
        assert set(data["items"][0]) == {"id", "x", "y", "z", "w", "h", "d", "ry", "row", "jx"}

    def test_errors_serialized(self) -> None:
        output = LayoutOutput(
            result=LayoutResult(),
            layout_config=LayoutConfig(),
            errors=["broken"],
        )
        data = output.to_dict()
        assert data["errors"] == ["broken"]
        assert data["items"] == []
