"""Unit tests for the text formatters."""

from pathlib import Path

import pytest

from shelfie.application import ComputeLayoutCommand, LayoutOutput
from shelfie.application.config import ShelfConfiguration, load_config
from shelfie.domain import LayoutResult
from shelfie.infrastructure import (
    LayoutSummaryFormatter,
    LayoutTableFormatter,
    ShelfDiagramFormatter,
)


@pytest.fixture
def minimal_output(fixtures_path: Path) -> LayoutOutput:
    return ComputeLayoutCommand().execute(load_config(fixtures_path / "valid_minimal.json"))


@pytest.fixture
def warning_output(fixtures_path: Path) -> LayoutOutput:
    return ComputeLayoutCommand().execute(
        load_config(fixtures_path / "valid_with_warnings.json")
    )


@pytest.fixture
def failed_output(fixtures_path: Path) -> LayoutOutput:
    return ComputeLayoutCommand().execute(load_config(fixtures_path / "no_width.json"))


class TestLayoutTableFormatter:
    """Tests for LayoutTableFormatter."""

    def test_lists_every_item(self, minimal_output: LayoutOutput) -> None:
        text = LayoutTableFormatter().format(minimal_output)

        assert text.startswith("SHELF LAYOUT")
        for item_id in ("dune", "sapiens", "haiku"):
            assert item_id in text
        assert "3 items in" in text

    def test_titles_preferred(self, fixtures_path: Path) -> None:
        output = ComputeLayoutCommand().execute(load_config(fixtures_path / "valid_full.json"))
        text = LayoutTableFormatter().format(output)
        assert "Haiku Anthology" in text

    def test_long_titles_truncated(self, minimal_output: LayoutOutput) -> None:
        minimal_output.titles["dune"] = "A" * 40
        text = LayoutTableFormatter().format(minimal_output)
        assert "A" * 23 + "~" in text
        assert "A" * 24 not in text

    def test_exclusions_and_warnings(self, warning_output: LayoutOutput) -> None:
        text = LayoutTableFormatter().format(warning_output)

        assert "EXCLUDED ITEMS" in text
        assert "[5] mystery" in text
        assert "WARNINGS" in text

    def test_failed(self, failed_output: LayoutOutput) -> None:
        assert LayoutTableFormatter().format(failed_output).startswith("No layout: ")

    def test_empty(self) -> None:
        output = ComputeLayoutCommand().execute(ShelfConfiguration(schema_version="1.0"), 400)
        assert LayoutTableFormatter().format(output) == "No items to lay out."


class TestShelfDiagramFormatter:
    """Tests for ShelfDiagramFormatter."""

    def test_diagram(self, minimal_output: LayoutOutput) -> None:
        text = ShelfDiagramFormatter().format(minimal_output.result)

        assert text.startswith("SHELF DIAGRAM")
        assert "+" in text
        assert "dune" in text
        assert text.endswith(f"Rows: {minimal_output.result.row_count}  Items: 3")
        assert "Container: 600px" in text

    def test_lines_fit_width(self, warning_output: LayoutOutput) -> None:
        """Overflowing items are squeezed into the diagram width."""
        text = ShelfDiagramFormatter(width=40).format(warning_output.result)
        assert all(len(line) <= 40 for line in text.splitlines()[:-1])

    def test_one_band_per_row(self, minimal_output: LayoutOutput) -> None:
        formatter = ShelfDiagramFormatter(row_lines=5)
        text = formatter.format(minimal_output.result)
        boards = [line for line in text.splitlines() if line == "=" * formatter.width]
        assert len(boards) == minimal_output.result.row_count + 1

    def test_empty(self) -> None:
        assert ShelfDiagramFormatter().format(LayoutResult()) == "No layout to display."


class TestLayoutSummaryFormatter:
    """Tests for LayoutSummaryFormatter."""

    def test_summary(self, minimal_output: LayoutOutput) -> None:
        text = LayoutSummaryFormatter().format(minimal_output)

        assert text.startswith("LAYOUT SUMMARY")
        assert "Container width: 600.0px" in text
        assert "Items laid out:  3" in text
        assert "Items excluded:  0" in text
        assert "Row 0:" in text

    def test_last_row_ragged(self, minimal_output: LayoutOutput) -> None:
        text = LayoutSummaryFormatter().format(minimal_output)
        assert text.splitlines()[-1].endswith("ragged")

    def test_breakpoint_shown(self, fixtures_path: Path) -> None:
        output = ComputeLayoutCommand().execute(
            load_config(fixtures_path / "valid_full.json"), 400
        )
        assert "Breakpoint:      max_width 480" in LayoutSummaryFormatter().format(output)

    def test_overflow_marked(self, warning_output: LayoutOutput) -> None:
        text = LayoutSummaryFormatter().format(warning_output)
        assert "overflow" in text
        assert "Items excluded:  3" in text

    def test_errors(self, failed_output: LayoutOutput) -> None:
        text = LayoutSummaryFormatter().format(failed_output)
        assert "ERRORS" in text
        assert "Items laid out" not in text
