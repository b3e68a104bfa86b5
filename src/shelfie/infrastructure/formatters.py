"""Text formatters for shelf layouts."""

from __future__ import annotations

from shelfie.application.dtos import LayoutOutput
from shelfie.domain import LayoutItem, LayoutResult


def _label(item_id: str, titles: dict[str, str], limit: int) -> str:
    """Title if known, else the id, cut to ``limit`` characters."""
    text = titles.get(item_id, item_id)
    if len(text) > limit:
        return text[: max(limit - 1, 0)] + "~"
    return text


class LayoutTableFormatter:
    """Formats per-item layout geometry as a table."""

    def format(self, output: LayoutOutput) -> str:
        """Format every laid out item with its position and presentation."""
        if not output.is_valid:
            return "No layout: " + "; ".join(output.errors)

        result = output.result
        if not result.items:
            return "No items to lay out."

        lines = [
            "SHELF LAYOUT",
            "=" * 86,
            f"{'Item':<24} {'Row':<4} {'X':>8} {'Y':>8} {'W':>8} {'H':>8} "
            f"{'Depth':>7} {'Tilt':>6} {'Z':>4}",
            "-" * 86,
        ]
        for item in result.items:
            lines.append(
                f"{_label(item.id, output.titles, 24):<24} {item.row:<4} "
                f"{item.x:>8.1f} {item.y:>8.1f} {item.w:>8.1f} {item.h:>8.1f} "
                f"{item.d:>7.1f} {item.ry:>6.2f} {item.z:>4}"
            )
        lines.append("-" * 86)
        lines.append(
            f"{len(result.items)} items in {result.row_count} rows, "
            f"{result.content_width:.1f} x {result.content_height:.1f} px"
        )

        if result.item_warnings:
            lines.append("")
            lines.append("EXCLUDED ITEMS")
            for warning in result.item_warnings:
                lines.append(f"  [{warning.index}] {warning.item_id}: {warning.reason}")

        if result.warnings:
            lines.append("")
            lines.append("WARNINGS")
            for warning in result.warnings:
                lines.append(f"  {warning.message}")

        return "\n".join(lines)


class ShelfDiagramFormatter:
    """Formats ASCII diagrams of shelf layouts.

    The container is mapped onto ``width`` columns; each row of the layout
    becomes a band of ``row_lines`` text lines standing on a shelf board.
    """

    def __init__(self, width: int = 72, row_lines: int = 4) -> None:
        self.width = width
        self.row_lines = max(row_lines, 3)

    def format(self, result: LayoutResult) -> str:
        """Generate an ASCII diagram of the layout."""
        if not result.items:
            return "No layout to display."

        columns = self.width - 1
        scale = columns / max(result.container_width, result.content_width)

        lines = [
            "SHELF DIAGRAM",
            "=" * self.width,
            "",
        ]
        for row in result.rows:
            grid = [[" " for _ in range(self.width)] for _ in range(self.row_lines)]
            for item in (i for i in result.items if i.row == row.index):
                self._draw_item(grid, item, scale)
            lines.extend("".join(line).rstrip() for line in grid)
            lines.append("=" * self.width)

        lines.append("")
        lines.append(
            f"Container: {result.container_width:.0f}px  "
            f"Rows: {result.row_count}  Items: {len(result.items)}"
        )
        return "\n".join(lines)

    def _draw_item(self, grid: list[list[str]], item: LayoutItem, scale: float) -> None:
        x1 = min(int(round(item.base_x * scale)), self.width - 2)
        x2 = min(max(int(round((item.base_x + item.w) * scale)) - 1, x1 + 1), self.width - 1)
        self._draw_box(grid, x1, 0, x2, self.row_lines - 1)

        inner = x2 - x1 - 1
        if inner > 0:
            label = item.id[:inner]
            for offset, char in enumerate(label):
                grid[1][x1 + 1 + offset] = char

    def _draw_box(
        self, grid: list[list[str]], x1: int, y1: int, x2: int, y2: int
    ) -> None:
        """Draw a box on the grid."""
        grid[y1][x1] = "+"
        grid[y1][x2] = "+"
        grid[y2][x1] = "+"
        grid[y2][x2] = "+"

        for x in range(x1 + 1, x2):
            grid[y1][x] = "-"
            grid[y2][x] = "-"

        for y in range(y1 + 1, y2):
            grid[y][x1] = "|"
            grid[y][x2] = "|"


class LayoutSummaryFormatter:
    """Formats a short per-row summary of a layout."""

    def format(self, output: LayoutOutput) -> str:
        """Format container, breakpoint and row statistics."""
        lines = [
            "LAYOUT SUMMARY",
            "=" * 60,
        ]
        if output.container_width is not None:
            lines.append(f"Container width: {output.container_width:.1f}px")
        if output.breakpoint_width is not None:
            lines.append(f"Breakpoint:      max_width {output.breakpoint_width:g}")

        if not output.is_valid:
            lines.append("")
            lines.append("ERRORS")
            for error in output.errors:
                lines.append(f"  {error}")
            return "\n".join(lines)

        result = output.result
        lines.append(f"Items laid out:  {len(result.items)}")
        lines.append(f"Items excluded:  {len(result.item_warnings)}")
        lines.append(
            f"Content size:    {result.content_width:.1f} x {result.content_height:.1f} px"
        )
        lines.append("")

        for row in result.rows:
            if row.overflow:
                state = "overflow"
            elif row.justified:
                state = "justified"
            else:
                state = "ragged"
            lines.append(
                f"  Row {row.index}: {len(row.items):>3} items  "
                f"height {row.height:>7.1f}  scale {row.scale:.3f}  {state}"
            )

        for warning in result.warnings:
            lines.append(f"  ! {warning.message}")
        return "\n".join(lines)
