"""JSON exporter for shelf layouts.

The document carries every laid out item with its final geometry, the
excluded items, packing warnings and the layout parameters in effect, so a
renderer can draw the shelf without running the engine itself.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any, ClassVar

from shelfie.infrastructure.exporters.base import ExporterRegistry

if TYPE_CHECKING:
    from shelfie.application.dtos import LayoutOutput


logger = logging.getLogger(__name__)


# Current schema version for JSON output
SCHEMA_VERSION = "1.0"


@ExporterRegistry.register("json")
class JsonLayoutExporter:
    """JSON exporter for computed layouts.

    Attributes:
        format_name: "json"
        file_extension: "json"
    """

    format_name: ClassVar[str] = "json"
    file_extension: ClassVar[str] = "json"

    def __init__(self, include_rows: bool = True, indent: int = 2) -> None:
        """Initialize the JSON exporter.

        Args:
            include_rows: Whether to include per-row packing data.
            indent: JSON indentation level.
        """
        self.include_rows = include_rows
        self.indent = indent

    def export(self, output: LayoutOutput, path: Path) -> None:
        """Export the layout as a JSON file."""
        path.write_text(self.export_string(output))
        logger.info(f"Exported layout JSON to {path}")

    def export_string(self, output: LayoutOutput) -> str:
        """Generate the JSON document."""
        return json.dumps(self._build_output(output), indent=self.indent)

    def _build_output(self, output: LayoutOutput) -> dict[str, Any]:
        data: dict[str, Any] = {"schema_version": SCHEMA_VERSION}
        data.update(output.to_dict())
        if self.include_rows:
            data["rows"] = [
                {
                    "index": row.index,
                    "y": row.y,
                    "height": row.height,
                    "scale": row.scale,
                    "justified": row.justified,
                    "overflow": row.overflow,
                    "items": [item.id for item in row.items],
                }
                for row in output.result.rows
            ]
        return data
