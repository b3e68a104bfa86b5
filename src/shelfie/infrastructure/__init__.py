"""Infrastructure layer - formatters and exporters."""

from .exporters import (
    Exporter,
    ExporterRegistry,
    JsonLayoutExporter,
)
from .formatters import (
    LayoutSummaryFormatter,
    LayoutTableFormatter,
    ShelfDiagramFormatter,
)

__all__ = [
    "Exporter",
    "ExporterRegistry",
    "JsonLayoutExporter",
    "LayoutSummaryFormatter",
    "LayoutTableFormatter",
    "ShelfDiagramFormatter",
]
