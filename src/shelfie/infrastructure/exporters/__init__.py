"""Machine-readable layout formats.

Registered exporters:
- json: Layout geometry, exclusions and parameters as JSON

Usage:
    from shelfie.infrastructure.exporters import ExporterRegistry

    text = ExporterRegistry.get("json")().export_string(layout_output)
"""

from shelfie.infrastructure.exporters.base import Exporter, ExporterRegistry
from shelfie.infrastructure.exporters.layout_json import JsonLayoutExporter

__all__ = [
    "Exporter",
    "ExporterRegistry",
    "JsonLayoutExporter",
]
