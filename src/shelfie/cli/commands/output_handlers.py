"""Output handling for the layout command.

Text formats are rendered by the formatters; every other format goes
through the exporter registry.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import typer

from shelfie.infrastructure import (
    LayoutSummaryFormatter,
    LayoutTableFormatter,
    ShelfDiagramFormatter,
)
from shelfie.infrastructure.exporters import ExporterRegistry

if TYPE_CHECKING:
    from shelfie.application.dtos import LayoutOutput

__all__ = [
    "TEXT_FORMATS",
    "available_formats",
    "handle_multi_format_export",
    "render_output",
]

TEXT_FORMATS: tuple[str, ...] = ("table", "diagram", "summary")


def available_formats() -> list[str]:
    """Text formats followed by the registered export formats."""
    return list(TEXT_FORMATS) + ExporterRegistry.available_formats()


def render_output(output: LayoutOutput, output_format: str) -> str:
    """Render a layout in one format.

    Raises:
        KeyError: If the format is unknown.
    """
    if output_format == "table":
        return LayoutTableFormatter().format(output)
    if output_format == "diagram":
        return ShelfDiagramFormatter().format(output.result)
    if output_format == "summary":
        return LayoutSummaryFormatter().format(output)
    return ExporterRegistry.get(output_format)().export_string(output)


def handle_multi_format_export(
    output_formats_str: str,
    output_dir: Path | None,
    project_name: str,
    result: LayoutOutput,
) -> None:
    """Export a layout to every format in a comma-separated list.

    Args:
        output_formats_str: Comma-separated format list or "all".
        output_dir: Output directory for exported files.
        project_name: Project name for file naming.
        result: The layout output to export.
    """
    if output_formats_str.lower() == "all":
        formats = ExporterRegistry.available_formats()
    else:
        formats = [f.strip().lower() for f in output_formats_str.split(",") if f.strip()]

    available = ExporterRegistry.available_formats()
    invalid = [f for f in formats if f not in available]
    if invalid:
        typer.echo(f"Unknown formats: {', '.join(invalid)}", err=True)
        typer.echo(f"Available formats: {', '.join(available)}", err=True)
        raise typer.Exit(code=1)

    if not formats:
        typer.echo("No valid formats to export.", err=True)
        raise typer.Exit(code=1)

    target_dir = output_dir or Path(".")
    files: dict[str, Path] = {}
    try:
        target_dir.mkdir(parents=True, exist_ok=True)
        for fmt in formats:
            exporter = ExporterRegistry.get(fmt)()
            path = target_dir / f"{project_name}_{fmt}.{exporter.file_extension}"
            exporter.export(result, path)
            files[fmt] = path
    except OSError as e:
        typer.echo(f"Export error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo("Exported files:")
    for fmt, path in files.items():
        typer.echo(f"  {fmt.upper()}: {path}")
