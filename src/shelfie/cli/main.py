"""Typer CLI for shelf layouts."""

import logging
from pathlib import Path
from typing import Annotated

import typer

from shelfie.application import ComputeLayoutCommand
from shelfie.application.config import (
    ConfigError,
    load_config,
    merge_config_with_cli,
)
from shelfie.cli.commands import (
    available_formats,
    display_load_error,
    handle_multi_format_export,
    render_output,
    validate_command,
)
from shelfie.domain import DimensionParseError, parse_dimensions

app = typer.Typer(
    name="shelfie",
    help="Lay out book covers and other catalog items on justified shelves.",
)

app.command(name="validate")(validate_command)


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log packing decisions to stderr"),
    ] = False,
) -> None:
    """Shelf layout tools."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )


@app.command()
def layout(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON configuration file"),
    ],
    width: Annotated[
        float | None,
        typer.Option("--width", "-w", help="Container width in pixels"),
    ] = None,
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: table, diagram, summary, json"),
    ] = "table",
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write output to this file"),
    ] = None,
    ragged: Annotated[
        bool | None,
        typer.Option(
            "--ragged/--justified",
            help="Leave the last row at natural size, or stretch it too",
        ),
    ] = None,
    row_height: Annotated[
        float | None,
        typer.Option("--row-height", help="Target row height in pixels"),
    ] = None,
    rows: Annotated[
        int | None,
        typer.Option("--rows", help="Split items into exactly this many rows"),
    ] = None,
    output_formats: Annotated[
        str | None,
        typer.Option(
            "--output-formats",
            help="Comma-separated export formats (or 'all'), written to --output-dir",
        ),
    ] = None,
    output_dir: Annotated[
        Path | None,
        typer.Option("--output-dir", help="Output directory for multi-format export"),
    ] = None,
    project_name: Annotated[
        str,
        typer.Option("--project-name", help="Project name for output file naming"),
    ] = "shelf",
) -> None:
    """Compute a shelf layout from a configuration file.

    Example:
        shelfie layout shelf.json --width 960 --format diagram
    """
    if output_format not in available_formats():
        typer.echo(f"Unknown format: {output_format}", err=True)
        typer.echo(f"Available formats: {', '.join(available_formats())}", err=True)
        raise typer.Exit(code=1)

    try:
        config = load_config(config_file)
        config = merge_config_with_cli(
            config,
            container_width=width,
            target_row_height=row_height,
            ragged_last_row=ragged,
            row_count=rows,
        )
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)

    result = ComputeLayoutCommand().execute(config)
    if not result.is_valid:
        for error in result.errors:
            typer.echo(f"Error: {error}", err=True)
        raise typer.Exit(code=1)

    excluded = result.result.item_warnings
    if excluded:
        typer.echo(f"Warning: {len(excluded)} item(s) excluded from the layout", err=True)

    if output_formats:
        handle_multi_format_export(output_formats, output_dir, project_name, result)
        return

    text = render_output(result, output_format)
    if output_file is not None:
        output_file.write_text(text)
        typer.echo(f"Layout written to {output_file}")
    else:
        typer.echo(text)


@app.command()
def dims(
    text: Annotated[
        str,
        typer.Argument(help='Dimension string, e.g. "9.2 x 6.1 x 1.3 inches"'),
    ],
) -> None:
    """Parse a catalog dimension string into millimetres."""
    try:
        dimensions = parse_dimensions(text)
    except DimensionParseError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo(f"Width:  {dimensions.width:.1f} mm")
    typer.echo(f"Height: {dimensions.height:.1f} mm")
    typer.echo(f"Spine:  {dimensions.spine:.1f} mm")


if __name__ == "__main__":
    app()
