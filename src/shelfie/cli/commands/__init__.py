"""CLI command implementations for the shelfie application.

This package contains subcommands for the shelfie CLI, including:
- validate: Validate a configuration file
- output handling for the layout command
"""

from shelfie.cli.commands.output_handlers import (
    available_formats,
    handle_multi_format_export,
    render_output,
)
from shelfie.cli.commands.validate import display_load_error, validate_command

__all__ = [
    "available_formats",
    "display_load_error",
    "handle_multi_format_export",
    "render_output",
    "validate_command",
]
