"""Merging of CLI options into a loaded configuration.

Precedence is CLI args > config values > defaults. Only CLI arguments that
are not None override the file.
"""

from typing import Any

from shelfie.application.config.loader import load_config_from_dict
from shelfie.application.config.schema import ShelfConfiguration


def merge_config_with_cli(
    config: ShelfConfiguration,
    *,
    container_width: float | None = None,
    target_row_height: float | None = None,
    ragged_last_row: bool | None = None,
    row_count: int | None = None,
) -> ShelfConfiguration:
    """Merge CLI arguments with configuration values.

    Args:
        config: The base configuration
        container_width: Override for container_width
        target_row_height: Override for layout.target_row_height
        ragged_last_row: Override for layout.ragged_last_row
        row_count: Override for layout.row_count

    Returns:
        A new, re-validated ShelfConfiguration

    Raises:
        ConfigError: If an override is out of range.

    Example:
        >>> merged = merge_config_with_cli(config, container_width=640)
        >>> merged.container_width
        640.0
    """
    data: dict[str, Any] = config.model_dump(mode="json", exclude_none=True)
    if container_width is not None:
        data["container_width"] = container_width

    layout = data.setdefault("layout", {})
    if target_row_height is not None:
        layout["target_row_height"] = target_row_height
    if ragged_last_row is not None:
        layout["ragged_last_row"] = ragged_last_row
    if row_count is not None:
        layout["row_count"] = row_count

    return load_config_from_dict(data)
