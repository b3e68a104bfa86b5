"""Unit tests for merging CLI options into a configuration."""

import pytest

from shelfie.application.config import (
    ConfigError,
    LayoutConfigSchema,
    ShelfConfiguration,
    merge_config_with_cli,
)


@pytest.fixture
def config() -> ShelfConfiguration:
    return ShelfConfiguration(
        schema_version="1.0",
        container_width=800,
        layout=LayoutConfigSchema(target_row_height=180, gutter_x=8),
        items=[{"id": "a", "width": 130, "height": 200, "spine": 20}],
    )


class TestMergeConfigWithCli:
    """Tests for merge_config_with_cli."""

    def test_no_overrides(self, config: ShelfConfiguration) -> None:
        """Without overrides the configuration is unchanged."""
        assert merge_config_with_cli(config).model_dump() == config.model_dump()

    def test_container_width(self, config: ShelfConfiguration) -> None:
        merged = merge_config_with_cli(config, container_width=640)
        assert merged.container_width == 640.0

    def test_layout_overrides(self, config: ShelfConfiguration) -> None:
        """Layout options replace only their own field."""
        merged = merge_config_with_cli(
            config, target_row_height=120, ragged_last_row=False, row_count=2
        )
        assert merged.layout.target_row_height == 120.0
        assert merged.layout.ragged_last_row is False
        assert merged.layout.row_count == 2
        assert merged.layout.gutter_x == 8.0

    def test_original_untouched(self, config: ShelfConfiguration) -> None:
        merge_config_with_cli(config, container_width=100, target_row_height=50)
        assert config.container_width == 800.0
        assert config.layout.target_row_height == 180.0

    def test_width_added_when_missing(self) -> None:
        """A width can be supplied for a file that has none."""
        config = ShelfConfiguration(schema_version="1.0")
        assert merge_config_with_cli(config, container_width=500).container_width == 500.0

    def test_out_of_range_override(self, config: ShelfConfiguration) -> None:
        """Bad overrides are reported like bad file values."""
        with pytest.raises(ConfigError) as exc:
            merge_config_with_cli(config, container_width=-10)
        assert exc.value.details[0]["path"] == "container_width"

    def test_dimension_strings_survive(self) -> None:
        config = ShelfConfiguration(
            schema_version="1.0",
            items=[{"id": "a", "dimensions": "9 x 6 x 1 in", "title": "A"}],
        )
        merged = merge_config_with_cli(config, row_count=1)
        assert merged.items[0].dimensions == "9 x 6 x 1 in"
        assert merged.items[0].title == "A"
