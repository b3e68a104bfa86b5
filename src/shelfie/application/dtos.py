"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass, field

from shelfie.domain import LayoutConfig, LayoutResult


@dataclass
class LayoutOutput:
    """Output DTO containing a computed shelf layout.

    Attributes:
        result: Layout computed by the engine (empty if ``errors`` is set).
        layout_config: Effective layout parameters after breakpoints.
        container_width: Width the layout was computed for.
        breakpoint_width: ``max_width`` of the breakpoint applied, if any.
        titles: Display titles keyed by item id, for text output.
        errors: List of error messages if the layout could not be computed.
    """

    result: LayoutResult
    layout_config: LayoutConfig
    container_width: float | None = None
    breakpoint_width: float | None = None
    titles: dict[str, str] = field(default_factory=dict)
    errors: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the layout was computed successfully."""
        return len(self.errors) == 0

    def to_dict(self) -> dict:
        """Serialize the layout and the parameters it was computed with."""
        data = self.result.to_dict()
        data["breakpoint"] = self.breakpoint_width
        data["layout"] = {
            "target_row_height": self.layout_config.target_row_height,
            "gutter_x": self.layout_config.gutter_x,
            "gutter_y": self.layout_config.gutter_y,
            "jitter_x": self.layout_config.jitter_x,
            "max_tilt_y": self.layout_config.max_tilt_y,
            "ragged_last_row": self.layout_config.ragged_last_row,
            "row_count": self.layout_config.row_count,
        }
        data["errors"] = list(self.errors)
        return data
