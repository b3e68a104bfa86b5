"""Layout configuration and result value objects."""

from __future__ import annotations

import math
from dataclasses import dataclass, fields, replace
from enum import Enum
from typing import Any

from ._items import NormalizedItem


class RaggedAlign(str, Enum):
    """Horizontal alignment of rows that are not stretched to the container."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


@dataclass(frozen=True)
class LayoutConfig:
    """Caller-supplied layout parameters, immutable for one call.

    Construction does not validate; the engine calls :meth:`validate` and
    reports problems in its result instead of raising during a render pass.

    Attributes:
        base_height: Height the reference (median) item is normalized to.
        target_row_height: Nominal row height in output pixels before
            justification.
        gutter_x: Horizontal spacing between items in a row.
        gutter_y: Vertical spacing between rows.
        jitter_x: Maximum horizontal offset applied per item.
        max_tilt_y: Maximum rotation about the vertical axis, in degrees.
        ragged_last_row: Leave the final row at its natural size.
        max_height_ratio: Outlier bound; raw heights are clamped to within this
            factor of the reference height.
        min_spine: Smallest rendered spine depth.
        spine_ratio_min: Spine/height ratio mapped to zero tilt.
        spine_ratio_max: Spine/height ratio mapped to ``max_tilt_y``.
        ragged_align: Alignment of rows narrower than the container.
        row_count: When set, split items into exactly this many rows instead
            of breaking greedily.
    """

    base_height: float = 200.0
    target_row_height: float = 200.0
    gutter_x: float = 12.0
    gutter_y: float = 14.0
    jitter_x: float = 6.0
    max_tilt_y: float = 10.0
    ragged_last_row: bool = True
    max_height_ratio: float = 1.5
    min_spine: float = 2.0
    spine_ratio_min: float = 0.05
    spine_ratio_max: float = 0.25
    ragged_align: RaggedAlign = RaggedAlign.LEFT
    row_count: int | None = None

    def validate(self) -> list[str]:
        """Return configuration error messages (empty if usable)."""
        errors: list[str] = []
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, float) and not math.isfinite(value):
                errors.append(f"{f.name} must be finite")
        if errors:
            return errors

        if self.base_height <= 0:
            errors.append("base_height must be positive")
        if self.target_row_height <= 0:
            errors.append("target_row_height must be positive")
        if self.gutter_x < 0:
            errors.append("gutter_x must be non-negative")
        if self.gutter_y < 0:
            errors.append("gutter_y must be non-negative")
        if self.jitter_x < 0:
            errors.append("jitter_x must be non-negative")
        if self.max_tilt_y < 0:
            errors.append("max_tilt_y must be non-negative")
        if self.max_height_ratio < 1:
            errors.append("max_height_ratio must be at least 1")
        if self.min_spine < 0:
            errors.append("min_spine must be non-negative")
        if self.spine_ratio_min < 0 or self.spine_ratio_max <= self.spine_ratio_min:
            errors.append(
                "spine_ratio_max must be greater than spine_ratio_min, "
                "and spine_ratio_min must be non-negative"
            )
        if self.row_count is not None and self.row_count < 1:
            errors.append("row_count must be at least 1")
        return errors

    def with_overrides(self, **overrides: Any) -> "LayoutConfig":
        """Return a copy with the given non-None fields replaced."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        if "ragged_align" in changes:
            changes["ragged_align"] = RaggedAlign(changes["ragged_align"])
        return replace(self, **changes)


DEFAULT_LAYOUT_CONFIG = LayoutConfig()


def validate_container_width(container_width: float) -> list[str]:
    """Return errors for an unusable container width."""
    if not isinstance(container_width, (int, float)) or not math.isfinite(
        container_width
    ):
        return [f"container_width must be a finite number (got {container_width!r})"]
    if container_width <= 0:
        return [f"container_width must be positive (got {container_width!r})"]
    return []


@dataclass(frozen=True)
class ItemWarning:
    """An input item excluded from the layout.

    Attributes:
        item_id: Identifier of the rejected item.
        index: Position of the item in the caller's input list.
        reason: Why the item was excluded.
    """

    item_id: str
    index: int
    reason: str


@dataclass(frozen=True)
class LayoutWarning:
    """Non-fatal condition met while packing rows."""

    message: str
    row_index: int | None = None
    item_id: str | None = None


@dataclass(frozen=True)
class NormalizationResult:
    """Output of the normalizer.

    Attributes:
        items: Valid items in input order.
        excluded: Items that failed validation.
        reference_height: Median raw height used as the scale anchor
            (0.0 when no valid items).
    """

    items: tuple[NormalizedItem, ...] = ()
    excluded: tuple[ItemWarning, ...] = ()
    reference_height: float = 0.0


@dataclass(frozen=True)
class PackedItem:
    """An item's geometry inside a packed row, before jitter and tilt.

    Attributes:
        id: Item identifier.
        x: Left edge in output pixels.
        w: Rendered width.
        h: Rendered height.
        spine: Rendered spine thickness (before ``min_spine`` is applied).
    """

    id: str
    x: float
    w: float
    h: float
    spine: float

    @property
    def right(self) -> float:
        """X coordinate of the right edge."""
        return self.x + self.w


@dataclass(frozen=True)
class Row:
    """A horizontal band of items sharing one scale factor.

    Attributes:
        index: Zero-based row number, top to bottom.
        y: Top edge of the row.
        height: Rendered row height (every item in the row has this height).
        scale: Justification factor applied to the projected sizes.
        justified: True if the row was stretched to fill the container.
        overflow: True if a single item is wider than the container.
        items: Items left to right.
    """

    index: int
    y: float
    height: float
    scale: float
    justified: bool
    overflow: bool
    items: tuple[PackedItem, ...]

    def __post_init__(self) -> None:
        if self.index < 0:
            raise ValueError("Row index must be non-negative")
        if self.height <= 0:
            raise ValueError("Row height must be positive")
        if not self.items:
            raise ValueError("Row must contain at least one item")

    @property
    def left(self) -> float:
        """X coordinate of the first item."""
        return self.items[0].x

    @property
    def right(self) -> float:
        """X coordinate of the right edge of the last item."""
        return self.items[-1].right

    @property
    def width(self) -> float:
        """Occupied width including internal gutters."""
        return self.right - self.left

    @property
    def bottom(self) -> float:
        """Y coordinate of the bottom edge."""
        return self.y + self.height


@dataclass(frozen=True)
class PackingResult:
    """Rows produced by the packer plus non-fatal warnings.

    ``config_errors`` is set, and ``rows`` empty, when the container width
    was unusable.
    """

    rows: tuple[Row, ...] = ()
    warnings: tuple[LayoutWarning, ...] = ()
    config_errors: tuple[str, ...] = ()

    @property
    def content_height(self) -> float:
        """Bottom edge of the last row, 0 for an empty layout."""
        return self.rows[-1].bottom if self.rows else 0.0

    @property
    def content_width(self) -> float:
        """Right edge of the widest row, 0 for an empty layout."""
        return max((row.right for row in self.rows), default=0.0)


@dataclass(frozen=True)
class LayoutItem:
    """Final per-item geometry consumed by the rendering layer.

    Attributes:
        id: Item identifier.
        x: Left edge including jitter.
        y: Top edge.
        w: Rendered width.
        h: Rendered height.
        d: Rendered spine depth.
        z: Stacking order; later rows stack above earlier ones.
        ry: Rotation about the vertical axis in degrees.
        row: Index of the row holding the item.
        jx: Jitter already included in ``x``.
    """

    id: str
    x: float
    y: float
    w: float
    h: float
    d: float
    z: int
    ry: float
    row: int
    jx: float = 0.0

    def __post_init__(self) -> None:
        if self.w <= 0 or self.h <= 0 or self.d <= 0:
            raise ValueError("Rendered dimensions must be positive")
        if self.row < 0:
            raise ValueError("Row index must be non-negative")

    @property
    def base_x(self) -> float:
        """Left edge without jitter."""
        return self.x - self.jx

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a plain dictionary."""
        return {
            "id": self.id,
            "x": self.x,
            "y": self.y,
            "z": self.z,
            "w": self.w,
            "h": self.h,
            "d": self.d,
            "ry": self.ry,
            "row": self.row,
            "jx": self.jx,
        }


@dataclass(frozen=True)
class LayoutResult:
    """Complete result of one layout call.

    A call with a configuration error has no rows or items and lists the
    problems in ``config_errors``. Excluded input items appear in
    ``item_warnings`` whether or not the rest of the call succeeded.

    Attributes:
        items: Laid out items, grouped by row, left to right.
        rows: Packed rows.
        warnings: Non-fatal packing conditions (e.g. overflow rows).
        item_warnings: Input items excluded from the layout.
        config_errors: Configuration problems that aborted the call.
        container_width: Width the layout was computed for.
        content_width: Right edge of the widest row.
        content_height: Bottom edge of the last row.
    """

    items: tuple[LayoutItem, ...] = ()
    rows: tuple[Row, ...] = ()
    warnings: tuple[LayoutWarning, ...] = ()
    item_warnings: tuple[ItemWarning, ...] = ()
    config_errors: tuple[str, ...] = ()
    container_width: float = 0.0
    content_width: float = 0.0
    content_height: float = 0.0

    @classmethod
    def failed(
        cls,
        config_errors: list[str],
        container_width: float = 0.0,
        item_warnings: list[ItemWarning] | None = None,
    ) -> "LayoutResult":
        """Build an empty result carrying configuration errors."""
        return cls(
            config_errors=tuple(config_errors),
            item_warnings=tuple(item_warnings or []),
            container_width=container_width,
        )

    @property
    def is_valid(self) -> bool:
        """True if the configuration was usable."""
        return not self.config_errors

    @property
    def excluded_ids(self) -> tuple[str, ...]:
        """Ids of the input items left out of the layout."""
        return tuple(w.item_id for w in self.item_warnings)

    @property
    def row_count(self) -> int:
        """Number of packed rows."""
        return len(self.rows)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dictionary."""
        return {
            "container_width": self.container_width,
            "content_width": self.content_width,
            "content_height": self.content_height,
            "row_count": self.row_count,
            "items": [item.to_dict() for item in self.items],
            "warnings": [
                {"message": w.message, "row": w.row_index, "id": w.item_id}
                for w in self.warnings
            ],
            "excluded": [
                {"id": w.item_id, "index": w.index, "reason": w.reason}
                for w in self.item_warnings
            ],
            "config_errors": list(self.config_errors),
        }
