"""Justified row packing for normalized items.

Items are assigned to rows in input order. Every item is first projected to
the nominal row height; a row closes as soon as the next projected width
(plus its gutter) would overflow the container. Closed rows are then
justified: one scale factor per row stretches the projected widths so that
widths plus gutters exactly fill the container, trading a little row-height
variance for a perfectly straight right edge.

All dataclasses returned are frozen; the packer keeps no state between
calls.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Sequence

from ..value_objects import (
    LayoutConfig,
    LayoutWarning,
    NormalizedItem,
    PackedItem,
    PackingResult,
    RaggedAlign,
    Row,
    validate_container_width,
)

logger = logging.getLogger(__name__)

__all__ = [
    "RowPacker",
    "pack",
]

# Relative slack so a row landing exactly on the container width, give or
# take float rounding, keeps the item (inclusive boundary).
_BOUNDARY_TOLERANCE = 1e-9


@dataclass
class _RowBuffer:
    """Internal accumulator for a row being filled.

    Attributes:
        items: Member items in input order.
        projected: Width of each item at the nominal row height.
        width: Sum of projected widths plus internal gutters.
    """

    items: list[NormalizedItem] = field(default_factory=list)
    projected: list[float] = field(default_factory=list)
    width: float = 0.0

    def width_with(self, projected: float, gutter: float) -> float:
        """Row width if an item of ``projected`` width were appended."""
        if not self.items:
            return projected
        return self.width + gutter + projected

    def add(self, item: NormalizedItem, projected: float, gutter: float) -> None:
        """Append an item and update the running width."""
        self.width = self.width_with(projected, gutter)
        self.items.append(item)
        self.projected.append(projected)


class RowPacker:
    """Greedy row-filling packer with per-row justification.

    Attributes:
        config: Layout configuration for the call.
    """

    def __init__(self, config: LayoutConfig) -> None:
        """Initialize the packer.

        Args:
            config: Validated layout configuration.
        """
        self.config = config

    def pack(
        self,
        normalized: Sequence[NormalizedItem],
        container_width: float,
    ) -> PackingResult:
        """Assign items to rows and compute their justified geometry.

        An unusable ``container_width`` gives an empty result listing the
        problem in ``config_errors``.

        Args:
            normalized: Items in the order they should appear.
            container_width: Positive width to fill.

        Returns:
            PackingResult with rows top to bottom and any overflow warnings.
        """
        errors = validate_container_width(container_width)
        if errors:
            logger.warning("Packing skipped: %s", "; ".join(errors))
            return PackingResult(config_errors=tuple(errors))
        if not normalized:
            return PackingResult()

        if self.config.row_count is not None:
            buffers = self._split_fixed_rows(normalized, self.config.row_count)
        else:
            buffers = self._split_greedy(normalized, container_width)

        rows: list[Row] = []
        warnings: list[LayoutWarning] = []
        y = 0.0
        for index, buffer in enumerate(buffers):
            is_last = index == len(buffers) - 1
            row = self._build_row(index, buffer, y, container_width, is_last)
            if row.overflow:
                message = (
                    f"Row {index} is {row.width:.1f}px wide, "
                    f"exceeding the {container_width:.1f}px container"
                )
                logger.warning(message)
                warnings.append(
                    LayoutWarning(
                        message=message,
                        row_index=index,
                        item_id=row.items[0].id if len(row.items) == 1 else None,
                    )
                )
            rows.append(row)
            y = row.bottom + self.config.gutter_y

        logger.debug(
            "Packed %d items into %d rows (content height %.1f)",
            len(normalized),
            len(rows),
            rows[-1].bottom,
        )
        return PackingResult(rows=tuple(rows), warnings=tuple(warnings))

    def _split_greedy(
        self,
        normalized: Sequence[NormalizedItem],
        container_width: float,
    ) -> list[_RowBuffer]:
        """Break items into rows whenever the next item would overflow.

        An item whose projected width lands exactly on the container width
        stays in the current row.
        """
        target = self.config.target_row_height
        gutter = self.config.gutter_x
        limit = container_width * (1 + _BOUNDARY_TOLERANCE)

        buffers: list[_RowBuffer] = []
        current = _RowBuffer()
        for item in normalized:
            projected = item.projected_width(target)
            if current.items and current.width_with(projected, gutter) > limit:
                buffers.append(current)
                current = _RowBuffer()
            current.add(item, projected, gutter)
        buffers.append(current)
        return buffers

    def _split_fixed_rows(
        self,
        normalized: Sequence[NormalizedItem],
        row_count: int,
    ) -> list[_RowBuffer]:
        """Split items in order into ``row_count`` nearly equal rows.

        Each row takes ``ceil(n / row_count)`` items; trailing rows may be
        shorter or absent when there are fewer items than rows.
        """
        target = self.config.target_row_height
        gutter = self.config.gutter_x
        per_row = math.ceil(len(normalized) / row_count)

        buffers: list[_RowBuffer] = []
        for start in range(0, len(normalized), per_row):
            buffer = _RowBuffer()
            for item in normalized[start : start + per_row]:
                buffer.add(item, item.projected_width(target), gutter)
            buffers.append(buffer)
        return buffers

    def _row_scale(
        self,
        buffer: _RowBuffer,
        container_width: float,
        is_last: bool,
    ) -> tuple[float, bool]:
        """Pick the scale factor for a row.

        A ragged last row keeps its natural size only while it fits;
        a wider one is justified down like any other row.

        Returns:
            Tuple of (scale, justified).
        """
        natural = sum(buffer.projected)
        gutters = self.config.gutter_x * (len(buffer.items) - 1)
        fits = natural + gutters <= container_width * (1 + _BOUNDARY_TOLERANCE)
        if is_last and self.config.ragged_last_row and fits:
            return 1.0, False

        usable = container_width - gutters
        if len(buffer.items) == 1 and natural > container_width:
            # Oversized single item keeps its size rather than being squashed
            return 1.0, False
        if usable <= 0:
            return 1.0, False
        return usable / natural, True

    def _align_offset(self, row_width: float, container_width: float) -> float:
        """Left offset for a row narrower than the container."""
        free = container_width - row_width
        if free <= 0:
            return 0.0
        if self.config.ragged_align == RaggedAlign.CENTER:
            return free / 2
        if self.config.ragged_align == RaggedAlign.RIGHT:
            return free
        return 0.0

    def _build_row(
        self,
        index: int,
        buffer: _RowBuffer,
        y: float,
        container_width: float,
        is_last: bool,
    ) -> Row:
        """Turn a filled buffer into positioned row geometry."""
        target = self.config.target_row_height
        gutter = self.config.gutter_x
        scale, justified = self._row_scale(buffer, container_width, is_last)

        row_height = target * scale
        row_width = scale * sum(buffer.projected) + gutter * (len(buffer.items) - 1)
        overflow = row_width > container_width * (1 + _BOUNDARY_TOLERANCE)

        x = 0.0 if justified else self._align_offset(row_width, container_width)
        placed: list[PackedItem] = []
        for item, projected in zip(buffer.items, buffer.projected):
            w = projected * scale
            spine = item.spine * (target / item.height) * scale
            placed.append(PackedItem(id=item.id, x=x, w=w, h=row_height, spine=spine))
            x += w + gutter

        logger.debug(
            "Row %d: %d items, scale %.4f, height %.2f, %s",
            index,
            len(placed),
            scale,
            row_height,
            "justified" if justified else "natural",
        )

        return Row(
            index=index,
            y=y,
            height=row_height,
            scale=scale,
            justified=justified,
            overflow=overflow,
            items=tuple(placed),
        )


def pack(
    normalized: Sequence[NormalizedItem],
    container_width: float,
    config: LayoutConfig,
) -> PackingResult:
    """Pack normalized items into justified rows.

    Convenience wrapper around :class:`RowPacker`.

    Args:
        normalized: Items in display order.
        container_width: Positive width to fill.
        config: Layout configuration.

    Returns:
        PackingResult with rows and warnings.
    """
    return RowPacker(config).pack(normalized, container_width)
