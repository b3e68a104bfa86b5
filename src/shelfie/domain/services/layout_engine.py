"""Shelf layout engine: normalize, pack and derive in one pure call.

The rendering layer calls :func:`compute_layout` whenever the item set or
the container width changes. Nothing is cached or carried between calls, so
concurrent calls with different inputs are safe.
"""

from __future__ import annotations

import logging
from typing import Sequence

from ..value_objects import (
    DEFAULT_LAYOUT_CONFIG,
    LayoutConfig,
    LayoutResult,
    PhysicalItem,
    validate_container_width,
)
from .normalizer import normalize
from .presentation import derive
from .row_packer import RowPacker

logger = logging.getLogger(__name__)

__all__ = [
    "ShelfLayoutEngine",
    "compute_layout",
]


class ShelfLayoutEngine:
    """Runs the normalize -> pack -> derive pipeline for one configuration.

    Invalid configuration never raises: the result comes back empty with
    ``config_errors`` filled in, so a render pass can decide what to show.
    """

    def __init__(self, config: LayoutConfig = DEFAULT_LAYOUT_CONFIG) -> None:
        """Initialize the engine.

        Args:
            config: Layout configuration applied to every call.
        """
        self.config = config

    def compute(
        self,
        items: Sequence[PhysicalItem],
        container_width: float,
    ) -> LayoutResult:
        """Lay out ``items`` across a container of ``container_width``.

        Args:
            items: Physical items in display order.
            container_width: Available width in output pixels.

        Returns:
            LayoutResult with one layout item per valid input item and the
            invalid ones listed in ``item_warnings``.
        """
        errors = validate_container_width(container_width) + self.config.validate()
        if errors:
            logger.warning("Layout aborted: %s", "; ".join(errors))
            return LayoutResult.failed(
                errors,
                container_width=container_width
                if isinstance(container_width, (int, float))
                else 0.0,
            )

        normalized = normalize(
            items,
            self.config.base_height,
            self.config.max_height_ratio,
        )
        packing = RowPacker(self.config).pack(normalized.items, container_width)
        layout_items = derive(packing.rows, container_width, self.config)

        logger.info(
            "Laid out %d of %d items in %d rows for width %.1f",
            len(layout_items),
            len(items),
            len(packing.rows),
            container_width,
        )

        return LayoutResult(
            items=layout_items,
            rows=packing.rows,
            warnings=packing.warnings,
            item_warnings=normalized.excluded,
            container_width=container_width,
            content_width=packing.content_width,
            content_height=packing.content_height,
        )


def compute_layout(
    items: Sequence[PhysicalItem],
    container_width: float,
    config: LayoutConfig = DEFAULT_LAYOUT_CONFIG,
) -> LayoutResult:
    """Compute a shelf layout.

    Example:
        >>> result = compute_layout(
        ...     [PhysicalItem("a", 130, 200, 20)], 400, LayoutConfig(jitter_x=0)
        ... )
        >>> result.row_count
        1
    """
    return ShelfLayoutEngine(config).compute(items, container_width)
