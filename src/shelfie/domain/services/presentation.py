"""Presentation parameters derived from packed rows.

Turns packed geometry into what the renderer needs for a "real" shelf:
a rendered spine depth, a tilt angle growing with spine thickness, a small
horizontal jitter, and a stacking order. Jitter comes from a Halton
sequence seeded by a hash of the item id, so the same input always yields
the same picture and nothing jumps between re-renders.
"""

from __future__ import annotations

import hashlib
import logging
from typing import Sequence

from ..value_objects import LayoutConfig, LayoutItem, Row

logger = logging.getLogger(__name__)

__all__ = [
    "GAP_SHARE",
    "derive",
    "halton",
    "item_seed",
    "jitter_offset",
    "tilt_angle",
]

# Share of the free gap on each side an item may drift into.
GAP_SHARE = 0.40


def item_seed(item_id: str) -> int:
    """Stable 32-bit seed for ``item_id``.

    Uses SHA-1 rather than ``hash()`` because string hashing is salted per
    interpreter process.
    """
    digest = hashlib.sha1(item_id.encode("utf-8")).digest()
    return int.from_bytes(digest[:4], "big")


def halton(index: int, base: int) -> float:
    """Radical inverse of ``index`` in ``base``, in ``[0, 1)``."""
    result = 0.0
    f = 1.0 / base
    i = index
    while i > 0:
        result += f * (i % base)
        i //= base
        f /= base
    return result


def jitter_offset(
    item_id: str,
    jitter_x: float,
    max_left: float,
    max_right: float,
) -> float:
    """Deterministic horizontal offset for one item.

    Args:
        item_id: Identifier seeding the sequence.
        jitter_x: Maximum magnitude of the offset.
        max_left: Most negative offset allowed (<= 0).
        max_right: Most positive offset allowed (>= 0).

    Returns:
        Offset in ``[max(-jitter_x, max_left), min(jitter_x, max_right)]``.
    """
    if jitter_x <= 0:
        return 0.0
    raw = (halton(item_seed(item_id), 2) - 0.5) * 2 * jitter_x
    return min(max(raw, max_left), max_right)


def tilt_angle(depth: float, height: float, config: LayoutConfig) -> float:
    """Rotation in degrees for an item of the given rendered depth and height.

    The spine/height ratio is mapped linearly from
    ``[spine_ratio_min, spine_ratio_max]`` onto ``[0, max_tilt_y]`` and
    clamped at both ends.
    """
    span = config.spine_ratio_max - config.spine_ratio_min
    t = (depth / height - config.spine_ratio_min) / span
    return config.max_tilt_y * min(max(t, 0.0), 1.0)


def _row_items(row: Row, container_width: float, config: LayoutConfig, z: int) -> list[LayoutItem]:
    placed = row.items
    out: list[LayoutItem] = []
    for i, item in enumerate(placed):
        if i == 0:
            max_left = -item.x
        else:
            max_left = -(item.x - placed[i - 1].right) * GAP_SHARE
        if i == len(placed) - 1:
            max_right = max(0.0, container_width - item.right)
        else:
            max_right = (placed[i + 1].x - item.right) * GAP_SHARE

        jx = jitter_offset(item.id, config.jitter_x, min(max_left, 0.0), max_right)
        d = max(config.min_spine, item.spine)
        out.append(
            LayoutItem(
                id=item.id,
                x=item.x + jx,
                y=row.y,
                w=item.w,
                h=item.h,
                d=d,
                z=z + i,
                ry=tilt_angle(d, item.h, config),
                row=row.index,
                jx=jx,
            )
        )
    return out


def derive(
    rows: Sequence[Row],
    container_width: float,
    config: LayoutConfig,
) -> tuple[LayoutItem, ...]:
    """Compute final per-item geometry for packed rows.

    ``z`` counts items in row-major order, so every item of a later row
    stacks above every item of an earlier row.

    Args:
        rows: Packed rows, top to bottom.
        container_width: Width the rows were packed for.
        config: Layout configuration.

    Returns:
        Tuple of layout items grouped by row, left to right.
    """
    items: list[LayoutItem] = []
    for row in rows:
        items.extend(_row_items(row, container_width, config, len(items)))
    logger.debug("Derived presentation for %d items", len(items))
    return tuple(items)
