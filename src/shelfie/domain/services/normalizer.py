"""Normalization of physical item dimensions to a shared relative scale.

Raw dimensions arrive in whatever unit the catalog stores. The normalizer
anchors the median raw height to ``base_height`` and applies one uniform
scale per item, so every item keeps its exact aspect ratio and relative
spine thickness. Heights far from the median are clamped before scaling so
a single oversized entry cannot flatten every row it lands in.
"""

from __future__ import annotations

import logging
import statistics
from typing import Sequence

from ..value_objects import (
    ItemWarning,
    NormalizationResult,
    NormalizedItem,
    PhysicalItem,
)

logger = logging.getLogger(__name__)

__all__ = [
    "DEFAULT_MAX_HEIGHT_RATIO",
    "normalize",
    "reference_height",
]

DEFAULT_MAX_HEIGHT_RATIO = 1.5


def reference_height(items: Sequence[PhysicalItem]) -> float:
    """Median raw height of ``items``.

    Args:
        items: Valid physical items.

    Returns:
        The median height, or 0.0 for an empty sequence.
    """
    if not items:
        return 0.0
    return float(statistics.median(item.height for item in items))


def _screen_items(
    items: Sequence[PhysicalItem],
) -> tuple[list[PhysicalItem], list[ItemWarning]]:
    """Split input into valid items and exclusion warnings.

    Duplicate ids keep their first occurrence.
    """
    valid: list[PhysicalItem] = []
    excluded: list[ItemWarning] = []
    seen: set[str] = set()

    for index, item in enumerate(items):
        errors = item.validation_errors()
        if not errors and item.id in seen:
            errors = [f"Duplicate item id '{item.id}'"]
        if errors:
            reason = "; ".join(errors)
            logger.warning("Excluding item %r at index %d: %s", item.id, index, reason)
            excluded.append(ItemWarning(item_id=item.id, index=index, reason=reason))
            continue
        seen.add(item.id)
        valid.append(item)

    return valid, excluded


def normalize(
    items: Sequence[PhysicalItem],
    base_height: float,
    max_height_ratio: float = DEFAULT_MAX_HEIGHT_RATIO,
) -> NormalizationResult:
    """Rescale physical items so the median height maps to ``base_height``.

    Each item's raw height is first clamped into
    ``[ref / max_height_ratio, ref * max_height_ratio]``. The item's scale is
    then ``clamped * (base_height / ref) / raw``, applied to width, height and
    spine alike.

    Args:
        items: Physical items in caller order. May be empty.
        base_height: Positive height the reference item maps to.
        max_height_ratio: Outlier bound, at least 1.

    Returns:
        NormalizationResult with valid items in input order and the
        excluded ones reported.

    Raises:
        ValueError: If ``base_height`` is not positive or
            ``max_height_ratio`` is below 1.
    """
    if base_height <= 0:
        raise ValueError("base_height must be positive")
    if max_height_ratio < 1:
        raise ValueError("max_height_ratio must be at least 1")

    valid, excluded = _screen_items(items)
    ref = reference_height(valid)
    if not valid:
        return NormalizationResult(excluded=tuple(excluded))

    lower = ref / max_height_ratio
    upper = ref * max_height_ratio
    base_scale = base_height / ref

    normalized: list[NormalizedItem] = []
    for item in valid:
        bounded = min(max(item.height, lower), upper)
        scale = bounded * base_scale / item.height
        normalized.append(
            NormalizedItem(
                id=item.id,
                width=item.width * scale,
                height=item.height * scale,
                spine=item.spine * scale,
                clamped=bounded != item.height,
            )
        )

    logger.debug(
        "Normalized %d items against reference height %.3f (%d clamped)",
        len(normalized),
        ref,
        sum(1 for n in normalized if n.clamped),
    )

    return NormalizationResult(
        items=tuple(normalized),
        excluded=tuple(excluded),
        reference_height=ref,
    )
