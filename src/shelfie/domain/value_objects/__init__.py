"""Value objects for the shelf layout domain.

This module provides immutable data types used throughout the layout
pipeline. All classes are re-exported from sub-modules for convenience.
"""

from __future__ import annotations

# Pipeline items
from ._items import (
    NormalizedItem,
    PhysicalDimensions,
    PhysicalItem,
)

# Configuration and results
from ._layout import (
    DEFAULT_LAYOUT_CONFIG,
    ItemWarning,
    LayoutConfig,
    LayoutItem,
    LayoutResult,
    LayoutWarning,
    NormalizationResult,
    PackedItem,
    PackingResult,
    RaggedAlign,
    Row,
    validate_container_width,
)

__all__ = [
    "DEFAULT_LAYOUT_CONFIG",
    "ItemWarning",
    "LayoutConfig",
    "LayoutItem",
    "LayoutResult",
    "LayoutWarning",
    "NormalizationResult",
    "NormalizedItem",
    "PackedItem",
    "PackingResult",
    "PhysicalDimensions",
    "PhysicalItem",
    "RaggedAlign",
    "Row",
    "validate_container_width",
]
