"""Domain layer - the pure shelf layout engine."""

from .services import (
    DimensionParseError,
    RowPacker,
    ShelfLayoutEngine,
    compute_layout,
    derive,
    normalize,
    pack,
    parse_dimensions,
)
from .value_objects import (
    DEFAULT_LAYOUT_CONFIG,
    ItemWarning,
    LayoutConfig,
    LayoutItem,
    LayoutResult,
    LayoutWarning,
    NormalizedItem,
    PhysicalDimensions,
    PhysicalItem,
    RaggedAlign,
    Row,
)

__all__ = [
    "DEFAULT_LAYOUT_CONFIG",
    "DimensionParseError",
    "ItemWarning",
    "LayoutConfig",
    "LayoutItem",
    "LayoutResult",
    "LayoutWarning",
    "NormalizedItem",
    "PhysicalDimensions",
    "PhysicalItem",
    "RaggedAlign",
    "Row",
    "RowPacker",
    "ShelfLayoutEngine",
    "compute_layout",
    "derive",
    "normalize",
    "pack",
    "parse_dimensions",
]
