"""Domain services for the shelf layout engine.

This package provides the pipeline stages, their composition and a
parser for catalog dimension strings:
- Normalization of physical dimensions
- Greedy justified row packing
- Presentation parameters (jitter, tilt, stacking)
"""

from .dimensions import DimensionParseError, detect_unit, parse_dimensions
from .layout_engine import ShelfLayoutEngine, compute_layout
from .normalizer import DEFAULT_MAX_HEIGHT_RATIO, normalize, reference_height
from .presentation import derive, halton, item_seed, jitter_offset, tilt_angle
from .row_packer import RowPacker, pack

__all__ = [
    "DEFAULT_MAX_HEIGHT_RATIO",
    "DimensionParseError",
    "RowPacker",
    "ShelfLayoutEngine",
    "compute_layout",
    "derive",
    "detect_unit",
    "halton",
    "item_seed",
    "jitter_offset",
    "normalize",
    "pack",
    "parse_dimensions",
    "reference_height",
    "tilt_angle",
]
