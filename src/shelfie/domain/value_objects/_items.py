"""Item value objects flowing through the layout pipeline."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class PhysicalItem:
    """A catalog entry with real-world proportions.

    Dimensions are in a caller-defined unit (millimetres throughout the
    application layer). Construction never fails: invalid items must reach
    the normalizer so they can be reported back to the caller.

    Attributes:
        id: Opaque identifier, unique within one layout call.
        width: Cover width.
        height: Cover height.
        spine: Spine thickness.
    """

    id: str
    width: float
    height: float
    spine: float

    def validation_errors(self) -> list[str]:
        """Return the reasons this item cannot be laid out (empty if valid)."""
        errors: list[str] = []
        if not self.id:
            errors.append("Item id must not be empty")
        for name in ("width", "height", "spine"):
            value = getattr(self, name)
            if not isinstance(value, (int, float)) or not math.isfinite(value):
                errors.append(f"{name} must be a finite number (got {value!r})")
            elif value <= 0:
                errors.append(f"{name} must be positive (got {value!r})")
        return errors

    @property
    def is_valid(self) -> bool:
        """True if the item can be laid out."""
        return not self.validation_errors()

    @property
    def aspect_ratio(self) -> float:
        """Width over height."""
        return self.width / self.height


@dataclass(frozen=True)
class NormalizedItem:
    """An item rescaled against the shared base height.

    Attributes:
        id: Identifier carried over from the physical item.
        width: Normalized width.
        height: Normalized height.
        spine: Normalized spine thickness.
        clamped: True if the raw height was pulled into the outlier bound.
    """

    id: str
    width: float
    height: float
    spine: float
    clamped: bool = False

    @property
    def aspect_ratio(self) -> float:
        """Width over height."""
        return self.width / self.height

    def projected_width(self, row_height: float) -> float:
        """Width of the item when drawn at ``row_height``."""
        return self.width * (row_height / self.height)


@dataclass(frozen=True)
class PhysicalDimensions:
    """Parsed physical dimensions in millimetres."""

    width: float
    height: float
    spine: float

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0 or self.spine <= 0:
            raise ValueError("All dimensions must be positive")

    def to_item(self, item_id: str) -> PhysicalItem:
        """Create a layout input item carrying these dimensions."""
        return PhysicalItem(
            id=item_id, width=self.width, height=self.height, spine=self.spine
        )
