"""Pydantic models for shelf layout configuration files.

A configuration file describes the items to lay out, the base layout
parameters, optional responsive breakpoints and, optionally, a container
width. Structural problems are rejected here; item dimensions are only
type-checked, because non-positive sizes are reported per item by the
engine rather than failing the whole file.
"""

from enum import Enum

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)

from shelfie.domain.value_objects import RaggedAlign

# Supported schema versions for configuration files
# Version 1.0: Initial schema with items, layout and breakpoints
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})


class UnitConfig(str, Enum):
    """Unit of the numeric item dimensions in a configuration file."""

    MM = "mm"
    CM = "cm"
    IN = "in"


class LayoutConfigSchema(BaseModel):
    """Base layout parameters.

    Attributes:
        base_height: Height the median item is normalized to.
        target_row_height: Nominal row height in pixels.
        gutter_x: Horizontal spacing between items.
        gutter_y: Vertical spacing between rows.
        jitter_x: Maximum horizontal jitter per item.
        max_tilt_y: Maximum tilt in degrees (0 to 90).
        ragged_last_row: Leave the final row unstretched.
        max_height_ratio: Outlier clamp factor around the median height.
        min_spine: Smallest rendered spine depth.
        spine_ratio_min: Spine/height ratio mapped to zero tilt.
        spine_ratio_max: Spine/height ratio mapped to full tilt.
        ragged_align: Alignment of rows narrower than the container.
        row_count: Fixed number of rows (greedy breaking when unset).
    """

    model_config = ConfigDict(extra="forbid")

    base_height: float = Field(default=200.0, gt=0)
    target_row_height: float = Field(default=200.0, gt=0)
    gutter_x: float = Field(default=12.0, ge=0)
    gutter_y: float = Field(default=14.0, ge=0)
    jitter_x: float = Field(default=6.0, ge=0)
    max_tilt_y: float = Field(default=10.0, ge=0, le=90)
    ragged_last_row: bool = True
    max_height_ratio: float = Field(default=1.5, ge=1)
    min_spine: float = Field(default=2.0, ge=0)
    spine_ratio_min: float = Field(default=0.05, ge=0)
    spine_ratio_max: float = Field(default=0.25, gt=0)
    ragged_align: RaggedAlign = RaggedAlign.LEFT
    row_count: int | None = Field(default=None, ge=1)

    @model_validator(mode="after")
    def validate_spine_ratio_range(self) -> "LayoutConfigSchema":
        """Ensure the tilt ratio range is not empty."""
        if self.spine_ratio_max <= self.spine_ratio_min:
            raise ValueError("spine_ratio_max must be greater than spine_ratio_min")
        return self


class LayoutOverridesSchema(BaseModel):
    """Partial layout parameters applied on top of the base layout.

    Every field is optional; only the fields present override the base.
    """

    model_config = ConfigDict(extra="forbid")

    base_height: float | None = Field(default=None, gt=0)
    target_row_height: float | None = Field(default=None, gt=0)
    gutter_x: float | None = Field(default=None, ge=0)
    gutter_y: float | None = Field(default=None, ge=0)
    jitter_x: float | None = Field(default=None, ge=0)
    max_tilt_y: float | None = Field(default=None, ge=0, le=90)
    ragged_last_row: bool | None = None
    max_height_ratio: float | None = Field(default=None, ge=1)
    min_spine: float | None = Field(default=None, ge=0)
    spine_ratio_min: float | None = Field(default=None, ge=0)
    spine_ratio_max: float | None = Field(default=None, gt=0)
    ragged_align: RaggedAlign | None = None
    row_count: int | None = Field(default=None, ge=1)


class BreakpointConfig(BaseModel):
    """Layout overrides for containers up to ``max_width`` pixels wide.

    Attributes:
        max_width: Largest container width the breakpoint applies to.
        layout: Overrides applied on top of the base layout.
    """

    model_config = ConfigDict(extra="forbid")

    max_width: float = Field(..., gt=0)
    layout: LayoutOverridesSchema = Field(default_factory=LayoutOverridesSchema)


class ItemConfig(BaseModel):
    """One catalog item.

    Either give the three numeric dimensions (in the file's ``unit``) or a
    free-text ``dimensions`` string such as ``"9 x 6 x 1 in"``.

    Attributes:
        id: Identifier, expected to be unique.
        width: Cover width.
        height: Cover height.
        spine: Spine thickness.
        dimensions: Free-text dimension string.
        title: Optional display title, used by text output only.
    """

    model_config = ConfigDict(extra="forbid")

    id: str = Field(..., min_length=1)
    width: float | None = None
    height: float | None = None
    spine: float | None = None
    dimensions: str | None = None
    title: str | None = None

    @model_validator(mode="after")
    def validate_dimension_source(self) -> "ItemConfig":
        """Require exactly one way of giving the item's size."""
        numeric = [self.width, self.height, self.spine]
        has_numeric = any(v is not None for v in numeric)
        if self.dimensions is not None and has_numeric:
            raise ValueError(
                "Specify either 'dimensions' or 'width'/'height'/'spine', not both"
            )
        if self.dimensions is None and any(v is None for v in numeric):
            raise ValueError(
                "Item needs 'width', 'height' and 'spine', or a 'dimensions' string"
            )
        return self


class ShelfConfiguration(BaseModel):
    """Root configuration model for a shelf layout.

    Attributes:
        schema_version: Version string in format "major.minor" (e.g., "1.0")
        container_width: Width to lay out for (may be given on the CLI instead)
        unit: Unit of numeric item dimensions
        layout: Base layout parameters
        breakpoints: Responsive overrides keyed by maximum container width
        items: Items in display order

    Example:
        >>> config = ShelfConfiguration(
        ...     schema_version="1.0",
        ...     container_width=800,
        ...     items=[ItemConfig(id="a", width=130, height=200, spine=20)],
        ... )
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(..., pattern=r"^\d+\.\d+$")
    container_width: float | None = Field(default=None, gt=0)
    unit: UnitConfig = UnitConfig.MM
    layout: LayoutConfigSchema = Field(default_factory=LayoutConfigSchema)
    breakpoints: list[BreakpointConfig] = Field(default_factory=list, max_length=20)
    items: list[ItemConfig] = Field(default_factory=list)

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Validate that schema version is supported.

        Newer minor versions within a supported major version are accepted
        for forward compatibility.
        """
        if v in SUPPORTED_VERSIONS:
            return v

        major_version = int(v.split(".")[0])
        supported_majors = {int(sv.split(".")[0]) for sv in SUPPORTED_VERSIONS}
        if major_version in supported_majors:
            return v

        raise ValueError(
            f"Unsupported schema version '{v}'. "
            f"Supported versions: {sorted(SUPPORTED_VERSIONS)}"
        )

    @field_validator("breakpoints")
    @classmethod
    def validate_unique_breakpoints(
        cls, v: list[BreakpointConfig]
    ) -> list[BreakpointConfig]:
        """Reject two breakpoints with the same ``max_width``."""
        widths = [bp.max_width for bp in v]
        if len(widths) != len(set(widths)):
            raise ValueError("Breakpoint max_width values must be unique")
        return v
