"""Pydantic response schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field


class LayoutItemSchema(BaseModel):
    """Final geometry of one laid out item."""

    id: str = Field(..., description="Item identifier")
    x: float = Field(..., description="Left edge including jitter")
    y: float = Field(..., description="Top edge")
    z: int = Field(..., description="Stacking order")
    w: float = Field(..., description="Rendered width")
    h: float = Field(..., description="Rendered height")
    d: float = Field(..., description="Rendered spine depth")
    ry: float = Field(..., description="Rotation about the vertical axis in degrees")
    row: int = Field(..., description="Row index")
    jx: float = Field(default=0.0, description="Jitter included in x")


class RowSchema(BaseModel):
    """One packed row."""

    index: int
    y: float
    height: float
    scale: float
    justified: bool
    overflow: bool
    item_ids: list[str] = Field(default_factory=list)


class ExcludedItemSchema(BaseModel):
    """Input item left out of the layout."""

    id: str = Field(..., description="Item identifier")
    index: int = Field(..., description="Position in the configuration's items")
    reason: str = Field(..., description="Why the item was excluded")


class LayoutWarningSchema(BaseModel):
    """Non-fatal packing condition."""

    message: str
    row: int | None = None
    id: str | None = None


class LayoutResponseSchema(BaseModel):
    """Response for layout computation."""

    container_width: float = Field(..., description="Width laid out for")
    breakpoint: float | None = Field(
        default=None, description="max_width of the breakpoint applied"
    )
    content_width: float = Field(..., description="Right edge of the widest row")
    content_height: float = Field(..., description="Bottom edge of the last row")
    row_count: int = Field(..., description="Number of rows")
    items: list[LayoutItemSchema] = Field(default_factory=list)
    rows: list[RowSchema] = Field(default_factory=list)
    warnings: list[LayoutWarningSchema] = Field(default_factory=list)
    excluded: list[ExcludedItemSchema] = Field(default_factory=list)


class ValidationResultSchema(BaseModel):
    """Response for configuration validation."""

    is_valid: bool = Field(..., description="Whether configuration is valid")
    errors: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation errors"
    )
    warnings: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation warnings"
    )


class DimensionsSchema(BaseModel):
    """Parsed physical dimensions."""

    width: float = Field(..., description="Cover width in millimetres")
    height: float = Field(..., description="Cover height in millimetres")
    spine: float = Field(..., description="Spine thickness in millimetres")
    unit: str = Field(default="mm")


class ErrorResponseSchema(BaseModel):
    """Standard error response."""

    error: str = Field(..., description="Error message")
    error_type: str = Field(..., description="Error type identifier")
    details: list[dict[str, Any]] | dict[str, Any] | None = Field(
        default=None, description="Additional error details"
    )
