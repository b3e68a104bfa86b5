"""Pydantic request schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field


class LayoutRequest(BaseModel):
    """Request for computing a layout from a full configuration."""

    config: dict[str, Any] = Field(..., description="Full shelf configuration JSON")
    container_width: float | None = Field(
        default=None,
        gt=0,
        description="Container width in pixels; overrides the configuration",
    )


class ConfigValidateRequest(BaseModel):
    """Request for validating a configuration."""

    config: dict[str, Any] = Field(..., description="Shelf configuration JSON")


class DimensionParseRequest(BaseModel):
    """Request for parsing a catalog dimension string."""

    text: str = Field(..., min_length=1, description='e.g. "9.2 x 6.1 x 1.3 inches"')
