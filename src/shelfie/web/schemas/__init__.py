"""Pydantic schemas for the REST API."""

from shelfie.web.schemas.requests import (
    ConfigValidateRequest,
    DimensionParseRequest,
    LayoutRequest,
)
from shelfie.web.schemas.responses import (
    DimensionsSchema,
    ErrorResponseSchema,
    ExcludedItemSchema,
    LayoutItemSchema,
    LayoutResponseSchema,
    LayoutWarningSchema,
    RowSchema,
    ValidationResultSchema,
)

__all__ = [
    # Requests
    "ConfigValidateRequest",
    "DimensionParseRequest",
    "LayoutRequest",
    # Responses
    "DimensionsSchema",
    "ErrorResponseSchema",
    "ExcludedItemSchema",
    "LayoutItemSchema",
    "LayoutResponseSchema",
    "LayoutWarningSchema",
    "RowSchema",
    "ValidationResultSchema",
]
