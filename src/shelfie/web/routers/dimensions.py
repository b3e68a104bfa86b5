"""Dimension string parsing endpoints."""

from fastapi import APIRouter

from shelfie.domain import parse_dimensions
from shelfie.web.schemas.requests import DimensionParseRequest
from shelfie.web.schemas.responses import DimensionsSchema, ErrorResponseSchema

router = APIRouter(prefix="/dimensions", tags=["dimensions"])


@router.post(
    "/parse",
    response_model=DimensionsSchema,
    responses={422: {"model": ErrorResponseSchema}},
)
async def parse_dimension_string(request: DimensionParseRequest) -> DimensionsSchema:
    """Parse a catalog dimension string into millimetres."""
    dimensions = parse_dimensions(request.text)
    return DimensionsSchema(
        width=dimensions.width,
        height=dimensions.height,
        spine=dimensions.spine,
    )
