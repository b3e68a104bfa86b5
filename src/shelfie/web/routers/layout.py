"""Layout computation endpoints."""

from fastapi import APIRouter

from shelfie.application.config import load_config_from_dict
from shelfie.application.dtos import LayoutOutput
from shelfie.web.dependencies import LayoutCommandDep
from shelfie.web.exceptions import LayoutComputationError
from shelfie.web.schemas.requests import LayoutRequest
from shelfie.web.schemas.responses import (
    ErrorResponseSchema,
    ExcludedItemSchema,
    LayoutItemSchema,
    LayoutResponseSchema,
    LayoutWarningSchema,
    RowSchema,
)

router = APIRouter(prefix="/layout", tags=["layout"])


def _layout_output_to_schema(output: LayoutOutput) -> LayoutResponseSchema:
    """Convert LayoutOutput to response schema."""
    result = output.result
    return LayoutResponseSchema(
        container_width=result.container_width,
        breakpoint=output.breakpoint_width,
        content_width=result.content_width,
        content_height=result.content_height,
        row_count=result.row_count,
        items=[LayoutItemSchema(**item.to_dict()) for item in result.items],
        rows=[
            RowSchema(
                index=row.index,
                y=row.y,
                height=row.height,
                scale=row.scale,
                justified=row.justified,
                overflow=row.overflow,
                item_ids=[item.id for item in row.items],
            )
            for row in result.rows
        ],
        warnings=[
            LayoutWarningSchema(message=w.message, row=w.row_index, id=w.item_id)
            for w in result.warnings
        ],
        excluded=[
            ExcludedItemSchema(id=w.item_id, index=w.index, reason=w.reason)
            for w in result.item_warnings
        ],
    )


@router.post(
    "",
    response_model=LayoutResponseSchema,
    responses={422: {"model": ErrorResponseSchema}},
)
async def compute_layout(
    request: LayoutRequest,
    command: LayoutCommandDep,
) -> LayoutResponseSchema:
    """Compute a shelf layout from a configuration.

    Raises:
        ConfigError: If the configuration fails schema validation.
        LayoutComputationError: If no container width is known or the
            effective layout parameters are unusable.
    """
    config = load_config_from_dict(request.config)
    output = command.execute(config, request.container_width)
    if not output.is_valid:
        raise LayoutComputationError(output.errors)
    return _layout_output_to_schema(output)
