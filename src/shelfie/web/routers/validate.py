"""Configuration validation endpoints."""

from fastapi import APIRouter

from shelfie.application.config import load_config_from_dict, validate_config
from shelfie.web.schemas.requests import ConfigValidateRequest
from shelfie.web.schemas.responses import ErrorResponseSchema, ValidationResultSchema

router = APIRouter(prefix="/validate", tags=["validate"])


@router.post(
    "",
    response_model=ValidationResultSchema,
    responses={422: {"model": ErrorResponseSchema}},
)
async def validate_configuration(
    request: ConfigValidateRequest,
) -> ValidationResultSchema:
    """Validate a shelf configuration without laying it out.

    Schema failures are reported by the ConfigError handler as a 422.
    """
    config = load_config_from_dict(request.config)
    result = validate_config(config)

    return ValidationResultSchema(
        is_valid=result.is_valid,
        errors=[{"message": e.message, "path": e.path} for e in result.errors],
        warnings=[
            {"message": w.message, "path": w.path, "suggestion": w.suggestion}
            for w in result.warnings
        ],
    )
