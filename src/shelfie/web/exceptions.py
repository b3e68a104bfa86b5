"""Custom exceptions and error handlers for the REST API."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from shelfie.application.config import ConfigError
from shelfie.domain import DimensionParseError


class LayoutComputationError(Exception):
    """Raised when a layout cannot be computed for a valid configuration."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        super().__init__(f"Layout failed: {errors}")


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(ConfigError)
    async def config_error_handler(request: Request, exc: ConfigError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": exc.message,
                "error_type": exc.error_type,
                "details": exc.details or None,
            },
        )

    @app.exception_handler(LayoutComputationError)
    async def layout_error_handler(
        request: Request, exc: LayoutComputationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": "Layout computation failed",
                "error_type": "layout",
                "details": [{"message": e} for e in exc.errors],
            },
        )

    @app.exception_handler(DimensionParseError)
    async def dimension_parse_error_handler(
        request: Request, exc: DimensionParseError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": str(exc),
                "error_type": "dimension_parse",
                "details": {"text": exc.text, "reason": exc.reason},
            },
        )
