"""API routers for the REST API."""

from shelfie.web.routers.dimensions import router as dimensions_router
from shelfie.web.routers.layout import router as layout_router
from shelfie.web.routers.validate import router as validate_router

__all__ = [
    "dimensions_router",
    "layout_router",
    "validate_router",
]
