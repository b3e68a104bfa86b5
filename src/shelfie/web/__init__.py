"""FastAPI REST API for shelf layouts.

This module provides a REST API for computing layouts, validating
configurations and parsing catalog dimension strings.

Usage:
    uvicorn shelfie.web:app --reload
"""

from shelfie.web.app import app, create_app

__all__ = ["app", "create_app"]
