"""FastAPI REST API for sheet packing and box quotes.

Usage:
    uvicorn sheetfit.web:app --reload
"""

from sheetfit.web.app import app, create_app

__all__ = ["app", "create_app"]
