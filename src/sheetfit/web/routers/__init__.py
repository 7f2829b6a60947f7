"""API routers for the REST API."""

from sheetfit.web.routers.optimize import router as optimize_router
from sheetfit.web.routers.quotes import router as quotes_router

__all__ = [
    "optimize_router",
    "quotes_router",
]
