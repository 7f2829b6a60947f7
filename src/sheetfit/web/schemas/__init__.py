"""Pydantic schemas for the REST API."""

from sheetfit.web.schemas.requests import (
    AnalysisRequest,
    ItemRequestSchema,
    OptimizeRequest,
    QuoteRequest,
    SheetSchema,
)
from sheetfit.web.schemas.responses import (
    AnalysisResponseSchema,
    ErrorResponseSchema,
    PackResultSchema,
    PlacedItemSchema,
    QuoteResponseSchema,
    UnplacedItemSchema,
)

__all__ = [
    # Requests
    "AnalysisRequest",
    "ItemRequestSchema",
    "OptimizeRequest",
    "QuoteRequest",
    "SheetSchema",
    # Responses
    "AnalysisResponseSchema",
    "ErrorResponseSchema",
    "PackResultSchema",
    "PlacedItemSchema",
    "QuoteResponseSchema",
    "UnplacedItemSchema",
]
