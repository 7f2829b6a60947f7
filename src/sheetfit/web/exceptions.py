"""Custom exceptions and error handlers for the REST API."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from sheetfit.domain.errors import InvalidDimension, InvalidQuantity
from sheetfit.infrastructure.quote_store import QuoteStoreError


class EmptyHistoryError(Exception):
    """Raised when an analysis is requested with no saved quotes."""

    def __init__(self) -> None:
        super().__init__("No saved quotes to analyze")


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(InvalidDimension)
    async def invalid_dimension_handler(
        request: Request, exc: InvalidDimension
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": str(exc),
                "error_type": "invalid_dimension",
                "details": {"field": exc.field, "value": repr(exc.value)},
            },
        )

    @app.exception_handler(InvalidQuantity)
    async def invalid_quantity_handler(
        request: Request, exc: InvalidQuantity
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": str(exc),
                "error_type": "invalid_quantity",
                "details": {"label": exc.label, "value": repr(exc.value)},
            },
        )

    @app.exception_handler(EmptyHistoryError)
    async def empty_history_handler(
        request: Request, exc: EmptyHistoryError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=404,
            content={
                "error": str(exc),
                "error_type": "not_found",
                "details": None,
            },
        )

    @app.exception_handler(QuoteStoreError)
    async def quote_store_error_handler(
        request: Request, exc: QuoteStoreError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=500,
            content={
                "error": exc.message,
                "error_type": "quote_store",
                "details": {"line": exc.line},
            },
        )
