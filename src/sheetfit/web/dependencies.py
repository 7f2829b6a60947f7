"""FastAPI dependency injection for sheetfit services."""

from typing import Annotated

from fastapi import Depends

from sheetfit.infrastructure.llm import QuoteAnalyst
from sheetfit.infrastructure.quote_store import QuoteHistoryStore


def get_quote_store() -> QuoteHistoryStore:
    """Dependency for the quote history store (path from the environment)."""
    return QuoteHistoryStore()


def get_quote_analyst() -> QuoteAnalyst:
    """Dependency for the quote analyst."""
    return QuoteAnalyst()


QuoteStoreDep = Annotated[QuoteHistoryStore, Depends(get_quote_store)]
QuoteAnalystDep = Annotated[QuoteAnalyst, Depends(get_quote_analyst)]
