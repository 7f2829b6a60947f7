"""Application layer - job files and commands."""

from .commands import FitSheetCommand, QuoteCommand, QuoteOutcome

__all__ = [
    "FitSheetCommand",
    "QuoteCommand",
    "QuoteOutcome",
]
