"""Domain services."""

from .pricing import (
    DEFAULT_WASTE_FACTOR,
    BoxDimensions,
    MaterialCosts,
    MaterialGrade,
    QuoteBreakdown,
    QuoteInput,
    calculate_quote,
)

__all__ = [
    "DEFAULT_WASTE_FACTOR",
    "BoxDimensions",
    "MaterialCosts",
    "MaterialGrade",
    "QuoteBreakdown",
    "QuoteInput",
    "calculate_quote",
]
