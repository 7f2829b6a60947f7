"""Domain layer - core business logic."""

from .errors import InvalidDimension, InvalidQuantity, PackingInputError
from .services import (
    BoxDimensions,
    MaterialCosts,
    MaterialGrade,
    QuoteBreakdown,
    QuoteInput,
    calculate_quote,
)
from .value_objects import (
    ItemInstance,
    ItemRequest,
    PackResult,
    PlacedItem,
    StockSheet,
)

__all__ = [
    "BoxDimensions",
    "InvalidDimension",
    "InvalidQuantity",
    "ItemInstance",
    "ItemRequest",
    "MaterialCosts",
    "MaterialGrade",
    "PackResult",
    "PackingInputError",
    "PlacedItem",
    "QuoteBreakdown",
    "QuoteInput",
    "StockSheet",
    "calculate_quote",
]
