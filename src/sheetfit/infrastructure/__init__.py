"""Infrastructure layer - packing engine, persistence and output."""

from .bin_packing import ShelfBinPacker, ShelfManager, calculate_efficiency, fit
from .formatters import (
    JsonExporter,
    PackResultFormatter,
    QuoteFormatter,
    QuoteHistoryFormatter,
)
from .quote_store import (
    QuoteHistoryStore,
    QuoteRecord,
    QuoteStoreError,
    default_store_path,
)

__all__ = [
    "JsonExporter",
    "PackResultFormatter",
    "QuoteFormatter",
    "QuoteHistoryFormatter",
    "QuoteHistoryStore",
    "QuoteRecord",
    "QuoteStoreError",
    "ShelfBinPacker",
    "ShelfManager",
    "calculate_efficiency",
    "default_store_path",
    "fit",
]
