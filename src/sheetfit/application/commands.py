"""Application commands shared by the CLI and the REST API."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from sheetfit.application.config import (
    PackingJobConfiguration,
    config_to_items,
    config_to_sheet,
)
from sheetfit.domain.services.pricing import QuoteBreakdown, QuoteInput, calculate_quote
from sheetfit.domain.value_objects import PackResult
from sheetfit.infrastructure.bin_packing import ShelfBinPacker
from sheetfit.infrastructure.quote_store import QuoteHistoryStore, QuoteRecord

logger = logging.getLogger(__name__)


class FitSheetCommand:
    """Packs the items of a job file onto its sheet."""

    def execute(self, config: PackingJobConfiguration) -> PackResult:
        packer = ShelfBinPacker(config_to_sheet(config))
        return packer.fit(config_to_items(config))


@dataclass(frozen=True)
class QuoteOutcome:
    """A priced quote and, when saved, the stored record."""

    quote: QuoteInput
    breakdown: QuoteBreakdown
    record: QuoteRecord | None = None


class QuoteCommand:
    """Prices a quote and saves it to history on request.

    Attributes:
        store: History store written when ``save`` is True.
    """

    def __init__(self, store: QuoteHistoryStore) -> None:
        self.store = store

    def execute(self, quote: QuoteInput, save: bool = False) -> QuoteOutcome:
        breakdown = calculate_quote(quote)
        record = None
        if save:
            record = QuoteRecord.from_breakdown(quote, breakdown)
            self.store.append(record)
        else:
            logger.debug("Quote not saved")
        return QuoteOutcome(quote=quote, breakdown=breakdown, record=record)
