"""Append-only history of saved quotes.

Quotes are stored one JSON object per line so saving never rewrites
earlier records. The store is only written when a user explicitly asks
to save a quote; the packing engine never touches it.
"""

from __future__ import annotations

import logging
import os
import uuid
from datetime import datetime, timezone
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from sheetfit.domain.services.pricing import QuoteBreakdown, QuoteInput

logger = logging.getLogger(__name__)

STORE_ENV_VAR = "SHEETFIT_QUOTE_STORE"
DEFAULT_STORE_PATH = Path.home() / ".sheetfit" / "quotes.jsonl"


class QuoteStoreError(Exception):
    """Raised when the history file cannot be read or parsed."""

    def __init__(self, message: str, path: Path, line: int | None = None) -> None:
        self.message = message
        self.path = path
        self.line = line
        super().__init__(message)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class QuoteRecord(BaseModel):
    """A saved pricing computation."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: uuid.uuid4().hex)
    created_at: datetime = Field(default_factory=_utcnow)
    length_cm: float
    width_cm: float
    height_cm: float
    material_type: str
    volume: int
    margin_percent: float
    unit_cost: float
    final_unit_price: float
    unit_profit: float
    total_project_profit: float

    @classmethod
    def from_breakdown(
        cls, quote: QuoteInput, breakdown: QuoteBreakdown
    ) -> "QuoteRecord":
        """Build a record from a priced quote."""
        return cls(
            length_cm=quote.dimensions.length,
            width_cm=quote.dimensions.width,
            height_cm=quote.dimensions.height,
            material_type=quote.material.value,
            volume=quote.volume,
            margin_percent=quote.margin_percent,
            unit_cost=round(breakdown.unit_cost, 4),
            final_unit_price=round(breakdown.unit_price, 4),
            unit_profit=round(breakdown.unit_profit, 4),
            total_project_profit=round(breakdown.total_profit, 2),
        )


def default_store_path() -> Path:
    """Resolve the history file from the environment, else the home default."""
    override = os.environ.get(STORE_ENV_VAR)
    return Path(override).expanduser() if override else DEFAULT_STORE_PATH


class QuoteHistoryStore:
    """JSON-lines file of QuoteRecords, newest appended last.

    Example:
        >>> store = QuoteHistoryStore(Path("quotes.jsonl"))
        >>> store.append(record)
        >>> store.recent(limit=10)
    """

    def __init__(self, path: Path | None = None) -> None:
        self.path = path if path is not None else default_store_path()

    def append(self, record: QuoteRecord) -> None:
        """Append one record, creating the file and its directory if needed."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("a", encoding="utf-8") as fh:
            fh.write(record.model_dump_json())
            fh.write("\n")
        logger.info("Saved quote %s to %s", record.id, self.path)

    def all(self) -> list[QuoteRecord]:
        """All records in the order they were saved.

        Raises:
            QuoteStoreError: If the file is unreadable or a line is invalid.
        """
        if not self.path.exists():
            return []

        try:
            lines = self.path.read_bytes().splitlines()
        except OSError as e:
            raise QuoteStoreError(
                f"Error reading quote history: {self.path}: {e}", path=self.path
            ) from e

        records: list[QuoteRecord] = []
        for lineno, raw in enumerate(lines, start=1):
            if not raw.strip():
                continue
            try:
                line = raw.decode("utf-8")
            except UnicodeDecodeError as e:
                raise QuoteStoreError(
                    f"Invalid quote record in {self.path} (line {lineno}): "
                    "not valid UTF-8",
                    path=self.path,
                    line=lineno,
                ) from e
            try:
                records.append(QuoteRecord.model_validate_json(line))
            except PydanticValidationError as e:
                raise QuoteStoreError(
                    f"Invalid quote record in {self.path} (line {lineno}): "
                    f"{e.error_count()} errors",
                    path=self.path,
                    line=lineno,
                ) from e
        return records

    def recent(self, limit: int = 50) -> list[QuoteRecord]:
        """The most recent ``limit`` records, newest first."""
        if limit < 1:
            raise ValueError("Limit must be at least 1")
        records = self.all()
        return list(reversed(records[-limit:]))
