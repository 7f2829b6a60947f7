"""Pytest configuration and shared fixtures for sheetfit tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from sheetfit.domain.services.pricing import BoxDimensions, MaterialGrade, QuoteInput
from sheetfit.infrastructure.quote_store import QuoteHistoryStore, QuoteRecord


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "integration: tests requiring external services (Ollama, etc.)"
    )
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


# =============================================================================
# Shared fixtures for quote history
# =============================================================================


@pytest.fixture
def store_path(tmp_path: Path) -> Path:
    """Path to a quote history file that does not exist yet."""
    return tmp_path / "history" / "quotes.jsonl"


@pytest.fixture
def quote_store(store_path: Path) -> QuoteHistoryStore:
    """An empty quote history store in a temporary directory."""
    return QuoteHistoryStore(store_path)


def _make_record(
    margin_percent: float = 30.0,
    volume: int = 1000,
    total_project_profit: float = 300.0,
    material_type: str = "A",
) -> QuoteRecord:
    return QuoteRecord(
        length_cm=30,
        width_cm=20,
        height_cm=15,
        material_type=material_type,
        volume=volume,
        margin_percent=margin_percent,
        unit_cost=0.9869,
        final_unit_price=1.2829,
        unit_profit=0.2961,
        total_project_profit=total_project_profit,
    )


@pytest.fixture
def make_record():
    """Factory for QuoteRecords with plausible values."""
    return _make_record


@pytest.fixture
def sample_quote() -> QuoteInput:
    """A 30x20x15 cm grade A box at default costs."""
    return QuoteInput(
        dimensions=BoxDimensions(30, 20, 15), material=MaterialGrade.A
    )
