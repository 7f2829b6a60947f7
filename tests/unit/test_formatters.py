"""Tests for text and JSON output of packing results and quotes."""

from __future__ import annotations

import json

import pytest

from sheetfit.domain.services.pricing import QuoteInput, calculate_quote
from sheetfit.domain.value_objects import ItemRequest
from sheetfit.infrastructure.bin_packing import fit
from sheetfit.infrastructure.formatters import (
    JsonExporter,
    PackResultFormatter,
    QuoteFormatter,
    QuoteHistoryFormatter,
)


def _result():
    return fit(
        50,
        10,
        [
            ItemRequest(id=1, label="Flap", width=5, height=20),
            ItemRequest(id=2, label="Huge", width=80, height=80),
        ],
    )


class TestPackResultFormatter:
    def test_table(self) -> None:
        output = PackResultFormatter().format(_result())

        assert output.startswith("SHEET LAYOUT (50 x 10)")
        assert "Flap #1" in output
        assert "yes" in output
        assert "Placed: 1   Unplaced: 1   Efficiency: 20.0%" in output

    def test_unplaced_section(self) -> None:
        output = PackResultFormatter().format(_result())
        assert "DID NOT FIT" in output
        assert "Huge #1 (80 x 80)" in output

    def test_no_items(self) -> None:
        output = PackResultFormatter().format(fit(10, 10, []))
        assert "No items placed." in output
        assert "DID NOT FIT" not in output


class TestJsonExporter:
    def test_export(self) -> None:
        data = json.loads(JsonExporter().export(_result()))

        assert data["sheet"] == {"width": 50, "height": 10}
        assert data["placed"][0]["rotated"] is True
        assert data["unplaced"][0]["id"] == 2
        assert data["efficiency"] == pytest.approx(20.0)


class TestQuoteFormatter:
    def test_format(self, sample_quote: QuoteInput) -> None:
        output = QuoteFormatter().format(sample_quote, calculate_quote(sample_quote))

        assert "30 x 20 x 15 cm" in output
        assert "Grade A" in output
        assert "1.2829" in output
        assert "296.06" in output

    def test_to_json(self, sample_quote: QuoteInput) -> None:
        data = json.loads(
            QuoteFormatter().to_json(sample_quote, calculate_quote(sample_quote))
        )
        assert data["material"] == "A"
        assert data["volume"] == 1000
        assert round(data["unit_price"], 4) == 1.2829


class TestQuoteHistoryFormatter:
    def test_empty(self) -> None:
        assert QuoteHistoryFormatter().format([]) == "No saved quotes."

    def test_rows(self, make_record) -> None:
        output = QuoteHistoryFormatter().format([make_record(volume=1234)])
        assert output.startswith("QUOTE HISTORY")
        assert "30x20x15" in output
        assert "1234" in output
