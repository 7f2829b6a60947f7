"""Output formatters and exporters for packing results and quotes."""

from __future__ import annotations

import json
from dataclasses import asdict
from typing import TYPE_CHECKING

from sheetfit.domain.value_objects import PackResult

if TYPE_CHECKING:
    from sheetfit.domain.services.pricing import QuoteBreakdown, QuoteInput
    from sheetfit.infrastructure.quote_store import QuoteRecord


class PackResultFormatter:
    """Formats a packing result as a placement table."""

    def format(self, result: PackResult) -> str:
        sheet = result.sheet
        lines = [
            f"SHEET LAYOUT ({sheet.width:g} x {sheet.height:g})",
            "=" * 78,
            f"{'Item':<24} {'X':>8} {'Y':>8} {'Width':>8} {'Height':>8}  {'Rotated'}",
            "-" * 78,
        ]

        if not result.placed:
            lines.append("No items placed.")
        for placed in result.placed:
            label = f"{placed.item.label} #{placed.item.index + 1}"
            lines.append(
                f"{label:<24} {placed.x:>8g} {placed.y:>8g} "
                f"{placed.width:>8g} {placed.height:>8g}  "
                f"{'yes' if placed.rotated else ''}"
            )

        lines.append("-" * 78)
        lines.append(
            f"Placed: {len(result.placed)}   Unplaced: {len(result.unplaced)}   "
            f"Efficiency: {result.efficiency:.1f}%"
        )

        if result.unplaced:
            lines.append("")
            lines.append("DID NOT FIT")
            for item in result.unplaced:
                lines.append(
                    f"  {item.label} #{item.index + 1} ({item.width:g} x {item.height:g})"
                )

        return "\n".join(lines)


class JsonExporter:
    """Exports packing results as JSON."""

    def export(self, result: PackResult) -> str:
        return json.dumps(result.to_dict(), indent=2)


class QuoteFormatter:
    """Formats a priced quote for display."""

    def format(self, quote: "QuoteInput", breakdown: "QuoteBreakdown") -> str:
        dims = quote.dimensions
        lines = [
            "QUOTE",
            "=" * 50,
            f"Box:            {dims.length:g} x {dims.width:g} x {dims.height:g} cm",
            f"Material:       Grade {quote.material.value}",
            f"Board area:     {breakdown.area_final_m2:.4f} m2 "
            f"({breakdown.area_raw_cm2:.0f} cm2 raw x {quote.waste_factor:g})",
            "-" * 50,
            f"Material cost:  {breakdown.material_cost:>12.4f}",
            f"Fabrication:    {quote.fabrication_cost:>12.4f}",
            f"Marketing:      {quote.marketing_cost:>12.4f}",
            f"Unit cost:      {breakdown.unit_cost:>12.4f}",
            f"Unit price:     {breakdown.unit_price:>12.4f}  ({quote.margin_percent:g}% margin)",
            f"Unit profit:    {breakdown.unit_profit:>12.4f}",
            "-" * 50,
            f"Volume:         {quote.volume:>12}",
            f"Total cost:     {breakdown.total_cost:>12.2f}",
            f"Total revenue:  {breakdown.total_revenue:>12.2f}",
            f"Total profit:   {breakdown.total_profit:>12.2f}",
        ]
        return "\n".join(lines)

    def to_json(self, quote: "QuoteInput", breakdown: "QuoteBreakdown") -> str:
        data = {
            "material": quote.material.value,
            "volume": quote.volume,
            "margin_percent": quote.margin_percent,
            **asdict(breakdown),
        }
        return json.dumps(data, indent=2)


class QuoteHistoryFormatter:
    """Formats saved quotes, one per line."""

    def format(self, records: "list[QuoteRecord]") -> str:
        if not records:
            return "No saved quotes."

        lines = [
            "QUOTE HISTORY",
            "=" * 78,
            f"{'Date':<16} {'Box (cm)':<16} {'Mat':<4} {'Volume':>8} "
            f"{'Price':>9} {'Margin':>7} {'Profit':>11}",
            "-" * 78,
        ]
        for r in records:
            box = f"{r.length_cm:g}x{r.width_cm:g}x{r.height_cm:g}"
            lines.append(
                f"{r.created_at:%Y-%m-%d %H:%M} {box:<16} {r.material_type:<4} "
                f"{r.volume:>8} {r.final_unit_price:>9.4f} "
                f"{r.margin_percent:>6g}% {r.total_project_profit:>11.2f}"
            )
        return "\n".join(lines)
