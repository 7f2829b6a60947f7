"""Prompts for quote history analysis.

The analyst sees a compact JSON view of recent quotes and is asked for a
short Markdown report with a summary, alerts and opportunities.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any, Sequence

if TYPE_CHECKING:
    from sheetfit.infrastructure.quote_store import QuoteRecord

# Margins below this percentage are flagged as a risk.
LOW_MARGIN_THRESHOLD = 25.0

# Volumes at or above this are treated as high-volume orders.
HIGH_VOLUME_THRESHOLD = 5000


ANALYST_SYSTEM_PROMPT = f"""You are an expert financial consultant for corrugated board manufacturing.

You review a history of recent box quotes and look for loss patterns and thin margins.

## Rules
1. Be direct and concise.
2. Give exactly 3 specific recommendations as bullet points.
3. If you see margins below {LOW_MARGIN_THRESHOLD:g}%, warn about the risk.
4. If you see high volumes with low margins, suggest a volume pricing strategy.

## Response format
**Summary**: [one sentence]
**Alerts**: [list of alerts]
**Opportunities**: [list of opportunities]
"""


def simplify_record(record: "QuoteRecord") -> dict[str, Any]:
    """Reduce a record to the fields the model needs."""
    return {
        "id": record.id,
        "dims": f"{record.length_cm:g}x{record.width_cm:g}x{record.height_cm:g}",
        "vol": record.volume,
        "mat": record.material_type,
        "cost": record.unit_cost,
        "price": record.final_unit_price,
        "margin": record.margin_percent,
        "profit": record.total_project_profit,
    }


def build_analysis_prompt(records: Sequence["QuoteRecord"]) -> str:
    """Build the user prompt embedding the quote history as JSON."""
    data = [simplify_record(r) for r in records]
    return (
        "Analyze the following history of recent quotes (JSON format):\n\n"
        f"{json.dumps(data, indent=2)}\n\n"
        "Identify patterns of losses or low margins."
    )
